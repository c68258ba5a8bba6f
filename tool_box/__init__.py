"""Toolbox: tool definitions and the registry that hosts them."""

from .registry import ToolRegistry, default_registry

__all__ = ["ToolRegistry", "default_registry"]
