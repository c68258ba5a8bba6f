"""In-process tool registry for hosts embedding the toolbox."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("name", "description", "parameters_schema", "handler")


class ToolRegistry:
    """Maps tool names to toolbox-style definition dicts."""

    def __init__(self) -> None:
        self._tools: Dict[str, Dict[str, Any]] = {}

    def register(self, definition: Mapping[str, Any]) -> None:
        missing = [key for key in REQUIRED_KEYS if not definition.get(key)]
        if missing:
            raise ValueError(f"Tool definition is missing required keys: {', '.join(missing)}")
        if not callable(definition["handler"]):
            raise TypeError(f"Handler of tool '{definition['name']}' is not callable")

        name = str(definition["name"])
        if name in self._tools:
            logger.warning("Tool name conflict: '%s' is already registered and will be replaced", name)
        self._tools[name] = dict(definition)
        logger.debug("Registered tool '%s'", name)

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        return self._tools.get(name)

    def list_tools(self) -> List[str]:
        return list(self._tools.keys())

    async def invoke(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Call a registered tool's handler with keyword parameters."""
        definition = self._tools.get(name)
        if definition is None:
            raise KeyError(f"Unknown tool '{name}'. Available tools: {self.list_tools()}")

        result = definition["handler"](**dict(params or {}))
        if inspect.isawaitable(result):
            result = await result
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


default_registry = ToolRegistry()
