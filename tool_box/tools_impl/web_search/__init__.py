"""
BigModel Web Search tool package.

Expose the tool definition and handler compatible with existing toolbox integration.
"""

from typing import Any

from .handler import execute, web_search_handler
from .models import (
    DEFAULT_CONTENT_SIZE,
    DEFAULT_COUNT,
    DEFAULT_RECENCY_FILTER,
    DEFAULT_SEARCH_ENGINE,
    MAX_COUNT,
    MIN_COUNT,
    ContentSize,
    RecencyFilter,
    SearchEngine,
)
from .result import ToolResult

TOOL_NAME = "bigmodel_web_search"
TOOL_LABEL = "BigModel Web Search"

web_search_tool = {
    "name": TOOL_NAME,
    "label": TOOL_LABEL,
    "description": (
        "Search the web using BigModel AI search engine. Returns structured search results with titles, "
        "URLs, and content summaries optimized for AI processing. Supports multiple search engines "
        "(standard, pro, Sogou, Quark) and time/domain filters."
    ),
    "category": "information_retrieval",
    "parameters_schema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "minLength": 1,
                "description": "The search query to perform, recommended to be less than 70 characters",
            },
            "search_engine": {
                "type": "string",
                "description": (
                    "Search engine to use: search_std (standard), search_pro (advanced), "
                    "search_pro_sogou (Sogou), search_pro_quark (Quark)"
                ),
                "enum": [engine.value for engine in SearchEngine],
                "default": DEFAULT_SEARCH_ENGINE.value,
            },
            "count": {
                "type": "integer",
                "description": "Number of results to return (1-50, default 10)",
                "minimum": MIN_COUNT,
                "maximum": MAX_COUNT,
                "default": DEFAULT_COUNT,
            },
            "search_recency_filter": {
                "type": "string",
                "description": "Time filter: oneDay, oneWeek, oneMonth, oneYear, noLimit (default)",
                "enum": [recency.value for recency in RecencyFilter],
                "default": DEFAULT_RECENCY_FILTER.value,
            },
            "content_size": {
                "type": "string",
                "description": "Content detail level: medium (summary) or high (detailed)",
                "enum": [size.value for size in ContentSize],
                "default": DEFAULT_CONTENT_SIZE.value,
            },
            "search_domain_filter": {
                "type": "string",
                "description": "Limit search results to specific domain (e.g., example.com)",
            },
        },
        "required": ["query"],
    },
    "handler": web_search_handler,
    "tags": [
        "search",
        "web",
        "information",
        "retrieval",
        "bigmodel",
    ],
    "examples": [
        "Search for the latest AI news",
        "Restrict a search to docs.python.org",
        "News about open-source LLM releases from the past week",
    ],
}


def register(registry: Any) -> None:
    """Install the tool into a host registry exposing ``register(definition)``."""
    registry.register(web_search_tool)


__all__ = [
    "TOOL_LABEL",
    "TOOL_NAME",
    "ToolResult",
    "execute",
    "register",
    "web_search_handler",
    "web_search_tool",
]
