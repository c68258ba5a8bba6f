"""
BigModel Web Search handler

Validates tool parameters, calls the provider once and converts every outcome
into a ToolResult. Nothing raised below this module reaches the host.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from app.config import BIGMODEL_API_KEY_ENV, SearchSettings, get_search_settings

from .exceptions import WebSearchConfigurationError, WebSearchError
from .formatting import format_response_text
from .models import RECOMMENDED_QUERY_LENGTH, SearchRequest
from .providers import bigmodel_rest
from .result import ToolResult

logger = logging.getLogger(__name__)

ApiKeyProvider = Callable[[], Optional[str]]
SettingsProvider = Callable[[], SearchSettings]


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error.get("loc", ())) or "parameters"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(problems)


def _missing_key_error() -> WebSearchConfigurationError:
    return WebSearchConfigurationError(
        f"{BIGMODEL_API_KEY_ENV} environment variable is not set",
        key=BIGMODEL_API_KEY_ENV,
    )


async def execute(
    query: Any,
    options: Optional[Mapping[str, Any]] = None,
    *,
    api_key_provider: Optional[ApiKeyProvider] = None,
    settings_provider: SettingsProvider = get_search_settings,
) -> ToolResult:
    """Run one BigModel web search.

    Args:
        query: Search query string.
        options: Optional ``search_engine``, ``count``, ``search_recency_filter``,
            ``content_size`` and ``search_domain_filter`` values.
        api_key_provider: Returns the API key; defaults to the configured key.
        settings_provider: Returns SearchSettings; read on every call.

    Returns:
        ToolResult with formatted text, or with ``details["error"]`` set.
    """
    try:
        params: Dict[str, Any] = dict(options or {})
        params["query"] = query
        request = SearchRequest.model_validate(params)
    except ValidationError as exc:
        message = f"Invalid web search parameters: {_describe_validation_error(exc)}"
        logger.warning("Rejected web search parameters: %s", message)
        return ToolResult.fail(f"Error: {message}", message, code="invalid_parameters")
    except (TypeError, ValueError) as exc:
        message = f"Invalid web search parameters: options must be a mapping ({exc})"
        logger.warning("Rejected web search options of type %s", type(options).__name__)
        return ToolResult.fail(f"Error: {message}", message, code="invalid_parameters")

    if len(request.query) > RECOMMENDED_QUERY_LENGTH:
        logger.debug(
            "Query exceeds the recommended %d characters (%d)",
            RECOMMENDED_QUERY_LENGTH,
            len(request.query),
        )

    try:
        settings = settings_provider()
        api_key = api_key_provider() if api_key_provider is not None else settings.bigmodel_api_key
        if not api_key:
            raise _missing_key_error()
    except WebSearchConfigurationError as exc:
        logger.warning("BigModel web search unavailable: %s", exc.message)
        return ToolResult.fail(
            f"Error: {exc.message}. Please set it to use the BigModel web search API.",
            exc.message,
            code=exc.code,
        )
    except Exception as exc:
        logger.error("Failed to load web search settings: %s", exc, exc_info=True)
        message = str(exc).strip() or type(exc).__name__
        return ToolResult.fail(f"Error performing web search: {message}", message, code="config_error")

    try:
        response = await bigmodel_rest.search(request=request, api_key=api_key, settings=settings)
    except WebSearchError as exc:
        logger.warning("BigModel web search failed [%s]: %s", exc.code, exc.message)
        return ToolResult.fail(f"Error performing web search: {exc.message}", exc.message, code=exc.code)
    except Exception as exc:
        logger.error("Unexpected web search failure: %s", exc, exc_info=True)
        message = str(exc).strip() or type(exc).__name__
        return ToolResult.fail(f"Error performing web search: {message}", message, code="unexpected_error")

    results = response.search_result
    logger.info("BigModel web search returned %d result(s)", len(results))

    return ToolResult.ok(
        format_response_text(request.query, results),
        query=request.query,
        result_count=len(results),
        search_engine=request.effective_search_engine.value,
    )


async def web_search_handler(
    query: Any = None,
    search_engine: Optional[str] = None,
    count: Optional[int] = None,
    search_recency_filter: Optional[str] = None,
    content_size: Optional[str] = None,
    search_domain_filter: Optional[str] = None,
    **_: Any,
) -> ToolResult:
    """Toolbox entry point; keyword arguments mirror ``parameters_schema``."""
    options = {
        "search_engine": search_engine,
        "count": count,
        "search_recency_filter": search_recency_filter,
        "content_size": content_size,
        "search_domain_filter": search_domain_filter,
    }
    return await execute(query, {key: value for key, value in options.items() if value is not None})
