import json
import logging
from typing import Any, Dict

import aiohttp
from pydantic import ValidationError

from app.config import SearchSettings

from ..exceptions import WebSearchError, WebSearchProviderError, WebSearchTransportError
from ..models import (
    DEFAULT_CONTENT_SIZE,
    DEFAULT_COUNT,
    DEFAULT_RECENCY_FILTER,
    SearchRequest,
    SearchResponse,
)

logger = logging.getLogger(__name__)


def build_payload(request: SearchRequest) -> Dict[str, Any]:
    """Translate validated tool options into the BigModel request body."""
    payload: Dict[str, Any] = {
        "search_query": request.query,
        "search_engine": request.effective_search_engine.value,
        # Intent detection is always off for this tool
        "search_intent": False,
        "count": request.count if request.count is not None else DEFAULT_COUNT,
        "search_recency_filter": (request.search_recency_filter or DEFAULT_RECENCY_FILTER).value,
        "content_size": (request.content_size or DEFAULT_CONTENT_SIZE).value,
    }

    if request.search_domain_filter:
        payload["search_domain_filter"] = request.search_domain_filter

    return payload


def _extract_error_message(raw_text: str, status: int) -> str:
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        data = None

    message = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            message = error.get("message")

    if message is None:
        return f"HTTP {status}"
    return str(message)


def _parse_response(raw_text: str) -> SearchResponse:
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise WebSearchTransportError(
            code="invalid_response",
            message=f"Invalid JSON response: {exc}",
        ) from exc

    try:
        return SearchResponse.model_validate(data)
    except ValidationError as exc:
        raise WebSearchTransportError(
            code="invalid_response",
            message=f"Unexpected response format: {exc.error_count()} validation error(s)",
            meta={"errors": exc.errors(include_url=False)},
        ) from exc


async def search(
    *,
    request: SearchRequest,
    api_key: str,
    settings: SearchSettings,
) -> SearchResponse:
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload = build_payload(request)

    session_kwargs: Dict[str, Any] = {"trust_env": True}
    if settings.bigmodel_timeout:
        session_kwargs["timeout"] = aiohttp.ClientTimeout(total=settings.bigmodel_timeout)

    logger.info(
        "BigModel web search: engine=%s count=%s",
        payload["search_engine"],
        payload["count"],
    )

    try:
        async with aiohttp.ClientSession(**session_kwargs) as session:
            async with session.post(settings.bigmodel_api_url, headers=headers, json=payload) as response:
                raw_text = await response.text()
                if not 200 <= response.status < 300:
                    message = _extract_error_message(raw_text, response.status)
                    raise WebSearchProviderError(
                        f"BigModel API error: {message}",
                        status=response.status,
                    )
    except WebSearchError:
        raise
    except Exception as exc:
        logger.error("BigModel web search request failed: %s", exc, exc_info=True)
        message = str(exc).strip() or f"{type(exc).__name__}"
        raise WebSearchTransportError(
            code="request_failed",
            message=message,
        ) from exc

    return _parse_response(raw_text)
