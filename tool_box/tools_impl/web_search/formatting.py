"""Render BigModel search results as plain text for LLM consumption."""

from typing import List, Sequence

from .models import SearchResultItem

NO_RESULTS_TEXT = "No search results found."
RESULT_SEPARATOR = "\n\n---\n\n"


def _format_item(index: int, item: SearchResultItem) -> str:
    parts: List[str] = [f"[{index}] {item.title}"]
    if item.media:
        parts.append(f"Source: {item.media}")
    if item.publish_date:
        parts.append(f"Published: {item.publish_date}")
    parts.append(f"URL: {item.link}")
    parts.append(f"Content: {item.content}")
    return "\n".join(parts)


def format_search_results(results: Sequence[SearchResultItem]) -> str:
    """Number results from 1 in provider order and join them with a rule."""
    if not results:
        return NO_RESULTS_TEXT
    return RESULT_SEPARATOR.join(
        _format_item(index, item) for index, item in enumerate(results, start=1)
    )


def format_heading(query: str) -> str:
    return f'## Web Search Results for: "{query}"'


def format_response_text(query: str, results: Sequence[SearchResultItem]) -> str:
    return f"{format_heading(query)}\n\n{format_search_results(results)}"
