import pytest
from pydantic import ValidationError

from tool_box.tools_impl.web_search.models import (
    ContentSize,
    RecencyFilter,
    SearchEngine,
    SearchRequest,
    SearchResponse,
)


def test_omitted_options_stay_unset_after_validation():
    request = SearchRequest.model_validate({"query": "test"})
    assert request.search_engine is None
    assert request.count is None
    assert request.search_recency_filter is None
    assert request.content_size is None
    assert request.search_domain_filter is None
    assert request.effective_search_engine is SearchEngine.STANDARD


def test_enum_values_are_parsed():
    request = SearchRequest.model_validate(
        {
            "query": "test",
            "search_engine": "search_pro_quark",
            "search_recency_filter": "oneWeek",
            "content_size": "high",
            "count": 50,
        }
    )
    assert request.search_engine is SearchEngine.PRO_QUARK
    assert request.search_recency_filter is RecencyFilter.ONE_WEEK
    assert request.content_size is ContentSize.HIGH
    assert request.count == 50


@pytest.mark.parametrize("count", [0, 51, -3])
def test_count_out_of_range_is_rejected_not_clamped(count):
    with pytest.raises(ValidationError):
        SearchRequest.model_validate({"query": "test", "count": count})


@pytest.mark.parametrize(
    "field,value",
    [
        ("search_engine", "google"),
        ("search_recency_filter", "oneDecade"),
        ("content_size", "low"),
    ],
)
def test_values_outside_enum_are_rejected(field, value):
    with pytest.raises(ValidationError):
        SearchRequest.model_validate({"query": "test", field: value})


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_blank_query_is_rejected(query):
    with pytest.raises(ValidationError):
        SearchRequest.model_validate({"query": query})


def test_long_query_is_accepted():
    query = "x" * 200
    assert SearchRequest.model_validate({"query": query}).query == query


def test_unknown_keys_are_ignored():
    request = SearchRequest.model_validate({"query": "test", "session_id": "abc"})
    assert not hasattr(request, "session_id")


def test_response_preserves_result_order_and_intents():
    response = SearchResponse.model_validate(
        {
            "id": "r1",
            "created": 1,
            "request_id": "req-9",
            "search_intent": [{"query": "q", "intent": "SEARCH_NONE", "keywords": "k"}],
            "search_result": [
                {"title": "b", "content": "2", "link": "https://b"},
                {"title": "a", "content": "1", "link": "https://a"},
            ],
        }
    )
    assert [item.title for item in response.search_result] == ["b", "a"]
    assert response.search_intent[0].intent == "SEARCH_NONE"
    assert response.request_id == "req-9"


def test_response_without_results_is_empty():
    response = SearchResponse.model_validate({"id": "r1", "created": 1, "search_result": None})
    assert response.search_result == []


def test_result_items_are_immutable():
    response = SearchResponse.model_validate(
        {"id": "r1", "created": 1, "search_result": [{"title": "t", "content": "c", "link": "l"}]}
    )
    with pytest.raises(ValidationError):
        response.search_result[0].title = "changed"


@pytest.mark.parametrize("count", [True, "7", 7.0])
def test_count_must_be_a_real_integer(count):
    with pytest.raises(ValidationError):
        SearchRequest.model_validate({"query": "test", "count": count})


def test_query_with_surrounding_whitespace_is_kept_verbatim():
    assert SearchRequest.model_validate({"query": "  asyncio  "}).query == "  asyncio  "
