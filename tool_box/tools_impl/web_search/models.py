"""
BigModel Web Search models

Request options accepted by the tool and the response body returned by the
BigModel ``web_search`` endpoint.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchEngine(str, Enum):
    """Search engines offered by BigModel"""

    STANDARD = "search_std"
    PRO = "search_pro"
    PRO_SOGOU = "search_pro_sogou"
    PRO_QUARK = "search_pro_quark"


class RecencyFilter(str, Enum):
    """Time window applied to results"""

    ONE_DAY = "oneDay"
    ONE_WEEK = "oneWeek"
    ONE_MONTH = "oneMonth"
    ONE_YEAR = "oneYear"
    NO_LIMIT = "noLimit"


class ContentSize(str, Enum):
    """Verbosity of each result's content"""

    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_SEARCH_ENGINE = SearchEngine.STANDARD
DEFAULT_COUNT = 10
MIN_COUNT = 1
MAX_COUNT = 50
DEFAULT_RECENCY_FILTER = RecencyFilter.NO_LIMIT
DEFAULT_CONTENT_SIZE = ContentSize.MEDIUM

# Advisory only, longer queries are still sent
RECOMMENDED_QUERY_LENGTH = 70


class SearchRequest(BaseModel):
    """Validated tool parameters.

    Optional fields stay ``None`` when omitted; defaults are filled in when the
    provider request body is built.
    """

    model_config = ConfigDict(extra="ignore")

    query: str = Field(..., min_length=1, description="Search query, recommended to be under 70 characters")
    search_engine: Optional[SearchEngine] = Field(default=None, description="Search engine to use")
    count: Optional[int] = Field(
        default=None, strict=True, ge=MIN_COUNT, le=MAX_COUNT, description="Number of results"
    )
    search_recency_filter: Optional[RecencyFilter] = Field(default=None, description="Time filter")
    content_size: Optional[ContentSize] = Field(default=None, description="Content detail level")
    search_domain_filter: Optional[str] = Field(default=None, description="Restrict results to a domain")

    @field_validator("query")
    def query_has_text(cls, value: str) -> str:
        if value.isspace():
            raise ValueError("Search query must contain non-whitespace characters")
        return value

    @property
    def effective_search_engine(self) -> SearchEngine:
        return self.search_engine or DEFAULT_SEARCH_ENGINE


class SearchResultItem(BaseModel):
    """Single search hit as returned by the provider"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    content: str
    link: str
    media: Optional[str] = None
    icon: Optional[str] = None
    refer: Optional[str] = None
    publish_date: Optional[str] = None


class SearchIntentItem(BaseModel):
    """Per-query search intent classification"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    query: str
    intent: str  # SEARCH_ALL | SEARCH_NONE | SEARCH_ALWAYS
    keywords: Optional[str] = None


class SearchResponse(BaseModel):
    """Body of a successful ``web_search`` call"""

    model_config = ConfigDict(extra="ignore")

    id: str
    created: int
    request_id: Optional[str] = None
    search_intent: Optional[List[SearchIntentItem]] = None
    search_result: List[SearchResultItem] = Field(default_factory=list)

    @field_validator("search_result", mode="before")
    def null_results_as_empty(cls, v):
        return [] if v is None else v
