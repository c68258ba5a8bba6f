from typing import Any, Dict, Optional


class WebSearchError(Exception):
    """Unified Web Search error type"""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        provider: str = "bigmodel",
        meta: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.provider = provider
        self.meta = meta or {}
        super().__init__(message)


class WebSearchConfigurationError(WebSearchError):
    """Required configuration (API key) is missing"""

    def __init__(self, message: str, *, key: str, provider: str = "bigmodel") -> None:
        super().__init__("missing_api_key", message, provider=provider, meta={"key": key})
        self.key = key


class WebSearchTransportError(WebSearchError):
    """Network failure or malformed success body"""


class WebSearchProviderError(WebSearchError):
    """Provider answered with a non-success HTTP status"""

    def __init__(self, message: str, *, status: int, provider: str = "bigmodel") -> None:
        super().__init__("http_error", message, provider=provider, meta={"status": status})
        self.status = status
