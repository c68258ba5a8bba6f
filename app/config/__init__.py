from .search_config import (
    BIGMODEL_API_KEY_ENV,
    BIGMODEL_WEB_SEARCH_URL,
    SearchSettings,
    get_bigmodel_api_key,
    get_search_settings,
    reset_dotenv_state,
)

__all__ = [
    "BIGMODEL_API_KEY_ENV",
    "BIGMODEL_WEB_SEARCH_URL",
    "SearchSettings",
    "get_bigmodel_api_key",
    "get_search_settings",
    "reset_dotenv_state",
]
