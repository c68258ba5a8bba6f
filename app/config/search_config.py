"""
Web Search 配置

统一管理 BigModel Web Search 相关的配置，包括 API Endpoint、鉴权参数
以及可选的请求超时。
"""

from dataclasses import dataclass
import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

BIGMODEL_API_KEY_ENV = "BIGMODEL_API_KEY"
BIGMODEL_WEB_SEARCH_URL = "https://open.bigmodel.cn/api/paas/v4/web_search"

_dotenv_loaded = False


@dataclass(slots=True)
class SearchSettings:
    """Web Search 模块配置"""

    bigmodel_api_key: Optional[str] = None
    bigmodel_api_url: str = BIGMODEL_WEB_SEARCH_URL
    # 为 None 时使用 aiohttp 默认超时
    bigmodel_timeout: Optional[float] = None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _load_dotenv_once() -> None:
    global _dotenv_loaded
    if _dotenv_loaded:
        return
    _dotenv_loaded = True
    if load_dotenv(find_dotenv(usecwd=True), override=False):
        logger.debug("Loaded environment variables from .env")


def get_bigmodel_api_key() -> Optional[str]:
    """读取 BigModel API Key，未配置时返回 None

    环境变量中缺失时，首次会尝试从工作目录的 ``.env`` 文件加载。
    """

    api_key = _env(BIGMODEL_API_KEY_ENV)
    if not api_key:
        _load_dotenv_once()
        api_key = _env(BIGMODEL_API_KEY_ENV)
    return api_key


def get_search_settings() -> SearchSettings:
    """读取环境变量并返回 SearchSettings

    不做缓存：每次调用都会重新读取鉴权参数。
    """

    api_url = _env("BIGMODEL_WEB_SEARCH_URL", BIGMODEL_WEB_SEARCH_URL)

    timeout: Optional[float] = None
    raw_timeout = _env("WEB_SEARCH_BIGMODEL_TIMEOUT")
    if raw_timeout is not None:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning("Ignoring invalid WEB_SEARCH_BIGMODEL_TIMEOUT=%r", raw_timeout)
        else:
            if timeout <= 0:
                logger.warning("Ignoring non-positive WEB_SEARCH_BIGMODEL_TIMEOUT=%r", raw_timeout)
                timeout = None

    return SearchSettings(
        bigmodel_api_key=get_bigmodel_api_key(),
        bigmodel_api_url=api_url or BIGMODEL_WEB_SEARCH_URL,
        bigmodel_timeout=timeout,
    )


def reset_dotenv_state() -> None:
    """测试场景下重置 .env 加载状态"""

    global _dotenv_loaded
    _dotenv_loaded = False
