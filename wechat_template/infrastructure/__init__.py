"""基础设施层：日志、access_token、HTTP 请求器"""

from .logging import setup_logging
from .access_token import AccessTokenProvider, StaticAccessTokenProvider
from .requester import ApiRequester, HttpxApiRequester

__all__ = [
    "setup_logging",
    "AccessTokenProvider",
    "StaticAccessTokenProvider",
    "ApiRequester",
    "HttpxApiRequester",
]
