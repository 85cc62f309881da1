"""微信公众号模板消息客户端"""

from .config_loader import OfficialOptions, load_official_options
from .domain import (
    GetAllPrivateTemplateResponse,
    GetIndustryResponse,
    CreateTemplateResponse,
    MiniProgramRequest,
    OfficialCommonResponse,
    SendMessageResponse,
    TemplateMessage,
    TemplateMessageItem,
)
from .exceptions import AccessTokenMissingError, WeChatAPIError
from .infrastructure import (
    ApiRequester,
    HttpxApiRequester,
    StaticAccessTokenProvider,
    setup_logging,
)
from .services import TemplateMessageService

__all__ = [
    "OfficialOptions",
    "load_official_options",
    "GetAllPrivateTemplateResponse",
    "GetIndustryResponse",
    "CreateTemplateResponse",
    "MiniProgramRequest",
    "OfficialCommonResponse",
    "SendMessageResponse",
    "TemplateMessage",
    "TemplateMessageItem",
    "AccessTokenMissingError",
    "WeChatAPIError",
    "ApiRequester",
    "HttpxApiRequester",
    "StaticAccessTokenProvider",
    "setup_logging",
    "TemplateMessageService",
]
