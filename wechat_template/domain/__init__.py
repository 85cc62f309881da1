"""领域层：模板消息请求/响应模型"""

from .models import (
    CreateTemplateRequest,
    CreateTemplateResponse,
    DeleteTemplateRequest,
    GetAllPrivateTemplateResponse,
    GetIndustryResponse,
    IndustryInfo,
    MiniProgramRequest,
    OfficialCommonResponse,
    PrivateTemplate,
    SendMessageRequest,
    SendMessageResponse,
    SetIndustryRequest,
    TemplateMessage,
    TemplateMessageItem,
)

__all__ = [
    "CreateTemplateRequest",
    "CreateTemplateResponse",
    "DeleteTemplateRequest",
    "GetAllPrivateTemplateResponse",
    "GetIndustryResponse",
    "IndustryInfo",
    "MiniProgramRequest",
    "OfficialCommonResponse",
    "PrivateTemplate",
    "SendMessageRequest",
    "SendMessageResponse",
    "SetIndustryRequest",
    "TemplateMessage",
    "TemplateMessageItem",
]
