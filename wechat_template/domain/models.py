"""
模板消息接口的请求/响应模型。

字段名与微信公众平台文档保持一致：
https://developers.weixin.qq.com/doc/offiaccount/Message_Management/Template_Message_Interface.html
"""
from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel

from ..exceptions import WeChatAPIError


class TemplateMessageItem(BaseModel):
    """模板中单个占位符的取值"""

    value: str = Field(coerce_numbers_to_str=True)  # 数字按字符串发送
    color: Optional[str] = None  # 例如 "#173177"，不传则使用默认颜色


class TemplateMessage(RootModel[Dict[str, TemplateMessageItem]]):
    """
    模板消息内容：占位符名称 -> 取值。

    例如模板中的 {{first.DATA}} 对应 key "first"。
    """

    root: Dict[str, TemplateMessageItem] = Field(default_factory=dict)

    def add(self, name: str, value: str, color: Optional[str] = None) -> "TemplateMessage":
        self.root[name] = TemplateMessageItem(value=value, color=color)
        return self

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "TemplateMessage":
        """从 JSON 字符串解析，格式错误时抛出 pydantic.ValidationError"""
        return cls.model_validate_json(raw)

    def __getitem__(self, name: str) -> TemplateMessageItem:
        return self.root[name]

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


class MiniProgramRequest(BaseModel):
    """模板消息跳转的小程序"""

    appid: str
    pagepath: Optional[str] = None


class SendMessageRequest(BaseModel):
    touser: str
    template_id: str
    url: Optional[str] = None
    data: TemplateMessage
    miniprogram: Optional[MiniProgramRequest] = None
    client_msg_id: Optional[str] = None  # 防重入 id


class SetIndustryRequest(BaseModel):
    industry_id1: str
    industry_id2: str


class CreateTemplateRequest(BaseModel):
    template_id_short: str
    keyword_name_list: List[str] = Field(default_factory=list)


class DeleteTemplateRequest(BaseModel):
    template_id: str


class OfficialCommonResponse(BaseModel):
    """公众号接口通用返回：errcode / errmsg"""

    model_config = ConfigDict(extra="ignore")

    errcode: int = 0
    errmsg: str = "ok"

    def is_success(self) -> bool:
        return self.errcode == 0

    def raise_for_errcode(self) -> None:
        if self.errcode != 0:
            raise WeChatAPIError(self.errcode, self.errmsg)


class SendMessageResponse(OfficialCommonResponse):
    msgid: Optional[int] = None


class IndustryInfo(BaseModel):
    first_class: str = ""
    second_class: str = ""


class GetIndustryResponse(OfficialCommonResponse):
    primary_industry: Optional[IndustryInfo] = None
    secondary_industry: Optional[IndustryInfo] = None


class CreateTemplateResponse(OfficialCommonResponse):
    template_id: Optional[str] = None


class PrivateTemplate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    template_id: str = ""
    title: str = ""
    primary_industry: str = ""
    deputy_industry: str = ""
    content: str = ""
    example: str = ""


class GetAllPrivateTemplateResponse(OfficialCommonResponse):
    template_list: List[PrivateTemplate] = Field(default_factory=list)


def to_payload(body: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
    """请求模型 -> JSON 对象，未设置的可选字段不输出"""
    if body is None:
        return None
    return body.model_dump(mode="json", exclude_none=True, by_alias=True)
