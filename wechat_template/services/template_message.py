"""模板消息服务"""
from typing import Any, Dict, List, Optional, Union

from ..config_loader import OfficialOptions
from ..domain.models import (
    CreateTemplateRequest,
    CreateTemplateResponse,
    DeleteTemplateRequest,
    GetAllPrivateTemplateResponse,
    GetIndustryResponse,
    MiniProgramRequest,
    OfficialCommonResponse,
    SendMessageRequest,
    SendMessageResponse,
    SetIndustryRequest,
    TemplateMessage,
)
from ..infrastructure.requester import ApiRequester

SEND_URL = "https://api.weixin.qq.com/cgi-bin/message/template/send?"
SET_INDUSTRY_URL = "https://api.weixin.qq.com/cgi-bin/template/api_set_industry?"
GET_INDUSTRY_URL = "https://api.weixin.qq.com/cgi-bin/template/get_industry?"
ADD_TEMPLATE_URL = "https://api.weixin.qq.com/cgi-bin/template/api_add_template?"
GET_ALL_PRIVATE_TEMPLATE_URL = "https://api.weixin.qq.com/cgi-bin/template/get_all_private_template?"
DEL_PRIVATE_TEMPLATE_URL = "https://api.weixin.qq.com/cgi-bin/template/del_private_template?"

HTTP_GET = "GET"
HTTP_POST = "POST"


class TemplateMessageService:
    """
    模板消息服务：发送模板消息、设置/获取所属行业、添加/获取/删除模板。

    每个方法只负责构造请求并交给 requester，返回值原样透传；
    errcode 不在这里解释，网络和鉴权异常同样直接抛给调用方。
    """

    def __init__(self, requester: ApiRequester, options: OfficialOptions):
        self._requester = requester
        self._options = options

    async def send_message(
        self,
        open_id: str,
        template_id: str,
        target_url: Optional[str],
        template_message: Union[TemplateMessage, Dict[str, Any]],
        mini_program: Optional[MiniProgramRequest] = None,
        client_msg_id: Optional[str] = None,
    ) -> SendMessageResponse:
        """
        发送模板消息。

        Args:
            open_id: 接收者的 OpenId
            template_id: 模板 ID
            target_url: 用户点击消息后跳转的链接
            template_message: 模板数据，TemplateMessage 或等价的 dict
            mini_program: 跳转的小程序，可不传
            client_msg_id: 防重入 id，可不传
        """
        request = SendMessageRequest(
            touser=open_id,
            template_id=template_id,
            url=target_url,
            # 复制一份，调用方之后修改 template_message 不影响本次请求
            data=TemplateMessage.model_validate(template_message).model_copy(deep=True),
            miniprogram=mini_program,
            client_msg_id=client_msg_id,
        )
        return await self._requester.request(
            SendMessageResponse, SEND_URL, HTTP_POST, request, self._options
        )

    async def send_message_json(
        self,
        open_id: str,
        template_id: str,
        target_url: Optional[str],
        template_message_json: Union[str, bytes],
        mini_program: Optional[MiniProgramRequest] = None,
        client_msg_id: Optional[str] = None,
    ) -> SendMessageResponse:
        """发送模板消息，模板数据为提前存储的 JSON 字符串；解析失败时抛出 ValidationError"""
        template_message = TemplateMessage.from_json(template_message_json)
        return await self.send_message(
            open_id,
            template_id,
            target_url,
            template_message,
            mini_program=mini_program,
            client_msg_id=client_msg_id,
        )

    async def set_industry(self, primary_industry: str, secondary_industry: str) -> OfficialCommonResponse:
        """
        设置模板消息所属行业（每月可修改 1 次）。

        行业代码见公众平台文档，这里不做校验。
        """
        request = SetIndustryRequest(industry_id1=primary_industry, industry_id2=secondary_industry)
        return await self._requester.request(
            OfficialCommonResponse, SET_INDUSTRY_URL, HTTP_POST, request, self._options
        )

    async def get_industry(self) -> GetIndustryResponse:
        """获取帐号设置的行业信息"""
        return await self._requester.request(
            GetIndustryResponse, GET_INDUSTRY_URL, HTTP_GET, None, self._options
        )

    async def create_template(
        self,
        template_short_id: str,
        keyword_name_list: Optional[List[str]] = None,
    ) -> CreateTemplateResponse:
        """
        根据模板库中的编号添加模板。

        Args:
            template_short_id: 模板库中模板的编号，如 "TM00015"，类目模板为纯数字
            keyword_name_list: 选用的关键词，按顺序传入；为空或不在模板库中时返回 40246
        """
        request = CreateTemplateRequest(
            template_id_short=template_short_id,
            keyword_name_list=list(keyword_name_list or []),
        )
        return await self._requester.request(
            CreateTemplateResponse, ADD_TEMPLATE_URL, HTTP_POST, request, self._options
        )

    async def get_all_private_template(self) -> GetAllPrivateTemplateResponse:
        """获取帐号下所有模板"""
        return await self._requester.request(
            GetAllPrivateTemplateResponse, GET_ALL_PRIVATE_TEMPLATE_URL, HTTP_GET, None, self._options
        )

    async def delete_template(self, template_id: str) -> OfficialCommonResponse:
        """根据模板 ID 删除帐号下的模板"""
        request = DeleteTemplateRequest(template_id=template_id)
        return await self._requester.request(
            OfficialCommonResponse, DEL_PRIVATE_TEMPLATE_URL, HTTP_POST, request, self._options
        )
