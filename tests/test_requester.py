"""httpx 请求器测试"""
import json

import httpx
import pytest
from pydantic import ValidationError

from wechat_template.config_loader import OfficialOptions
from wechat_template.domain.models import (
    GetIndustryResponse,
    OfficialCommonResponse,
    SendMessageRequest,
    SendMessageResponse,
    TemplateMessage,
)
from wechat_template.exceptions import AccessTokenMissingError
from wechat_template.infrastructure.access_token import StaticAccessTokenProvider
from wechat_template.infrastructure.requester import HttpxApiRequester, _with_access_token

SEND_URL = "https://api.weixin.qq.com/cgi-bin/message/template/send?"
GET_INDUSTRY_URL = "https://api.weixin.qq.com/cgi-bin/template/get_industry?"


class TestHttpxApiRequester:
    """HttpxApiRequester 测试类"""

    @pytest.fixture
    def options(self):
        return OfficialOptions(app_id="wx123", app_secret="secret", access_token="TOKEN", timeout=5.0)

    @pytest.fixture
    def captured(self):
        return []

    def _client(self, captured, status_code=200, content=b'{"errcode": 0, "errmsg": "ok"}'):
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(status_code, content=content)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    @pytest.mark.asyncio
    async def test_post_sends_json_with_access_token(self, options, captured):
        client = self._client(captured, content=b'{"errcode": 0, "errmsg": "ok", "msgid": 200228332}')
        requester = HttpxApiRequester(StaticAccessTokenProvider(), client=client)
        body = SendMessageRequest(
            touser="oUser123",
            template_id="tpl001",
            data=TemplateMessage().add("first", "您好"),
        )

        result = await requester.request(SendMessageResponse, SEND_URL, "POST", body, options)

        assert isinstance(result, SendMessageResponse)
        assert result.msgid == 200228332
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == SEND_URL + "access_token=TOKEN"
        assert request.headers["content-type"].startswith("application/json")
        # 中文不应被转义
        assert "您好".encode("utf-8") in request.content
        assert json.loads(request.content) == {
            "touser": "oUser123",
            "template_id": "tpl001",
            "data": {"first": {"value": "您好"}},
        }
        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self, options, captured):
        content = json.dumps(
            {
                "primary_industry": {"first_class": "运输与仓储", "second_class": "快递"},
                "secondary_industry": {"first_class": "IT科技", "second_class": "互联网|电子商务"},
            }
        ).encode("utf-8")
        client = self._client(captured, content=content)
        requester = HttpxApiRequester(StaticAccessTokenProvider("OTHER"), client=client)

        result = await requester.request(GetIndustryResponse, GET_INDUSTRY_URL, "GET", None, options)

        request = captured[0]
        assert request.method == "GET"
        assert request.content == b""
        assert request.url.params["access_token"] == "OTHER"
        assert result.primary_industry.second_class == "快递"
        assert result.secondary_industry.first_class == "IT科技"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_errcode_is_not_raised(self, options, captured):
        """errcode 非 0 时原样返回"""
        client = self._client(captured, content=b'{"errcode": 40037, "errmsg": "invalid template_id"}')
        requester = HttpxApiRequester(StaticAccessTokenProvider(), client=client)

        result = await requester.request(OfficialCommonResponse, SEND_URL, "POST", None, options)

        assert result.errcode == 40037
        assert not result.is_success()
        await client.aclose()

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, options, captured):
        client = self._client(captured, status_code=502, content=b"bad gateway")
        requester = HttpxApiRequester(StaticAccessTokenProvider(), client=client)

        with pytest.raises(httpx.HTTPStatusError):
            await requester.request(OfficialCommonResponse, SEND_URL, "POST", None, options)
        await client.aclose()

    @pytest.mark.asyncio
    async def test_invalid_response_raises(self, options, captured):
        client = self._client(captured, content=b"<html>oops</html>")
        requester = HttpxApiRequester(StaticAccessTokenProvider(), client=client)

        with pytest.raises(ValidationError):
            await requester.request(OfficialCommonResponse, SEND_URL, "POST", None, options)
        await client.aclose()

    @pytest.mark.asyncio
    async def test_missing_token_fails_before_request(self, captured):
        client = self._client(captured)
        requester = HttpxApiRequester(StaticAccessTokenProvider(), client=client)

        with pytest.raises(AccessTokenMissingError):
            await requester.request(OfficialCommonResponse, SEND_URL, "POST", None, OfficialOptions())

        assert captured == []
        await client.aclose()


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://api.weixin.qq.com/cgi-bin/x?", "https://api.weixin.qq.com/cgi-bin/x?access_token=T%2BK"),
        ("https://api.weixin.qq.com/cgi-bin/x", "https://api.weixin.qq.com/cgi-bin/x?access_token=T%2BK"),
        ("https://api.weixin.qq.com/cgi-bin/x?a=1", "https://api.weixin.qq.com/cgi-bin/x?a=1&access_token=T%2BK"),
    ],
)
def test_with_access_token(url, expected):
    assert _with_access_token(url, "T+K") == expected
