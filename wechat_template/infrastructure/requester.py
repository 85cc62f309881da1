"""公众号 API 请求器"""
import json
from typing import Optional, Protocol, Type, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel

from ..config_loader import OfficialOptions
from ..domain.models import to_payload
from .access_token import AccessTokenProvider

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ApiRequester(Protocol):
    """
    发送请求并把返回的 JSON 反序列化为 response_type。

    body 为 None 时不发送请求体。
    """

    async def request(
        self,
        response_type: Type[ResponseT],
        url: str,
        method: str,
        body: Optional[BaseModel],
        options: OfficialOptions,
    ) -> ResponseT:
        ...


def _with_access_token(url: str, token: str) -> str:
    query = httpx.QueryParams({"access_token": token})
    if url.endswith("?") or url.endswith("&"):
        return f"{url}{query}"
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


class HttpxApiRequester:
    """
    基于 httpx.AsyncClient 的默认请求器。

    不做重试，也不解释 errcode：HTTP 错误以 httpx.HTTPStatusError 抛出，
    返回体无法解析时抛出 pydantic.ValidationError。
    传入的 client 由调用方负责关闭。
    """

    def __init__(
        self,
        access_token_provider: AccessTokenProvider,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._access_token_provider = access_token_provider
        self._client = client

    async def request(
        self,
        response_type: Type[ResponseT],
        url: str,
        method: str,
        body: Optional[BaseModel],
        options: OfficialOptions,
    ) -> ResponseT:
        token = await self._access_token_provider.get_access_token(options)
        payload = to_payload(body)

        content: Optional[bytes] = None
        headers = {}
        if payload is not None:
            # ensure_ascii=False，否则中文会以 \uXXXX 原样显示在消息中
            content = json.dumps(payload, ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = "application/json; charset=utf-8"

        logger.debug(f"[公众号API] {method} {url}")

        if self._client is not None:
            resp = await self._send(self._client, method, _with_access_token(url, token), content, headers, options)
        else:
            async with httpx.AsyncClient(timeout=options.timeout) as client:
                resp = await self._send(client, method, _with_access_token(url, token), content, headers, options)

        resp.raise_for_status()
        result = response_type.model_validate_json(resp.content)

        errcode = getattr(result, "errcode", 0)
        if errcode:
            logger.warning(f"[公众号API] {url} errcode={errcode}, errmsg={getattr(result, 'errmsg', '')}")

        return result

    @staticmethod
    async def _send(
        client: httpx.AsyncClient,
        method: str,
        url: str,
        content: Optional[bytes],
        headers: dict,
        options: OfficialOptions,
    ) -> httpx.Response:
        return await client.request(
            method,
            url,
            content=content,
            headers=headers,
            timeout=options.timeout,
        )
