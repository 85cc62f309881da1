"""access_token 提供者"""
from typing import Optional, Protocol

from ..config_loader import OfficialOptions
from ..exceptions import AccessTokenMissingError


class AccessTokenProvider(Protocol):
    """获取与刷新 access_token 由具体实现负责"""

    async def get_access_token(self, options: OfficialOptions) -> str:
        ...


class StaticAccessTokenProvider:
    """使用固定的 access_token（参数优先，其次为配置中的 access_token）"""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    async def get_access_token(self, options: OfficialOptions) -> str:
        token = self._token or options.access_token
        if not token:
            raise AccessTokenMissingError("access_token 未配置，请设置 WECHAT_MP_ACCESS_TOKEN")
        return token
