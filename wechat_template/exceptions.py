"""微信公众号 API 异常定义"""


class WeChatAPIError(Exception):
    """微信 API 返回非 0 错误码"""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class AccessTokenMissingError(Exception):
    """未配置 access_token"""
