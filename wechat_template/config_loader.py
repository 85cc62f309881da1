import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values
from loguru import logger


DEFAULT_TIMEOUT = 10.0


def _project_root() -> Path:
    # wechat_template/config_loader.py -> project_root
    return Path(__file__).resolve().parents[1]


def _env_file_path() -> Path:
    """获取 .env 文件路径"""
    return _project_root() / ".env"


@dataclass(frozen=True)
class OfficialOptions:
    """
    公众号配置。

    - app_id / app_secret：公众号凭据，仅供外部 access_token 提供者使用
    - access_token：直接配置的 access_token（可选）
    - timeout：单次请求超时时间（秒）
    """

    app_id: str = ""
    app_secret: str = ""
    access_token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        # 不输出敏感信息
        return f"OfficialOptions(app_id={self.app_id!r}, timeout={self.timeout})"


def _read_env(env_file: Optional[Path]) -> Dict[str, str]:
    path = env_file or _env_file_path()
    if not path.exists():
        return {}

    try:
        values = dotenv_values(path, encoding="utf-8")
    except Exception as exc:  # noqa: BLE001
        logger.error(f"Failed to read .env file: {exc}")
        return {}

    return {k: v for k, v in values.items() if v is not None}


def load_official_options(env_file: Optional[Union[str, Path]] = None) -> OfficialOptions:
    """
    加载公众号配置。

    优先从 .env 文件读取，如果不存在则从环境变量读取：
      WECHAT_MP_APPID / WECHAT_MP_SECRET / WECHAT_MP_ACCESS_TOKEN / WECHAT_MP_TIMEOUT
    """
    file_values = _read_env(Path(env_file) if env_file else None)

    def _get(key: str) -> str:
        return (file_values.get(key) or os.getenv(key, "")).strip()

    timeout = DEFAULT_TIMEOUT
    raw_timeout = _get("WECHAT_MP_TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
            if timeout <= 0:
                raise ValueError("timeout must be positive")
        except (TypeError, ValueError):
            logger.warning(f"Invalid WECHAT_MP_TIMEOUT={raw_timeout!r}, fallback to {DEFAULT_TIMEOUT}.")
            timeout = DEFAULT_TIMEOUT

    options = OfficialOptions(
        app_id=_get("WECHAT_MP_APPID"),
        app_secret=_get("WECHAT_MP_SECRET"),
        access_token=_get("WECHAT_MP_ACCESS_TOKEN") or None,
        timeout=timeout,
    )

    # 不记录敏感信息
    if options.app_id and options.app_secret:
        logger.info("微信公众号配置已加载")
    else:
        logger.warning("微信公众号 AppID 或 Secret 未配置")

    return options
