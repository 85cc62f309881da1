"""日志配置模块"""

from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(logs_dir: Optional[Union[str, Path]] = None, level: str = "INFO") -> List[int]:
    """
    配置日志系统，将日志保存到文件。

    库代码只使用 loguru.logger，是否落盘由应用在启动时调用本函数决定。
    返回新增 sink 的 id，可用于 logger.remove()。
    """
    if logs_dir is None:
        project_root = Path(__file__).resolve().parent.parent.parent
        logs_dir = project_root / "logs"
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # 按日期轮转，保留30天，压缩旧日志
    handler_ids = []
    handler_ids.append(logger.add(
        logs_dir / "wechat_template_{time:YYYY-MM-DD}.log",
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        level=level,
        format=LOG_FORMAT,
        enqueue=True,
    ))

    # 只记录 ERROR 及以上级别
    handler_ids.append(logger.add(
        logs_dir / "error_{time:YYYY-MM-DD}.log",
        rotation="00:00",
        retention="90 days",
        compression="zip",
        encoding="utf-8",
        level="ERROR",
        format=LOG_FORMAT,
        enqueue=True,
    ))

    logger.info(f"日志系统已配置，日志文件保存在 {logs_dir}")
    return handler_ids
