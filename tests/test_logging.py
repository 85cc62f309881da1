"""日志配置测试"""
from loguru import logger

from wechat_template.infrastructure.logging import setup_logging


def test_setup_logging_writes_files(tmp_path):
    logs_dir = tmp_path / "logs"

    handler_ids = setup_logging(logs_dir)
    try:
        logger.info("模板消息 info")
        logger.error("模板消息 error")
    finally:
        # remove 会等待 enqueue 的日志写完
        for handler_id in handler_ids:
            logger.remove(handler_id)

    main_logs = list(logs_dir.glob("wechat_template_*.log"))
    error_logs = list(logs_dir.glob("error_*.log"))
    assert len(main_logs) == 1
    assert len(error_logs) == 1

    main_text = main_logs[0].read_text(encoding="utf-8")
    error_text = error_logs[0].read_text(encoding="utf-8")
    assert "模板消息 info" in main_text
    assert "模板消息 error" in main_text
    assert "模板消息 info" not in error_text
    assert "模板消息 error" in error_text
