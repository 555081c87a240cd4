"""
Logging setup.
提供全域 logger，並將 extra={...} 的欄位附加在訊息後方。
"""
import logging
import sys

from src.config import settings

LOGGER_NAME = "game_collection"

# LogRecord 原生屬性，不視為 extra 欄位
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ExtraFieldsFormatter(logging.Formatter):
    """在標準格式之後附加 `key=value` 形式的 extra 欄位。"""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if extras:
            fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
            message = f"{message} | {fields}"
        return message


def setup_logger(level: str = settings.log_level) -> logging.Logger:
    """
    初始化應用程式 logger，重複呼叫不會重複加入 handler。
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            ExtraFieldsFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """取得子 logger，例如 get_logger("repository.game")。"""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger = setup_logger()
