"""easytiming 的日志工具。"""

from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: str, level: int = logging.INFO) -> "logging.Logger":
    """按照 README “Sinks” 章节返回配置好的 logger。

    Args:
        name: 调用方希望使用的日志名称，``LogSink`` 默认使用 ``easytiming``。
        level: logger 至少要接受的日志级别；已配置的 logger 只会被调低，不会被调高。

    Returns:
        配置了基础格式化器的 :class:`logging.Logger` 实例。
    """

    logger = logging.getLogger(name)
    if logger.handlers:
        if logger.level > level:
            logger.setLevel(level)
        return logger

    logger.setLevel(level)
    handler: Optional[logging.Handler] = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
