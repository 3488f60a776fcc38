"""计时报告的输出目标（README “Sinks” 章节）。

每个 sink 只需实现 ``emit(line)``。写入失败不会在这里捕获，
异常会沿着 ``Timing.finish`` 传播给持有作用域的调用方。
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, TextIO

from easytiming.utils.logging import get_logger


class Sink(Protocol):
    def emit(self, line: str) -> None: ...


class StdoutSink:
    """默认输出：每条报告打印一行到当前的 ``sys.stdout``。"""

    def emit(self, line: str) -> None:
        print(line)

    def __repr__(self) -> str:
        return "StdoutSink()"


class WriterSink:
    """写入任意带 ``write()`` 方法的类文件对象。"""

    def __init__(self, writer: TextIO) -> None:
        self.writer = writer

    def emit(self, line: str) -> None:
        self.writer.write(line + "\n")
        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()

    def __repr__(self) -> str:
        return f"WriterSink({self.writer!r})"


class LogSink:
    """通过标准库 ``logging`` 输出报告。

    Args:
        logger: 目标 logger，缺省时使用 ``get_logger("easytiming")``。
        level: 报告使用的日志级别，默认 ``DEBUG``。
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self.logger = logger if logger is not None else get_logger("easytiming", level=level)
        self.level = level

    def emit(self, line: str) -> None:
        self.logger.log(self.level, line)

    def __repr__(self) -> str:
        return f"LogSink({self.logger.name!r}, level={logging.getLevelName(self.level)})"


class QuietSink:
    def emit(self, line: str) -> None:
        return None

    def __repr__(self) -> str:
        return "QuietSink()"
