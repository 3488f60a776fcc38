"""与 README “Instrumentation”章节对应的作用域计时器。"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional, TextIO

from easytiming.errors import TimingStateError
from easytiming.settings import sink_from_config
from easytiming.sinks import LogSink, QuietSink, Sink, StdoutSink, WriterSink

Clock = Callable[[], int]

REPORT_FORMAT = '"{label}" was running for {lapse} ns'


class Timing:
    """在作用域结束时报告耗时的计时器。

    构造时即记录单调时钟的起点；``with`` 块结束（正常返回、提前 return
    或异常展开）时调用 :meth:`finish`，向 sink 输出一行::

        "<label>" was running for <N> ns

    Args:
        label: 报告中原样输出的描述文本，可以为空。
        sink: 报告输出目标，缺省为标准输出。
        clock: 返回纳秒整数的单调时钟，缺省为 :func:`time.perf_counter_ns`。
    """

    def __init__(
        self,
        label: str = "",
        *,
        sink: Optional[Sink] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._clock = clock or time.perf_counter_ns
        self._label = str(label)
        self._sink = sink if sink is not None else StdoutSink()
        self._start = self._clock()
        self._lapse: int | None = None

    @classmethod
    def quiet(cls, label: str = "", *, clock: Optional[Clock] = None) -> "Timing":
        """只记录 ``lapse``、从不输出报告的计时器。"""

        return cls(label, sink=QuietSink(), clock=clock)

    @classmethod
    def with_writer(cls, label: str, writer: TextIO, *, clock: Optional[Clock] = None) -> "Timing":
        """将报告写入 ``writer``（任意带 ``write()`` 的类文件对象）。"""

        return cls(label, sink=WriterSink(writer), clock=clock)

    @classmethod
    def with_log(
        cls,
        label: str,
        logger: Optional[logging.Logger] = None,
        *,
        level: int = logging.DEBUG,
        clock: Optional[Clock] = None,
    ) -> "Timing":
        """通过 ``logging`` 输出报告，默认级别为 ``DEBUG``。"""

        return cls(label, sink=LogSink(logger, level=level), clock=clock)

    @classmethod
    def from_config(
        cls,
        label: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> "Timing":
        """按照 README “Configuration” 中的 ``sink`` 配置构造计时器。

        Args:
            label: 报告标签。
            config: ``load_config`` 返回的字典；为 ``None`` 时使用默认配置。
            clock: 可选的纳秒时钟。
        """

        return cls(label, sink=sink_from_config(config), clock=clock)

    @property
    def label(self) -> str:
        return self._label

    @property
    def start(self) -> int:
        return self._start

    @property
    def lapse(self) -> int | None:
        return self._lapse

    @property
    def finished(self) -> bool:
        return self._lapse is not None

    @property
    def elapsed(self) -> int:
        """当前已运行的纳秒数，不会结束计时器。"""

        return max(0, self._clock() - self._start)

    def finish(self) -> int:
        """结束计时并输出报告。

        Returns:
            从构造到结束的纳秒数。

        Raises:
            TimingStateError: 计时器已经结束过。
        """

        if self._lapse is not None:
            raise TimingStateError(f"Timing({self._label!r}) has already finished")
        self._lapse = self.elapsed
        self._sink.emit(self.report_line())
        return self._lapse

    def report_line(self) -> str:
        lapse = self._lapse if self._lapse is not None else self.elapsed
        return REPORT_FORMAT.format(label=self._label, lapse=lapse)

    def __enter__(self) -> "Timing":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.finish()
        return False

    async def __aenter__(self) -> "Timing":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        self.finish()
        return False

    def __str__(self) -> str:
        return f"Timing({self._label}) is running for {self.elapsed} ns"

    def __repr__(self) -> str:
        state = f"lapse={self._lapse}" if self.finished else "active"
        return f"Timing(label={self._label!r}, start={self._start}, {state}, sink={self._sink!r})"
