"""对 awaitable 计时：在其完成或抛出异常时报告耗时。"""

from __future__ import annotations

from typing import Any, Awaitable, Coroutine, Optional, TypeVar

from easytiming.sinks import Sink
from easytiming.timing import Clock, Timing

T = TypeVar("T")


def timing(
    awaitable: Awaitable[T],
    label: str,
    *,
    sink: Optional[Sink] = None,
    clock: Optional[Clock] = None,
) -> Coroutine[Any, Any, T]:
    """包装 ``awaitable``，返回一个等待它并交回结果的协程。

    计时器在调用 ``timing(...)`` 时立即创建，因此报告覆盖从包装到
    ``awaitable`` 完成（或抛出异常）的全部时间，包括被 await 之前的等待。

    Args:
        awaitable: 需要计时的协程、Task 或 Future。
        label: 报告标签。
        sink: 可选输出目标。
        clock: 可选纳秒时钟。
    """

    timer = Timing(label, sink=sink, clock=clock)

    async def run() -> T:
        async with timer:
            return await awaitable

    return run()
