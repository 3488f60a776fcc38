"""为函数调用加上作用域计时的装饰器。"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Optional

from easytiming.sinks import Sink
from easytiming.timing import Clock, Timing


def timed(
    label: str | Callable[..., Any] | None = None,
    *,
    sink: Optional[Sink] = None,
    clock: Optional[Clock] = None,
):
    """每次调用被装饰函数时创建一个 :class:`Timing`，调用结束即报告。

    既可写作 ``@timed``，也可写作 ``@timed("label")``。缺省标签为
    ``"<qualname>() function"``。协程函数的计时覆盖整个 ``await`` 过程；
    生成器与异步生成器的计时覆盖整个迭代，直到耗尽或被关闭。
    """

    if callable(label):
        return timed(sink=sink, clock=clock)(label)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = label if label is not None else f"{func.__qualname__}() function"

        if inspect.isasyncgenfunction(func):

            @functools.wraps(func)
            async def async_gen_wrapper(*args, **kwargs):
                async with Timing(name, sink=sink, clock=clock):
                    async for item in func(*args, **kwargs):
                        yield item

            return async_gen_wrapper

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                async with Timing(name, sink=sink, clock=clock):
                    return await func(*args, **kwargs)

            return async_wrapper

        if inspect.isgeneratorfunction(func):

            @functools.wraps(func)
            def gen_wrapper(*args, **kwargs):
                with Timing(name, sink=sink, clock=clock):
                    return (yield from func(*args, **kwargs))

            return gen_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with Timing(name, sink=sink, clock=clock):
                return func(*args, **kwargs)

        return wrapper

    return decorator
