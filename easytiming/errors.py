"""easytiming 的异常定义。"""

from __future__ import annotations


class EasyTimingError(Exception):
    """easytiming 所有异常的基类。"""


class TimingStateError(EasyTimingError):
    """对已经结束的计时器再次执行 ``finish``。"""


class ConfigError(EasyTimingError):
    """配置中出现未知的 sink 类型或日志级别。"""
