"""easytiming：以一行声明为函数或代码块计时。

    from easytiming import Timing

    def do_something():
        with Timing("do_something() function"):
            ...
"""

from easytiming.decorators import timed
from easytiming.errors import ConfigError, EasyTimingError, TimingStateError
from easytiming.future import timing
from easytiming.settings import load_config, sink_from_config
from easytiming.sinks import LogSink, QuietSink, StdoutSink, WriterSink
from easytiming.timing import Timing

__version__ = "0.1.0"

__all__ = [
    "Timing",
    "timed",
    "timing",
    "load_config",
    "sink_from_config",
    "StdoutSink",
    "WriterSink",
    "LogSink",
    "QuietSink",
    "EasyTimingError",
    "TimingStateError",
    "ConfigError",
]
