"""加载 easytiming 的 YAML 配置并构造对应的 sink。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from easytiming.errors import ConfigError
from easytiming.sinks import LogSink, QuietSink, Sink, StdoutSink
from easytiming.utils.io import read_yaml
from easytiming.utils.logging import get_logger

DEFAULTS_PATH = Path(__file__).resolve().parent / "config" / "defaults.yaml"

SINK_KINDS = ("stdout", "log", "quiet")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """加载默认配置，并合并来自 ``path`` 的可选覆盖配置。

    Args:
        path: 用户 YAML 文件路径；为空时只返回默认配置。

    Returns:
        合并后的配置字典。

    Raises:
        FileNotFoundError: ``path`` 指向的文件不存在。
    """

    config = read_yaml(str(DEFAULTS_PATH))
    if not path:
        return config

    user_cfg = read_yaml(path, required=True)
    return _merge_dicts(config, user_cfg)


def sink_from_config(config: Optional[Dict[str, Any]] = None) -> "Sink":
    """根据 ``config["sink"]`` 构造报告输出目标。

    Raises:
        ConfigError: ``kind`` 或 ``level`` 无法识别。
    """

    if config is None:
        config = load_config()
    sink_cfg = config.get("sink") or {}
    kind = str(sink_cfg.get("kind", "stdout")).lower()
    if kind == "stdout":
        return StdoutSink()
    if kind == "quiet":
        return QuietSink()
    if kind == "log":
        level = _parse_level(sink_cfg.get("level", "DEBUG"))
        logger = get_logger(str(sink_cfg.get("logger", "easytiming")), level=level)
        return LogSink(logger, level=level)
    raise ConfigError(f"Unknown sink kind '{kind}'; expected one of {', '.join(SINK_KINDS)}.")


def _parse_level(value: Any) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level '{value}'.")
    return level


def _merge_dicts(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """将 ``overrides`` 叠加到 ``base`` 上；两侧都是字典的键递归合并，其余键直接覆盖。"""

    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        both_dicts = isinstance(current, dict) and isinstance(value, dict)
        merged[key] = _merge_dicts(current, value) if both_dicts else value
    return merged
