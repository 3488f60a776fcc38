"""读取 YAML 配置的 IO 辅助函数。"""

from __future__ import annotations

from pathlib import Path

import yaml


def read_yaml(path: str, required: bool = False) -> dict:
    """按 README “Configuration” 描述从 ``path`` 读取 YAML 配置。

    Args:
        path: YAML 文件路径，例如 ``easytiming/config/defaults.yaml``。
        required: 为 ``True`` 时文件缺失会抛出异常，否则返回空字典。

    Returns:
        解析后的字典；空文件同样返回空字典。

    Raises:
        FileNotFoundError: ``required`` 为真且文件不存在。
    """

    yaml_path = Path(path)
    if not yaml_path.is_file():
        if required:
            raise FileNotFoundError(f"Config file '{path}' not found.")
        return {}
    with yaml_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    return data if isinstance(data, dict) else {}
