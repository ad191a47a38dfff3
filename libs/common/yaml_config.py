from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """
    Read a YAML config file whose top-level node is a mapping.

    An empty file yields an empty mapping so the pydantic model can report
    the missing sections itself.
    """
    if not path.is_file():
        raise FileNotFoundError(f"YAML config not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML config must be a mapping, got {type(data).__name__}: {path}")

    return data
