from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = Path("config.yaml")

DEFAULT_UNIQUE_ID = "ROW_KEY"
DEFAULT_INPUT_TABLE = "INPUT_TABLE"


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with open(cfg_path, "r") as f:
        return yaml.safe_load(f) or {}


@dataclass(frozen=True)
class EncodingOptions:
    """Naming and SQL policy shared by the matrix and the generated query."""

    sep: str = "_"
    ws_replace: bool = True
    ws_replace_with: str = ""
    unique_id: Optional[str] = None
    input_table_name: Optional[str] = None

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "EncodingOptions":
        enc = cfg.get("encoding") or {}
        sep = enc.get("sep", "_")
        return cls(
            sep="" if sep is None else str(sep),
            ws_replace=bool(enc.get("ws_replace", True)),
            ws_replace_with=str(enc.get("ws_replace_with", "") or ""),
            unique_id=enc.get("unique_id"),
            input_table_name=enc.get("input_table_name"),
        )


__all__ = [
    "load_config",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_UNIQUE_ID",
    "DEFAULT_INPUT_TABLE",
    "EncodingOptions",
]
