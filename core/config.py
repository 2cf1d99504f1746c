"""Configuration loader for the policy document codec."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_PATH = Path("iamdoc.yml")
CONFIG_ENV = "IAMDOC_CONFIG"

DEFAULTS = {
    "indent": None,
    "sort_keys": False,
    "ensure_ascii": False,
}


@dataclass(slots=True)
class CodecSettings:
    indent: int | None = DEFAULTS["indent"]
    sort_keys: bool = DEFAULTS["sort_keys"]
    ensure_ascii: bool = DEFAULTS["ensure_ascii"]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "CodecSettings":
        indent = data.get("indent", DEFAULTS["indent"])
        return cls(
            indent=int(indent) if indent is not None else None,
            sort_keys=bool(data.get("sort_keys", DEFAULTS["sort_keys"])),
            ensure_ascii=bool(data.get("ensure_ascii", DEFAULTS["ensure_ascii"])),
        )

    @property
    def separators(self) -> tuple[str, str]:
        if self.indent is None:
            return (",", ":")
        return (",", ": ")


def load_settings(path: Path | None = None) -> CodecSettings:
    if path is None:
        path = Path(os.getenv(CONFIG_ENV) or CONFIG_PATH)

    if not path.exists():
        return CodecSettings()

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    if not isinstance(data, dict):
        raise ValueError("Configuration file must be a mapping of keys to values.")

    return CodecSettings.from_mapping(data)


__all__ = ["CodecSettings", "load_settings"]
