"""Namespace package re-exporting the policy document codec."""

from core import (
    Condition,
    PolicyDocument,
    PolicyStatement,
    Principal,
    decode,
    deduplicate_by_sid,
    encode,
    equivalent,
    from_wire,
    to_wire,
)
from core.config import CodecSettings, load_settings

__all__ = [
    "CodecSettings",
    "Condition",
    "PolicyDocument",
    "PolicyStatement",
    "Principal",
    "decode",
    "deduplicate_by_sid",
    "encode",
    "equivalent",
    "from_wire",
    "load_settings",
    "to_wire",
]


__version__ = "0.1.0"
