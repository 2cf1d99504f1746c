"""JSON codec for policy documents."""

from .document import decode, encode, from_wire, to_wire

__all__ = ["decode", "encode", "from_wire", "to_wire"]
