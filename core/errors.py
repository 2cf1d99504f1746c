"""Exceptions raised by the policy document codec."""

from __future__ import annotations


class PolicyCodecError(Exception):
    """Base class for every codec failure."""


class PolicyDecodeError(PolicyCodecError, ValueError):
    """Wire input that cannot be turned into a document.

    ``field`` is the wire path of the offending value, e.g.
    ``Statement[1].Condition.StringEquals.aws:SourceVpc``.
    """

    def __init__(self, message: str, field: str = "") -> None:
        super().__init__(f"{field}: {message}" if field else message)
        self.field = field


class UnsupportedShapeError(PolicyDecodeError):
    """A JSON value matches none of the shapes accepted for its field."""


class TypeMismatchError(PolicyDecodeError):
    """An array element is not the scalar type the field requires."""


class PolicyEncodeError(PolicyCodecError, TypeError):
    """A document built in memory holds a value the wire form cannot express."""


class UnsupportedPrincipalShapeError(PolicyEncodeError):
    """Principal identifiers are neither a string nor a list of strings."""


class UnsupportedConditionShapeError(PolicyEncodeError):
    """Condition values are neither a string nor a list of strings."""


__all__ = [
    "PolicyCodecError",
    "PolicyDecodeError",
    "UnsupportedShapeError",
    "TypeMismatchError",
    "PolicyEncodeError",
    "UnsupportedPrincipalShapeError",
    "UnsupportedConditionShapeError",
]
