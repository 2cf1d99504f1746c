"""Canonicalization rules applied while encoding policy documents.

Two documents that differ only in the order of their action, resource,
identifier or condition value lists, or in how they spell the wildcard
principal, encode to the same bytes. The list rule is a descending
lexicographic sort; the principal rule collapses a lone ``AWS``/``*``
principal whose only identifier is ``*`` to the bare string ``"*"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Sequence

from core.constants import WILDCARD, WILDCARD_PRINCIPAL_TYPES

if TYPE_CHECKING:  # pragma: no cover
    from core.config import CodecSettings
    from core.models import PolicyDocument, Principal


def sort_descending(values: Iterable[str]) -> list[str]:
    """Return a new list sorted in descending lexicographic order."""
    return sorted(values, reverse=True)


def collapse_string_list(values: Sequence[str]) -> str | list[str]:
    """Collapse a one-element list to its string, otherwise sort a copy descending."""
    if len(values) == 1:
        return values[0]
    return sort_descending(values)


def is_wildcard_principal(principals: Sequence["Principal"]) -> bool:
    if len(principals) != 1:
        return False
    principal = principals[0]
    if principal.type not in WILDCARD_PRINCIPAL_TYPES:
        return False
    identifiers: Any = principal.identifiers
    if isinstance(identifiers, str):
        return identifiers == WILDCARD
    if isinstance(identifiers, list):
        return identifiers == [WILDCARD]
    return False


def equivalent(left: "PolicyDocument", right: "PolicyDocument", settings: "CodecSettings | None" = None) -> bool:
    """Return True when both documents share one canonical encoding."""
    from core.codec.document import encode

    return encode(left, settings) == encode(right, settings)


__all__ = ["sort_descending", "collapse_string_list", "is_wildcard_principal", "equivalent"]
