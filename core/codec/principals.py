"""Principal set codec: grouping by type on encode, wildcard handling both ways."""

from __future__ import annotations

from typing import Any, Sequence

from core.constants import WILDCARD
from core.errors import UnsupportedPrincipalShapeError, UnsupportedShapeError
from core.models import Principal, PrincipalSet, StringOrList
from core.policy.canonical import is_wildcard_principal

from .fields import describe_json_type, is_string_list, merge_grouped_value


def encode_principal_set(principals: Sequence[Principal], *, sort_keys: bool = False) -> str | dict[str, StringOrList]:
    """Return the wire value for a Principal/NotPrincipal field.

    A lone ``AWS`` or ``*`` principal with identifier ``*`` becomes the bare
    string ``"*"``. Everything else is one key per principal type, in the
    order the types are first seen unless ``sort_keys`` is set.
    """
    if is_wildcard_principal(principals):
        return WILDCARD

    grouped: dict[str, StringOrList] = {}
    for principal in principals:
        identifiers: Any = principal.identifiers
        if not isinstance(identifiers, str) and not is_string_list(identifiers):
            raise UnsupportedPrincipalShapeError(
                f"Unsupported identifiers for principal type {principal.type!r}: {type(identifiers).__name__}"
            )
        grouped[principal.type] = merge_grouped_value(grouped.get(principal.type), identifiers)

    if sort_keys:
        return dict(sorted(grouped.items()))
    return grouped


def decode_principal_set(raw: Any, field: str) -> PrincipalSet:
    if isinstance(raw, str):
        # Any bare string is read as the wildcard principal.
        return [Principal(type=WILDCARD, identifiers=[WILDCARD])]
    if isinstance(raw, dict):
        return [Principal(type=key, identifiers=value) for key, value in raw.items()]
    raise UnsupportedShapeError(
        f"expected \"*\" or an object of principal types, got {describe_json_type(raw)}", field=field
    )


__all__ = ["encode_principal_set", "decode_principal_set"]
