"""Codec for fields that travel as either a string or a list of strings."""

from __future__ import annotations

from typing import Any

from core.errors import TypeMismatchError, UnsupportedShapeError
from core.models import StringOrList
from core.policy.canonical import collapse_string_list, sort_descending


def encode_string_or_list(value: StringOrList | None) -> StringOrList | None:
    """Return the wire value for an action/resource field, or None when it should be omitted.

    A lone empty string, bare or as the only list element, counts as empty.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    if not value:
        return None
    return collapse_string_list(value) or None


def decode_string_or_list(raw: Any, field: str) -> list[str]:
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, list):
        return decode_string_array(raw, field)
    raise UnsupportedShapeError(
        f"expected a string or an array of strings, got {describe_json_type(raw)}", field=field
    )


def decode_string_array(raw: list[Any], field: str) -> list[str]:
    values: list[str] = []
    for index, item in enumerate(raw):
        if not isinstance(item, str):
            raise TypeMismatchError(f"expected string, got {describe_json_type(item)}", field=f"{field}[{index}]")
        values.append(item)
    return values


def is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def merge_grouped_value(existing: StringOrList | None, incoming: StringOrList) -> StringOrList:
    """Fold one principal/condition value into the value already grouped under its key.

    A string replaces whatever is grouped. A list is appended to the grouped
    list (a grouped string becomes its first element) and the result is
    sorted descending.
    """
    if isinstance(incoming, str):
        return incoming
    if existing is None:
        merged = list(incoming)
    elif isinstance(existing, str):
        merged = [existing, *incoming]
    else:
        merged = [*existing, *incoming]
    return sort_descending(merged)


def describe_json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


__all__ = [
    "encode_string_or_list",
    "decode_string_or_list",
    "decode_string_array",
    "is_string_list",
    "merge_grouped_value",
    "describe_json_type",
]
