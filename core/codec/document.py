"""Encode policy documents to canonical JSON and decode them back."""

from __future__ import annotations

import json
import logging
from typing import Any

from core.config import CodecSettings
from core.errors import PolicyDecodeError, UnsupportedShapeError
from core.models import PolicyDocument, PolicyStatement

from .conditions import decode_condition_set, encode_condition_set
from .fields import decode_string_or_list, describe_json_type, encode_string_or_list
from .principals import decode_principal_set, encode_principal_set

logger = logging.getLogger(__name__)

# (wire key, model attribute) for the string-or-list fields, in wire order.
_STRING_OR_LIST_FIELDS = (
    ("Action", "actions"),
    ("NotAction", "not_actions"),
    ("Resource", "resources"),
    ("NotResource", "not_resources"),
)
_PRINCIPAL_FIELDS = (
    ("Principal", "principals"),
    ("NotPrincipal", "not_principals"),
)


def encode(document: PolicyDocument, settings: CodecSettings | None = None) -> bytes:
    """Serialize ``document`` to canonical JSON bytes.

    Raises a ``PolicyEncodeError`` subclass when a principal or condition holds
    a value that is neither a string nor a list of strings.
    """
    settings = settings or CodecSettings()
    payload = to_wire(document, settings)
    rendered = json.dumps(
        payload,
        indent=settings.indent,
        separators=settings.separators,
        ensure_ascii=settings.ensure_ascii,
    )
    logger.debug("Encoded policy document with %d statement(s)", len(document.statements))
    return rendered.encode("utf-8")


def decode(data: bytes | str) -> PolicyDocument:
    """Parse JSON text into a ``PolicyDocument``.

    Raises a ``PolicyDecodeError`` subclass naming the offending field; no
    partially decoded document is ever returned.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PolicyDecodeError(f"policy document is not valid UTF-8: {exc}") from exc
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as exc:
        raise PolicyDecodeError(f"policy document is not valid JSON: {exc.msg} at line {exc.lineno}") from exc
    except RecursionError as exc:
        raise PolicyDecodeError("policy document is nested too deeply to parse") from exc
    document = from_wire(payload)
    logger.debug("Decoded policy document with %d statement(s)", len(document.statements))
    return document


def to_wire(document: PolicyDocument, settings: CodecSettings | None = None) -> dict[str, Any]:
    settings = settings or CodecSettings()
    payload: dict[str, Any] = {}
    if document.version:
        payload["Version"] = document.version
    if document.id:
        payload["Id"] = document.id
    payload["Statement"] = [_encode_statement(statement, settings) for statement in document.statements]
    return payload


def from_wire(payload: Any) -> PolicyDocument:
    if not isinstance(payload, dict):
        raise UnsupportedShapeError(f"expected a JSON object, got {describe_json_type(payload)}")

    raw_statements = payload.get("Statement")
    if raw_statements is None:
        raw_statements = []
    elif isinstance(raw_statements, dict):
        raw_statements = [raw_statements]
    elif not isinstance(raw_statements, list):
        raise UnsupportedShapeError(
            f"expected an array of statements, got {describe_json_type(raw_statements)}", field="Statement"
        )

    statements = [_decode_statement(raw, f"Statement[{index}]") for index, raw in enumerate(raw_statements)]
    return PolicyDocument(
        version=_optional_string(payload, "Version", "Version"),
        id=_optional_string(payload, "Id", "Id"),
        statements=statements,
    )


# ---------------------------------------------------------------------------
# Statements


def _encode_statement(statement: PolicyStatement, settings: CodecSettings) -> dict[str, Any]:
    entry: dict[str, Any] = {}
    if statement.sid:
        entry["Sid"] = statement.sid
    if statement.effect:
        entry["Effect"] = statement.effect

    for key, attribute in _STRING_OR_LIST_FIELDS:
        value = encode_string_or_list(getattr(statement, attribute))
        if value is not None:
            entry[key] = value

    for key, attribute in _PRINCIPAL_FIELDS:
        principals = getattr(statement, attribute)
        if principals:
            entry[key] = encode_principal_set(principals, sort_keys=settings.sort_keys)

    if statement.conditions:
        entry["Condition"] = encode_condition_set(statement.conditions, sort_keys=settings.sort_keys)
    return entry


def _decode_statement(raw: Any, field: str) -> PolicyStatement:
    if not isinstance(raw, dict):
        raise UnsupportedShapeError(f"expected a statement object, got {describe_json_type(raw)}", field=field)

    values: dict[str, Any] = {
        "sid": _optional_string(raw, "Sid", f"{field}.Sid"),
        "effect": _optional_string(raw, "Effect", f"{field}.Effect"),
    }
    for key, attribute in _STRING_OR_LIST_FIELDS:
        if raw.get(key) is not None:
            values[attribute] = decode_string_or_list(raw[key], f"{field}.{key}")
    for key, attribute in _PRINCIPAL_FIELDS:
        if raw.get(key) is not None:
            values[attribute] = decode_principal_set(raw[key], f"{field}.{key}")
    if raw.get("Condition") is not None:
        values["conditions"] = decode_condition_set(raw["Condition"], f"{field}.Condition")
    return PolicyStatement(**values)


def _optional_string(raw: dict[str, Any], key: str, field: str) -> str | None:
    value = raw.get(key)
    if value is None or isinstance(value, str):
        return value
    raise UnsupportedShapeError(f"expected a string, got {describe_json_type(value)}", field=field)


__all__ = ["encode", "decode", "to_wire", "from_wire"]
