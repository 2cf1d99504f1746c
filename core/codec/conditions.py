"""Condition set codec: nested ``test -> variable -> value`` objects."""

from __future__ import annotations

from typing import Any, Sequence

from core.errors import UnsupportedConditionShapeError, UnsupportedShapeError
from core.models import Condition, ConditionSet, StringOrList

from .fields import decode_string_array, describe_json_type, is_string_list, merge_grouped_value


def encode_condition_set(
    conditions: Sequence[Condition], *, sort_keys: bool = False
) -> dict[str, dict[str, StringOrList]]:
    grouped: dict[str, dict[str, StringOrList]] = {}
    for condition in conditions:
        values: Any = condition.values
        if not isinstance(values, str) and not is_string_list(values):
            raise UnsupportedConditionShapeError(
                f"Unsupported values for condition {condition.test}/{condition.variable}: {type(values).__name__}"
            )
        variables = grouped.setdefault(condition.test, {})
        variables[condition.variable] = merge_grouped_value(variables.get(condition.variable), values)

    if sort_keys:
        return {test: dict(sorted(variables.items())) for test, variables in sorted(grouped.items())}
    return grouped


def decode_condition_set(raw: Any, field: str) -> ConditionSet:
    if not isinstance(raw, dict):
        raise UnsupportedShapeError(
            f"expected an object of condition operators, got {describe_json_type(raw)}", field=field
        )

    conditions: ConditionSet = []
    for test, variables in raw.items():
        test_field = f"{field}.{test}"
        if not isinstance(variables, dict):
            raise UnsupportedShapeError(
                f"expected an object of condition keys, got {describe_json_type(variables)}", field=test_field
            )
        for variable, value in variables.items():
            value_field = f"{test_field}.{variable}"
            if isinstance(value, str):
                values = [value]
            elif isinstance(value, list):
                values = decode_string_array(value, value_field)
            else:
                raise UnsupportedShapeError(
                    f"expected a string or an array of strings, got {describe_json_type(value)}",
                    field=value_field,
                )
            conditions.append(Condition(test=test, variable=variable, values=values))
    return conditions


__all__ = ["encode_condition_set", "decode_condition_set"]
