"""Data models for policy documents and their statements."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from core.constants import DEFAULT_VERSION

StringOrList = Union[str, list[str]]


class Principal(BaseModel):
    """One principal entry: a type such as ``AWS`` or ``Service`` and its identifiers.

    ``identifiers`` is a string or a list of strings. Decoding stores the raw
    wire value here without further checks; encoding rejects anything else.
    """

    type: str
    identifiers: Any = None


class Condition(BaseModel):
    """One condition entry keyed by operator (``test``) and context key (``variable``)."""

    test: str
    variable: str
    values: Any = None


PrincipalSet = list[Principal]
ConditionSet = list[Condition]


class PolicyStatement(BaseModel):
    """Single statement of a policy document.

    Fields use Python names only; the wire form (``Action``, ``Principal``...)
    is produced and read by ``core.codec``.
    """

    sid: Optional[str] = None
    effect: Optional[str] = None
    actions: Optional[StringOrList] = None
    not_actions: Optional[StringOrList] = None
    resources: Optional[StringOrList] = None
    not_resources: Optional[StringOrList] = None
    principals: PrincipalSet = Field(default_factory=list)
    not_principals: PrincipalSet = Field(default_factory=list)
    conditions: ConditionSet = Field(default_factory=list)

    model_config = {
        "extra": "forbid",
    }


class PolicyDocument(BaseModel):
    """Policy document holding an ordered sequence of statements."""

    version: Optional[str] = None
    id: Optional[str] = None
    statements: list[PolicyStatement] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",
    }

    @property
    def sids(self) -> list[str]:
        """Return the non-empty statement identifiers in document order."""
        return [statement.sid for statement in self.statements if statement.sid]

    @classmethod
    def example(cls, id_hint: str) -> "PolicyDocument":
        return cls(
            version=DEFAULT_VERSION,
            statements=[
                PolicyStatement(
                    sid=f"Allow{id_hint.capitalize()}Read",
                    effect="Allow",
                    actions=["s3:GetObject"],
                    resources=["arn:aws:s3:::example-bucket/*"],
                    principals=[Principal(type="AWS", identifiers=["arn:aws:iam::123456789012:root"])],
                )
            ],
        )


__all__ = [
    "StringOrList",
    "Principal",
    "Condition",
    "PrincipalSet",
    "ConditionSet",
    "PolicyStatement",
    "PolicyDocument",
]
