"""Remove statements whose Sid repeats later in the document."""

from __future__ import annotations

import logging

from core.models import PolicyDocument, PolicyStatement

logger = logging.getLogger(__name__)


def deduplicate_by_sid(document: PolicyDocument) -> None:
    """Keep only the last statement for each non-empty Sid, in place.

    Statements without a Sid are always kept. Survivors keep their relative
    order.
    """
    last_seen: dict[str, int] = {}
    for index, statement in enumerate(document.statements):
        if statement.sid:
            last_seen[statement.sid] = index

    kept: list[PolicyStatement] = [
        statement
        for index, statement in enumerate(document.statements)
        if not statement.sid or last_seen[statement.sid] == index
    ]
    removed = len(document.statements) - len(kept)
    if removed:
        logger.debug("Dropped %d statement(s) with duplicate Sid", removed)
    document.statements[:] = kept


__all__ = ["deduplicate_by_sid"]
