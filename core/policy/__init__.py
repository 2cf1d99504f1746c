"""Canonicalization and post-processing passes over policy documents."""

from .canonical import collapse_string_list, equivalent, is_wildcard_principal, sort_descending
from .dedup import deduplicate_by_sid

__all__ = [
    "collapse_string_list",
    "deduplicate_by_sid",
    "equivalent",
    "is_wildcard_principal",
    "sort_descending",
]
