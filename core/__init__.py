"""Document model, codec and canonicalization rules for IAM policy documents."""

from .codec import decode, encode, from_wire, to_wire
from .models import Condition, PolicyDocument, PolicyStatement, Principal
from .policy import deduplicate_by_sid, equivalent

__all__ = [
    "Condition",
    "PolicyDocument",
    "PolicyStatement",
    "Principal",
    "decode",
    "deduplicate_by_sid",
    "encode",
    "equivalent",
    "from_wire",
    "to_wire",
]
