"""Principal set encoding and decoding tests."""

from __future__ import annotations

import pytest

from core.codec.principals import decode_principal_set, encode_principal_set
from core.errors import PolicyEncodeError, UnsupportedPrincipalShapeError, UnsupportedShapeError
from core.models import Principal


@pytest.mark.parametrize(
    "principal",
    [
        Principal(type="AWS", identifiers="*"),
        Principal(type="AWS", identifiers=["*"]),
        Principal(type="*", identifiers="*"),
        Principal(type="*", identifiers=["*"]),
    ],
)
def test_wildcard_principal_collapses_to_star(principal):
    assert encode_principal_set([principal]) == "*"


def test_service_wildcard_is_not_collapsed():
    assert encode_principal_set([Principal(type="Service", identifiers="*")]) == {"Service": "*"}


def test_wildcard_with_other_identifiers_is_not_collapsed():
    encoded = encode_principal_set([Principal(type="AWS", identifiers=["*", "arn:aws:iam::111122223333:root"])])
    assert encoded == {"AWS": ["arn:aws:iam::111122223333:root", "*"]}


def test_same_type_entries_merge_sorted_descending():
    principals = [
        Principal(type="AWS", identifiers=["arn:a"]),
        Principal(type="AWS", identifiers=["arn:b"]),
    ]
    assert encode_principal_set(principals) == {"AWS": ["arn:b", "arn:a"]}


def test_single_identifier_list_stays_a_list():
    assert encode_principal_set([Principal(type="AWS", identifiers=["arn:a"])]) == {"AWS": ["arn:a"]}


def test_types_keep_encounter_order():
    principals = [
        Principal(type="Service", identifiers="lambda.amazonaws.com"),
        Principal(type="AWS", identifiers=["arn:a"]),
        Principal(type="Service", identifiers="ec2.amazonaws.com"),
    ]
    encoded = encode_principal_set(principals)
    assert list(encoded) == ["Service", "AWS"]
    assert encoded["Service"] == "ec2.amazonaws.com"


def test_sort_keys_orders_types():
    principals = [
        Principal(type="Service", identifiers="lambda.amazonaws.com"),
        Principal(type="AWS", identifiers=["arn:a"]),
    ]
    assert list(encode_principal_set(principals, sort_keys=True)) == ["AWS", "Service"]


def test_encode_leaves_identifier_lists_untouched():
    identifiers = ["arn:a", "arn:c", "arn:b"]
    principal = Principal(type="AWS", identifiers=identifiers)
    encode_principal_set([principal, Principal(type="AWS", identifiers=["arn:d"])])
    assert principal.identifiers == ["arn:a", "arn:c", "arn:b"]


@pytest.mark.parametrize("identifiers", [5, None, {"arn": "a"}, ["arn:a", 1]])
def test_unsupported_identifiers_abort_encoding(identifiers):
    with pytest.raises(UnsupportedPrincipalShapeError):
        encode_principal_set([Principal(type="Federated", identifiers=identifiers)])


def test_unsupported_principal_error_is_encode_error():
    assert issubclass(UnsupportedPrincipalShapeError, PolicyEncodeError)
    assert issubclass(UnsupportedPrincipalShapeError, TypeError)


def test_decode_bare_string_is_wildcard():
    assert decode_principal_set("*", "Principal") == [Principal(type="*", identifiers=["*"])]


def test_decode_object_keeps_raw_values_in_order():
    decoded = decode_principal_set(
        {"Service": "lambda.amazonaws.com", "AWS": ["arn:b", "arn:a"]},
        "Principal",
    )
    assert decoded == [
        Principal(type="Service", identifiers="lambda.amazonaws.com"),
        Principal(type="AWS", identifiers=["arn:b", "arn:a"]),
    ]


def test_decode_object_does_not_validate_identifiers():
    decoded = decode_principal_set({"AWS": 12}, "Principal")
    assert decoded == [Principal(type="AWS", identifiers=12)]


@pytest.mark.parametrize("raw", [5, ["*"], True])
def test_decode_rejects_other_shapes(raw):
    with pytest.raises(UnsupportedShapeError) as excinfo:
        decode_principal_set(raw, "Statement[0].Principal")
    assert excinfo.value.field == "Statement[0].Principal"


def test_decoded_wildcard_encodes_back_to_star():
    assert encode_principal_set(decode_principal_set("*", "Principal")) == "*"
    assert encode_principal_set(decode_principal_set({"AWS": "*"}, "Principal")) == "*"
