"""Public package surface tests."""

from __future__ import annotations

import core
import iamdoc


def test_package_reexports_codec():
    assert iamdoc.encode is core.encode
    assert iamdoc.decode is core.decode
    assert iamdoc.deduplicate_by_sid is core.deduplicate_by_sid
    assert iamdoc.__version__ == "0.1.0"


def test_package_exports_are_module_attributes():
    for name in iamdoc.__all__:
        assert name in vars(iamdoc)
    assert "__getattr__" not in vars(iamdoc)


def test_example_document_round_trips_through_package():
    document = iamdoc.PolicyDocument.example("logs")
    encoded = iamdoc.encode(document)
    assert iamdoc.encode(iamdoc.decode(encoded)) == encoded
    assert document.sids == ["AllowLogsRead"]
