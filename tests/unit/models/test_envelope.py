"""Unit tests for PageEnvelope decoding."""

from __future__ import annotations

import json

import pytest

from lingotek.client.core import DecodeError
from lingotek.client.models import PageEnvelope


def test_decode_full_page(page_bytes, communities):
    raw = page_bytes("community", communities(0, 3), total=25, next_offset=10)

    envelope = PageEnvelope.decode(raw)

    assert envelope.classes == ["community"]
    assert envelope.summary.size == 3
    assert envelope.summary.total == 25
    assert envelope.summary.limit == 10
    assert len(envelope.entities) == 3
    assert [link.rel[0] for link in envelope.links] == ["self", "next"]


def test_missing_keys_take_zero_values():
    envelope = PageEnvelope.decode(b"{}")

    assert envelope.summary.size == 0
    assert envelope.summary.total == 0
    assert envelope.summary.title == ""
    assert envelope.entities is None
    assert envelope.links == []


def test_entities_stay_opaque():
    raw = json.dumps({"properties": {"size": 1}, "entities": [{"anything": [1, 2]}]})
    envelope = PageEnvelope.decode(raw)
    assert envelope.entities == [{"anything": [1, 2]}]


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b"[]",
        b'{"properties": {"size": "many"}}',
        b'{"links": [{"rel": "self", "href": 3}]}',
    ],
)
def test_malformed_body_raises_decode_error(raw):
    with pytest.raises(DecodeError, match="Malformed page envelope"):
        PageEnvelope.decode(raw)


def test_envelope_is_immutable(page):
    envelope = page("community", [])
    with pytest.raises(Exception):
        envelope.entities = []
