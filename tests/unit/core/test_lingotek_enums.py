"""Unit tests for core enums."""

import pytest

from lingotek.client.core import Environment, HTTPMethod, LinkRelation


class TestLinkRelation:
    @pytest.mark.parametrize(
        ("tag", "relation"),
        [
            ("self", LinkRelation.SELF),
            ("next", LinkRelation.NEXT),
            ("prev", LinkRelation.OTHER),
            ("", LinkRelation.OTHER),
            (None, LinkRelation.OTHER),
        ],
    )
    def test_from_tag(self, tag, relation):
        assert LinkRelation.from_tag(tag) is relation


def test_http_method_is_write():
    assert HTTPMethod.POST.is_write
    assert not HTTPMethod.GET.is_write


def test_environment_from_string():
    assert Environment("sandbox") is Environment.SANDBOX
