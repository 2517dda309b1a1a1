"""Unit tests for next-page cursor resolution."""

from __future__ import annotations

import pytest

from lingotek.client.core import EndOfList
from lingotek.client.models import Link, PageEnvelope
from lingotek.client.runtime import CursorRequest, resolve_next, seed_envelope


def _envelope(*links: tuple[str, str]) -> PageEnvelope:
    return PageEnvelope(links=[Link(rel=[rel], href=href) for rel, href in links])


class TestResolveNext:
    """Test resolve_next()."""

    def test_cursor_comes_from_next_path_from_self(self):
        envelope = _envelope(
            ("self", "community?limit=10&offset=0"),
            ("next", "community?limit=10&offset=10"),
        )

        request = resolve_next(envelope)

        assert request.path == "community"
        assert request.offset == "10"
        assert request.limit == "10"

    def test_missing_next_is_end_of_list(self):
        envelope = _envelope(("self", "community?limit=10&offset=20"))
        with pytest.raises(EndOfList):
            resolve_next(envelope)

    def test_no_links_is_end_of_list(self):
        with pytest.raises(EndOfList):
            resolve_next(PageEnvelope())

    def test_self_filters_carry_over(self):
        envelope = _envelope(
            ("self", "project?community_id=abc&limit=10&offset=0"),
            ("next", "project?limit=10&offset=10"),
        )

        request = resolve_next(envelope)

        assert request == CursorRequest(
            path="project", query={"community_id": "abc", "limit": "10", "offset": "10"}
        )

    def test_self_cursor_never_shadows_next(self):
        # next before self: stale self values must not overwrite the cursor
        envelope = _envelope(
            ("next", "community?limit=10&offset=30"),
            ("self", "community?limit=99&offset=99"),
        )

        request = resolve_next(envelope)

        assert request.query == {"limit": "10", "offset": "30"}

    def test_next_without_cursor_yields_empty_strings(self):
        envelope = _envelope(("self", "community"), ("next", "community?page=2"))

        request = resolve_next(envelope)

        assert request.query == {"offset": "", "limit": ""}

    def test_last_duplicate_link_wins(self):
        envelope = _envelope(
            ("self", "first?limit=10&offset=0"),
            ("next", "first?limit=10&offset=10"),
            ("self", "second?limit=10&offset=0"),
            ("next", "second?limit=5&offset=40"),
        )

        request = resolve_next(envelope)

        assert request.path == "second"
        assert request.query == {"limit": "5", "offset": "40"}

    def test_only_first_rel_tag_counts(self):
        envelope = PageEnvelope(
            links=[
                Link(rel=["self"], href="community?limit=10&offset=0"),
                Link(rel=["last", "next"], href="community?limit=10&offset=90"),
            ]
        )
        with pytest.raises(EndOfList):
            resolve_next(envelope)

    def test_without_self_path_is_empty(self):
        request = resolve_next(_envelope(("next", "community?limit=10&offset=10")))
        assert request.path == ""


class TestSeedEnvelope:
    """Test the synthetic first envelope."""

    def test_seed_resolves_to_first_page(self):
        request = resolve_next(seed_envelope("community"))

        assert request.path == "community"
        assert request.query == {"limit": "10", "offset": "0"}

    def test_seed_has_identical_self_and_next(self):
        envelope = seed_envelope("document")

        self_link, next_link = envelope.links
        assert self_link.rel == ["self"]
        assert next_link.rel == ["next"]
        assert self_link.href == next_link.href == "document?limit=10&offset=0"

    def test_seed_keeps_filters(self):
        request = resolve_next(seed_envelope("project", {"community_id": "abc"}, limit=25))

        assert request.query == {"community_id": "abc", "limit": "25", "offset": "0"}

    def test_seed_overrides_caller_cursor(self):
        request = resolve_next(seed_envelope("community", {"offset": "50"}))
        assert request.offset == "0"
