"""Shared fixtures for unit tests: page envelopes and a scripted fetcher."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest

from lingotek.client.models import PageEnvelope
from lingotek.client.runtime import CursorRequest


def _href(path: str, query: dict[str, Any]) -> str:
    params = "&".join(f"{k}={v}" for k, v in sorted(query.items()))
    return f"{path}?{params}" if params else path


def build_page_json(
    path: str,
    entities: list[dict[str, Any]] | Any,
    *,
    offset: int = 0,
    limit: int = 10,
    total: int | None = None,
    size: int | None = None,
    next_offset: int | None = None,
    filters: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a page the way the API serves it."""
    filters = filters or {}
    if size is None:
        size = len(entities) if isinstance(entities, list) else 0
    links = [{"rel": ["self"], "href": _href(path, {**filters, "limit": limit, "offset": offset})}]
    if next_offset is not None:
        links.append(
            {"rel": ["next"], "href": _href(path, {**filters, "limit": limit, "offset": next_offset})}
        )
    return {
        "class": [path],
        "properties": {
            "title": path,
            "offset": offset,
            "total": total if total is not None else size,
            "limit": limit,
            "size": size,
        },
        "entities": entities,
        "links": links,
    }


def community_entities(start: int, count: int) -> list[dict[str, Any]]:
    return [
        {
            "properties": {"title": f"community {i}", "id": f"c-{i}"},
            "rel": ["item"],
            "links": [{"rel": ["self"], "href": f"community/c-{i}"}],
        }
        for i in range(start, start + count)
    ]


class ScriptedFetcher:
    """Page fetcher double serving envelopes keyed by requested offset.

    A non-zero ``delay`` makes every fetch suspend like a network call.
    """

    def __init__(self, pages: dict[str, PageEnvelope | Exception], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.requests: list[CursorRequest] = []

    async def fetch(self, request: CursorRequest) -> PageEnvelope:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        page = self.pages[request.query["offset"]]
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
def page_json():
    """Factory building raw page dicts."""
    return build_page_json


@pytest.fixture
def page():
    """Factory building decoded PageEnvelope instances."""

    def factory(*args: Any, **kwargs: Any) -> PageEnvelope:
        return PageEnvelope.model_validate(build_page_json(*args, **kwargs))

    return factory


@pytest.fixture
def page_bytes():
    """Factory building raw response bodies."""

    def factory(*args: Any, **kwargs: Any) -> bytes:
        return json.dumps(build_page_json(*args, **kwargs)).encode()

    return factory


@pytest.fixture
def communities():
    """Factory building community entity dicts."""
    return community_entities


@pytest.fixture
def scripted_fetcher():
    """Factory building ScriptedFetcher instances."""
    return ScriptedFetcher
