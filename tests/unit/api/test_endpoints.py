"""Unit tests for the collection registry and entity adapters."""

from __future__ import annotations

import pytest

from lingotek.client.api import EntityAdapter, get_collection_spec, list_collections
from lingotek.client.api.endpoints import community, document, project, translation
from lingotek.client.core import DecodeError
from lingotek.client.models import Community


class TestCollectionRegistry:
    def test_all_collections_registered(self):
        assert list_collections() == ["communities", "documents", "projects", "translations"]

    def test_unknown_collection(self):
        assert get_collection_spec("glossaries") is None

    @pytest.mark.parametrize(
        ("collection_id", "params", "path"),
        [
            ("communities", {}, "community"),
            ("projects", {"community_id": "c-1"}, "project"),
            ("documents", {}, "document"),
            ("translations", {"document_id": "d-1"}, "document/d-1/translation"),
        ],
    )
    def test_paths(self, collection_id, params, path):
        assert get_collection_spec(collection_id).build_path(params) == path

    def test_projects_query_carries_community(self):
        spec = get_collection_spec("projects")
        assert spec.build_query({"community_id": "c-1"}) == {"community_id": "c-1"}
        assert spec.required == ("community_id",)

    def test_communities_have_no_filters(self):
        spec = get_collection_spec("communities")
        assert spec.build_query is None
        assert spec.required == ()


class TestEntityRoutes:
    def test_entity_routes(self):
        assert community.entity_path("c-1") == "community/c-1"
        assert document.entity_path("d-1") == "document/d-1"
        assert document.content_path("d-1") == "document/d-1/content"
        assert translation.collection_path("d-1") == "document/d-1/translation"

    def test_project_query_stringifies_id(self):
        assert project.build_query({"community_id": 7}) == {"community_id": "7"}


class TestEntityAdapter:
    def test_parse_many_keeps_order(self, communities):
        adapter = EntityAdapter(Community)

        items = adapter.parse_many(communities(0, 3))

        assert [c.id for c in items] == ["c-0", "c-1", "c-2"]

    def test_parse_many_rejects_non_list(self):
        with pytest.raises(DecodeError, match="Community"):
            EntityAdapter(Community).parse_many({"properties": {}})

    def test_parse_many_rejects_missing_block(self):
        with pytest.raises(DecodeError):
            EntityAdapter(Community).parse_many(None)

    def test_parse_one(self):
        item = EntityAdapter(Community).parse_one(b'{"properties": {"id": "c-1"}}')
        assert item.id == "c-1"

    def test_parse_one_rejects_invalid_json(self):
        with pytest.raises(DecodeError):
            EntityAdapter(Community).parse_one(b"not json")
