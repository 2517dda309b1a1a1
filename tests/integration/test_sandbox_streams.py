"""Integration tests against the Lingotek sandbox.

Needs RUN_LINGOTEK_NETWORK_TESTS=1 and a sandbox LINGOTEK_ACCESS_TOKEN.
"""

import os

import pytest

from lingotek.client import LingotekClient

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LINGOTEK_NETWORK_TESTS") != "1"
    or not os.environ.get("LINGOTEK_ACCESS_TOKEN"),
    reason="Requires network access and LINGOTEK_ACCESS_TOKEN",
)


class TestSandboxStreams:
    """Walk real collections end to end."""

    @pytest.mark.asyncio
    async def test_list_communities(self):
        async with LingotekClient.from_env() as client:
            communities = await client.list_communities().collect()

        assert all(c.id for c in communities)

    @pytest.mark.asyncio
    async def test_cancel_stops_walk(self):
        async with LingotekClient.from_env(page_limit=2) as client:
            stream = client.list_documents()
            received = 0
            async for _ in stream:
                received += 1
                if received == 1:
                    stream.cancel()

            assert received <= 2
            assert await stream.errors.get() is None

    @pytest.mark.asyncio
    async def test_first_community_projects(self):
        async with LingotekClient.from_env() as client:
            page = await client.get_communities_page(offset=0, limit=1)
            if not page:
                pytest.skip("sandbox account has no communities")
            projects = await client.list_projects(page[0]).collect()

        assert all(p.properties.community_id in ("", page[0].id) for p in projects)
