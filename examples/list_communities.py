#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from lingotek.client import LingotekClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Lingotek communities and their projects")
    p.add_argument("--max", type=int, default=0, help="Stop after this many communities (0 = all)")
    p.add_argument("--page-limit", type=int, default=10)
    p.add_argument("--projects", action="store_true", help="Also list each community's projects")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    client = LingotekClient.from_env(page_limit=args.page_limit)
    try:
        async with client.list_communities() as communities:
            seen = 0
            async for community in communities:
                seen += 1
                print(f"{community.id:36} | {community.properties.title}")
                if args.projects:
                    async for project in client.list_projects(community):
                        created = project.created_at.isoformat() if project.created_at else "-"
                        print(f"    {project.id:32} | {created:25} | {project.properties.title}")
                if args.max and seen >= args.max:
                    communities.cancel()
            error = await communities.errors.get()
        if error is not None:
            print(f"Stream failed: {error}")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
