#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys

from lingotek.client import LingotekClient, ServerError


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Upload a string, request a translation, poll status")
    p.add_argument("community_id")
    p.add_argument("title")
    p.add_argument("content")
    p.add_argument("--source", default="en-US")
    p.add_argument("--target", default="de-DE")
    p.add_argument("--polls", type=int, default=5)
    p.add_argument("--interval", type=float, default=5.0)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    client = LingotekClient.from_env()
    try:
        projects = await client.get_projects(args.community_id)
        if not projects:
            print(f"No projects in community {args.community_id}")
            return
        try:
            status = await client.upload_string(args.title, args.content, args.source, projects[0])
        except ServerError as e:
            print(f"Upload rejected ({e.status_code}): {'; '.join(e.messages) or e}")
            return
        document = await client.get_document(status.properties.id)
        await client.add_translation(document, args.target)

        for _ in range(args.polls):
            document = await client.check_status(document)
            print(f"{document.properties.title}: {document.status.properties.progress}%")
            if document.status.properties.progress >= 100:
                break
            await asyncio.sleep(args.interval)

        written = await client.get_translated_document(document, args.target, sys.stdout.buffer)
        print(f"\n{written} bytes")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
