#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from twist.sdk import TwistApi


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Fetch every channel of a workspace and its threads in batch calls"
    )
    p.add_argument("workspace_id", type=int)
    p.add_argument("--token", default=os.environ.get("TWIST_API_TOKEN"))
    p.add_argument("--limit", type=int, default=5, help="Threads per channel")
    p.add_argument("-v", "--verbose", action="store_true", help="Log batch telemetry")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if not args.token:
        raise SystemExit("Pass --token or set TWIST_API_TOKEN")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    async with TwistApi(args.token) as api:
        channels = await api.channels.get_channels(args.workspace_id, archived=False)
        results = await api.batch(
            *(api.threads.get_threads(c.id, limit=args.limit, batch=True) for c in channels)
        )
        for channel, result in zip(channels, results):
            if not result.ok:
                print(f"#{channel.name}: failed with HTTP {result.code}")
                continue
            if result.degraded:
                print(f"#{channel.name}: unexpected payload ({result.validation_error})")
                continue
            print(f"#{channel.name} ({len(result.data)} threads)")
            for thread in result.data:
                print(f"  {thread.last_updated.isoformat():25} {thread.title}")


if __name__ == "__main__":
    asyncio.run(main())
