#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from twist.sdk import TwistApi


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show the session user and their workspaces")
    p.add_argument("--token", default=os.environ.get("TWIST_API_TOKEN"))
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if not args.token:
        raise SystemExit("Pass --token or set TWIST_API_TOKEN")

    async with TwistApi(args.token) as api:
        user = await api.users.get_session_user()
        print(f"{user.name} <{user.email}> (id {user.id}, tz {user.timezone})")

        workspaces = await api.workspaces.get_workspaces()
        print(f"{'Workspace':30} | {'Id':>10} | Plan")
        print("-" * 70)
        for w in workspaces:
            plan = w.plan.value if w.plan else "-"
            print(f"{w.name:30} | {w.id:>10} | {plan}")


if __name__ == "__main__":
    asyncio.run(main())
