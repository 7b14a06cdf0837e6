#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from twitter.api import Client, RateLimit


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Page through recent search results")
    p.add_argument("query", nargs="?", default="from:TwitterDev")
    p.add_argument("pages", nargs="?", type=int, default=3)
    p.add_argument("max_results", nargs="?", type=int, default=10)
    return p.parse_args()


def show_quota(rate_limit: RateLimit) -> None:
    print(f"quota: {rate_limit.remaining}/{rate_limit.limit} resets {rate_limit.reset_at:%H:%M:%S}")


async def main() -> None:
    args = parse_args()
    async with Client(os.environ["TWITTER_BEARER_TOKEN"]) as client:
        paginator = client.tweets.tweets_recent_search(
            args.query,
            max_results=args.max_results,
            tweet_fields=["created_at", "author_id"],
            rate_limit=show_quota,
        )
        print("=" * 65)
        async for page in paginator:
            for tweet in page.data or []:
                print(f"{tweet.id:>20} | {tweet.text[:40]!r}")
            for error in page.errors or []:
                print(f"error: {error.describe()}")
            if paginator.pages_fetched >= args.pages:
                break
        await paginator.aclose()
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
