#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from twitter.api import Client


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print Tweets from the sample stream")
    p.add_argument("count", nargs="?", type=int, default=20)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with Client(os.environ["TWITTER_BEARER_TOKEN"]) as client:
        received = 0
        async with client.tweets.sample_stream(tweet_fields=["lang"]) as stream:
            async for item in stream:
                tweet = item.get("data", {})
                print(f"{tweet.get('id', '-'):>20} | {tweet.get('lang', '??'):3} | {tweet.get('text', '')[:50]!r}")
                received += 1
                if received >= args.count:
                    break
        print(f"received {received} items, decoded {stream.items_decoded}")


if __name__ == "__main__":
    asyncio.run(main())
