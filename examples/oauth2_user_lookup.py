#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os
import secrets
from urllib.parse import parse_qs, urlsplit

from twitter.api import Client, OAuth2User


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Authorize a user with OAuth 2.0 PKCE and look them up")
    p.add_argument("--callback", default="http://127.0.0.1:3000/callback")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    auth = OAuth2User(
        client_id=os.environ["TWITTER_CLIENT_ID"],
        client_secret=os.environ.get("TWITTER_CLIENT_SECRET"),
        callback=args.callback,
        scopes=["tweet.read", "users.read", "offline.access"],
    )
    state = secrets.token_urlsafe(16)
    print(f"Open this URL and authorize the app:\n{auth.generate_auth_url(state)}")
    redirect = input("Paste the URL you were redirected to: ").strip()
    query = parse_qs(urlsplit(redirect).query)
    if query.get("state") != [state]:
        raise SystemExit("state mismatch")

    await auth.request_access_token(query["code"][0])
    async with Client(auth) as client:
        me = await client.users.find_my_user(user_fields=["created_at"])
        print(f"Authorized as @{me.data.username} ({me.data.id})")
    await auth.close()


if __name__ == "__main__":
    asyncio.run(main())
