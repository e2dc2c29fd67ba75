from __future__ import annotations
import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import httpx

from hoteladmin.client import get_client, set_client
from hoteladmin.config import get_config
from hoteladmin.session import get_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hoteladmin",
        description="Send one authenticated request to the hotel admin API and print the payload.",
    )
    parser.add_argument("path", help="API path, e.g. /rooms")
    parser.add_argument("--method", "-X", default="GET", help="HTTP method (default: GET)")
    parser.add_argument("--data", "-d", help="JSON request body")
    parser.add_argument("--token", help="Store this bearer token in the session before sending")
    return parser


async def run_request(method: str, path: str, body=None):
    client = get_client()
    try:
        return await client.request(method.upper(), path, json=body)
    finally:
        await client.aclose()
        set_client(None)


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, config.get_log_level(), logging.INFO),
    )
    args = build_parser().parse_args(argv)

    body = None
    if args.data:
        try:
            body = json.loads(args.data)
        except ValueError as e:
            logger.error(f"--data is not valid JSON: {e}")
            return 2

    if args.token:
        get_session().set_token(args.token)

    try:
        payload = asyncio.run(run_request(args.method, args.path, body))
    except httpx.HTTPError:
        # Already logged by the client pipeline
        return 1

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
