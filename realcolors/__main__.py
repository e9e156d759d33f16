"""
Command-line entry point.

Run:
    python -m realcolors get pics        # cached snapshot, else a fresh one
    python -m realcolors fetch pics      # always a fresh snapshot
    python -m realcolors refresh pics    # update the store if styles changed

Settings come from REALCOLORS_* environment variables (or a .env file);
--store overrides the store file location.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from realcolors.config import Settings
from realcolors.core.errors import RealColorsError
from realcolors.core.watcher import StyleWatcher
from realcolors.store.file import FileStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="realcolors",
        description="Extract and watch a subreddit's theme colour variables.",
    )
    parser.add_argument("--store", help="path of the JSON store file")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for info logging, -vv for debug")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("get", "print cached styles, fetching only on a cache miss"),
        ("fetch", "fetch and print the current styles"),
        ("refresh", "fetch the current styles and update the store if they changed"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("subreddit")
    return parser


async def run(args: argparse.Namespace, settings: Settings) -> int:
    store = FileStore(args.store or settings.store_path)
    watcher = StyleWatcher(settings=settings, store=store)

    if args.command == "get":
        snapshot = await watcher.get_styles(args.subreddit)
    elif args.command == "fetch":
        snapshot = await watcher.fetch_styles(args.subreddit)
    else:
        result = await watcher.refresh(args.subreddit)
        print("changed" if result.changed else "unchanged")
        if result.delta is not None:
            print(result.delta.summary())
        return 0

    print(json.dumps(snapshot.to_dict(), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = Settings.from_env()
        return asyncio.run(run(args, settings))
    except (RealColorsError, ValueError) as exc:
        print(f"realcolors: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
