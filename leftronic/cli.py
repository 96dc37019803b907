"""
Send a single data point or command to a Leftronic stream.

Usage:
    leftronic-send number sales 42
    leftronic-send text alerts "Down" "Server unreachable" --img-url http://x/y.png
    leftronic-send leaderboard top alice=10 bob=7
    leftronic-send command dashboard clear

Credentials come from LEFTRONIC_ACCESS_KEY / LEFTRONIC_MAX_CONCURRENCY
(environment or .env).
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

import httpx

from leftronic.client import LeftronicClient
from leftronic.errors import LeftronicError
from leftronic.shared.config.client import load_env_config
from leftronic.shared.logging.logger import enable_console_logging


def _leaderboard_entry(raw: str) -> Tuple[str, int]:
    name, sep, score = raw.rpartition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected name=score, got {raw!r}")
    try:
        return name, int(score)
    except ValueError:
        raise argparse.ArgumentTypeError(f"score must be an integer in {raw!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leftronic-send",
        description="Push a data point to a Leftronic dashboard stream",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    sub = parser.add_subparsers(dest="kind", required=True)

    p = sub.add_parser("number", help="Custom Number widget")
    p.add_argument("stream")
    p.add_argument("value", type=int)

    p = sub.add_parser("geo", help="Custom Geo widget")
    p.add_argument("stream")
    p.add_argument("lat", type=float)
    p.add_argument("lon", type=float)

    p = sub.add_parser("text", help="Custom Text widget")
    p.add_argument("stream")
    p.add_argument("title")
    p.add_argument("message")
    p.add_argument("--img-url", default=None)

    p = sub.add_parser("list", help="Custom List widget")
    p.add_argument("stream")
    p.add_argument("entries", nargs="*")

    p = sub.add_parser("leaderboard", help="Custom Leaderboard widget")
    p.add_argument("stream")
    p.add_argument("entries", nargs="*", type=_leaderboard_entry, metavar="NAME=SCORE")

    p = sub.add_parser("command", help="Send a command to a stream")
    p.add_argument("stream")
    p.add_argument("command")

    return parser


def _dispatch(client: LeftronicClient, args: argparse.Namespace) -> None:
    if args.kind == "number":
        client.send_number(args.stream, args.value)
    elif args.kind == "geo":
        client.send_geo_point(args.stream, args.lat, args.lon)
    elif args.kind == "text":
        client.send_text(args.stream, args.title, args.message, args.img_url)
    elif args.kind == "list":
        client.send_list(args.stream, args.entries)
    elif args.kind == "leaderboard":
        client.send_leaderboard(args.stream, args.entries)
    elif args.kind == "command":
        client.send_command(args.stream, args.command)


def main(
    argv: Optional[List[str]] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        enable_console_logging()

    try:
        config = load_env_config(args.env_file)
        with LeftronicClient(config, transport=transport) as client:
            _dispatch(client, args)
    except LeftronicError as e:
        print(f"[LEFTRONIC ERROR] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
