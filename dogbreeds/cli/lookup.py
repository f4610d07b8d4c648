"""CLI for looking up the sub-breeds of one or more dog breeds.

Usage::

    # Sub-breeds of a single breed
    python -m dogbreeds.cli.lookup hound

    # Several breeds, each looked up three times (only the first is remote)
    python -m dogbreeds.cli.lookup hound terrier --repeat 3

    # JSON lines on stdout, debug logs on stderr
    python -m dogbreeds.cli.lookup bulldog --json --log-level DEBUG

Every lookup goes through a CachingBreedProvider; the number of real API
calls is printed at the end.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

import httpx

from dogbreeds.config.settings import Settings
from dogbreeds.interfaces.breed_provider import IBreedProvider
from dogbreeds.utils.errors import BreedNotFoundError, ConfigurationError


def _format_line(breed: str, sub_breeds: list[str], as_json: bool) -> str:
    if as_json:
        return json.dumps({"breed": breed, "sub_breeds": sub_breeds})
    return f"{breed}: {', '.join(sub_breeds) if sub_breeds else '(none)'}"


async def run_lookups(
    provider: IBreedProvider,
    breeds: list[str],
    repeat: int = 1,
    as_json: bool = False,
) -> int:
    """Look up each breed *repeat* times in order and print the results.

    Returns the process exit code: 0 if every lookup succeeded, 1 otherwise.
    """
    failed = False
    for _ in range(repeat):
        for breed in breeds:
            try:
                sub_breeds = await provider.lookup_sub_breeds(breed)
            except BreedNotFoundError as exc:
                print(f"error: {exc}", file=sys.stderr)
                failed = True
                continue
            print(_format_line(breed, sub_breeds, as_json))
    return 1 if failed else 0


async def _handle_lookup(args: argparse.Namespace, settings: Settings) -> int:
    from dogbreeds.main import build_breed_provider

    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.dog_api_timeout)) as client:
        try:
            provider = build_breed_provider(settings, http_client=client)
        except ConfigurationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

        exit_code = await run_lookups(provider, args.breeds, repeat=args.repeat, as_json=args.json)
        print(f"Calls made: {provider.calls_made}")
    return exit_code


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dogbreeds",
        description="Look up dog sub-breeds via the dog.ceo API (cached per run).",
    )
    parser.add_argument("breeds", nargs="+", metavar="BREED", help="Breed name(s) to look up")
    parser.add_argument(
        "--repeat",
        type=_positive_int,
        default=1,
        help="Look up the whole list this many times (default: 1)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per lookup instead of plain text",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL setting)",
    )
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for breed lookups."""
    from dogbreeds.utils.logging import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(args.log_level or settings.log_level, app_env=settings.app_env)

    exit_code = asyncio.run(_handle_lookup(args, settings))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
