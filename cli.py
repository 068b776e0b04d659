"""
rotom-fetch command-line interface.

Usage
-----
python cli.py summarize pikachu                       # REST backend
python cli.py summarize pikachu bulbasaur             # several at once
python cli.py --backend graphql summarize pikachu     # GraphQL backend
python cli.py raw pikachu                             # dump the raw payload

python cli.py --endpoint http://localhost:8000/api/v2 summarize mew   # mirror
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from configs.constants import Constants
from src.fetcher import FetchConfig, FetcherError, get_fetcher

logger = logging.getLogger("rotom-fetch")


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(verbose: bool = False) -> None:
    # stdout is reserved for summaries
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------


def _build_fetcher(args: argparse.Namespace):
    config = FetchConfig(endpoint=args.endpoint, timeout=args.timeout)
    return get_fetcher(args.backend, config=config)


def cmd_summarize(args: argparse.Namespace) -> int:
    """Print one summary line per requested Pokémon."""
    failures = 0
    with _build_fetcher(args) as fetcher:
        for name in args.names:
            try:
                fetcher.fetch_and_print(name)
            except FetcherError as exc:
                print(f"error: {name}: {exc}", file=sys.stderr)
                failures += 1
    return 1 if failures else 0


def cmd_raw(args: argparse.Namespace) -> int:
    """Print the unparsed backend response."""
    with _build_fetcher(args) as fetcher:
        try:
            raw = fetcher.fetch_raw(args.name)
        except FetcherError as exc:
            print(f"error: {args.name}: {exc}", file=sys.stderr)
            return 1
    print(raw)
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    root = argparse.ArgumentParser(
        prog="rotom-fetch",
        description="Fetch and summarize Pokémon from PokeAPI (REST or GraphQL)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    root.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    root.add_argument(
        "--backend",
        choices=list(Constants.BACKENDS),
        default=Constants.DEFAULT_BACKEND,
        help="Which PokeAPI flavour to query",
    )
    root.add_argument("--endpoint", default=None, metavar="URL", help="Override the backend URL")
    root.add_argument(
        "--timeout",
        type=float,
        default=Constants.REQUEST_TIMEOUT,
        metavar="SECONDS",
        help="Per-request timeout",
    )

    subparsers = root.add_subparsers(dest="command", required=True)

    summarize_p = subparsers.add_parser("summarize", help="Print '<Name> (#<id>) has <hp> HP.'")
    summarize_p.add_argument("names", nargs="+", metavar="NAME", help="Pokémon name(s)")
    summarize_p.set_defaults(func=cmd_summarize)

    raw_p = subparsers.add_parser("raw", help="Print the raw backend response")
    raw_p.add_argument("name", metavar="NAME", help="Pokémon name")
    raw_p.set_defaults(func=cmd_raw)

    return root


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    logger.debug(f"backend={args.backend} endpoint={args.endpoint or 'default'}")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
