"""
Command-line entry point.

Wires up: parse args -> validate host -> run Crawler -> print each level.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from linkcrawl.core.config import LOG_LEVELS, CrawlConfig, settings
from linkcrawl.core.exceptions import InvalidHostError, MissingHostError
from linkcrawl.crawler import Crawler
from linkcrawl.models.crawl import LevelReport
from linkcrawl.utils.report import format_level

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_HOST = 1
EXIT_MISSING_HOST = 2
EXIT_UNCLASSIFIED = 3


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="linkcrawl",
        description="Breadth-first link crawler: prints every link path found on a host, level by level.",
    )
    p.add_argument("host", nargs="?", help="Bare host to crawl, e.g. example.com (no scheme).")
    p.add_argument("--max-depth", type=int, default=None,
                   help=f"Maximum number of levels (default: {settings.CRAWL_MAX_DEPTH}).")
    p.add_argument("--timeout", type=float, default=None,
                   help=f"Per-request timeout in seconds (default: {settings.CRAWL_TIMEOUT_SEC}).")
    p.add_argument("--concurrency", type=int, default=None,
                   help=f"Max in-flight fetches, 0 for no cap (default: {settings.CRAWL_CONCURRENCY}).")
    p.add_argument("--log-level", default=settings.LOG_LEVEL,
                   choices=LOG_LEVELS,
                   type=str.upper, help="Diagnostic verbosity on stderr.")
    args = p.parse_args(argv)
    if args.max_depth is not None and args.max_depth < 1:
        p.error("--max-depth must be >= 1")
    if args.timeout is not None and args.timeout <= 0:
        p.error("--timeout must be > 0")
    if args.concurrency is not None and args.concurrency < 0:
        p.error("--concurrency must be >= 0")
    return args


def build_config(args: argparse.Namespace) -> CrawlConfig:
    overrides = {
        "max_depth": args.max_depth,
        "timeout_sec": args.timeout,
        "concurrency": args.concurrency,
    }
    return CrawlConfig(**{k: v for k, v in overrides.items() if v is not None})


def print_level(report: LevelReport) -> None:
    print(format_level(report), flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if not args.host:
            raise MissingHostError("Must include a host in the command line arguments.")
        crawler = Crawler(args.host, build_config(args), reporter=print_level)
    except MissingHostError as e:
        print(e, file=sys.stderr)
        return EXIT_MISSING_HOST
    except InvalidHostError as e:
        print(f"The provided host is invalid. {e}", file=sys.stderr)
        return EXIT_INVALID_HOST

    try:
        asyncio.run(crawler.run())
    except Exception:
        logger.exception("Crawl aborted by an unexpected error")
        return EXIT_UNCLASSIFIED

    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
