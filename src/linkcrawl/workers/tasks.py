"""
Fetch Cycle Tasks

One crawl level: fetch every frontier address concurrently, extract links
from each body and merge newly seen link paths into the shared state.
"""

import asyncio
import logging

import aiohttp

from linkcrawl.core.config import CrawlConfig
from linkcrawl.core.exceptions import ExtractionError, FetchError
from linkcrawl.core.utils import build_address
from linkcrawl.db import Frontier, VisitedSet
from linkcrawl.models.crawl import LevelOutcome
from linkcrawl.utils.parser import extract_links

logger = logging.getLogger(__name__)

TEXT_CONTENT_TYPES = ("text/", "application/xhtml+xml")


def _is_text(content_type: str) -> bool:
    # Missing Content-Type counts as text
    return not content_type or content_type.startswith(TEXT_CONTENT_TYPES)


def _collect_links(body: str) -> list[str]:
    return list(extract_links(body))


async def fetch_page(
    session: aiohttp.ClientSession,
    address: str,
    config: CrawlConfig,
) -> str:
    """
    Fetch one address and return its body as text.

    Raises:
        FetchError: on network errors, timeouts, non-2xx statuses,
            non-text content types and oversized bodies
    """
    try:
        async with session.get(
            address,
            timeout=aiohttp.ClientTimeout(total=config.timeout_sec),
            allow_redirects=config.follow_redirects,
        ) as resp:
            if not 200 <= resp.status < 300:
                raise FetchError(address, f"HTTP {resp.status}", status=resp.status)

            ct = resp.headers.get("Content-Type", "").lower()
            if not _is_text(ct):
                raise FetchError(
                    address, f"Non-text content type: {ct}", status=resp.status
                )

            # Check Content-Length if available
            content_length = resp.headers.get("Content-Length")
            if content_length:
                try:
                    too_large = int(content_length) > config.max_response_bytes
                except ValueError:
                    too_large = False
                if too_large:
                    raise FetchError(
                        address,
                        f"Response too large: {content_length} bytes",
                        status=resp.status,
                    )

            # Read at most one byte past the limit; chunked bodies carry no Content-Length
            chunks = []
            received = 0
            while True:
                chunk = await resp.content.read(config.max_response_bytes + 1 - received)
                if not chunk:
                    break
                chunks.append(chunk)
                received += len(chunk)
                if received > config.max_response_bytes:
                    raise FetchError(
                        address,
                        f"Response too large: over {config.max_response_bytes} bytes",
                        status=resp.status,
                    )
            body = b"".join(chunks)

    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise FetchError(address, str(e) or type(e).__name__) from e

    return body.decode("utf-8", errors="replace")


async def process_address(
    session: aiohttp.ClientSession,
    address: str,
    host: str,
    visited: VisitedSet,
    frontier: Frontier,
    config: CrawlConfig,
    discovered: list[str],
) -> bool:
    """
    Fetch a single address and merge the links it yields.

    New link paths are appended to `discovered` and their addresses pushed
    onto `frontier` for the next level.

    Returns:
        True if the page was fetched, False if the fetch failed
    """
    try:
        body = await fetch_page(session, address, config)
    except FetchError as e:
        logger.warning(f"Fetch failed for {address}: {e.reason}")
        return False

    # Parse HTML (offload to executor)
    loop = asyncio.get_running_loop()
    paths = await loop.run_in_executor(None, _collect_links, body)

    new_count = 0
    for path in paths:
        if not visited.insert_if_absent(path):
            continue
        try:
            next_address = build_address(config.scheme, host, path)
        except ExtractionError as e:
            logger.warning(f"Skipping link {path!r} found on {address}: {e}")
            continue
        frontier.push(next_address)
        discovered.append(path)
        new_count += 1

    logger.debug(f"Fetched {address} ({len(paths)} links, {new_count} new)")
    return True


async def run_level(
    session: aiohttp.ClientSession,
    frontier: Frontier,
    visited: VisitedSet,
    host: str,
    config: CrawlConfig,
) -> LevelOutcome:
    """
    Fetch every address currently in the frontier and wait for all of them.

    The frontier is emptied before any fetch starts, so everything pushed
    while this level runs belongs to the next level.
    """
    addresses = frontier.take_all()
    discovered: list[str] = []

    sem = asyncio.Semaphore(config.concurrency) if config.concurrency > 0 else None

    async def process_with_semaphore(address: str) -> bool:
        if sem is None:
            return await process_address(
                session, address, host, visited, frontier, config, discovered
            )
        async with sem:
            return await process_address(
                session, address, host, visited, frontier, config, discovered
            )

    results = await asyncio.gather(
        *(process_with_semaphore(address) for address in addresses),
        return_exceptions=True,
    )

    failed = 0
    for address, result in zip(addresses, results):
        if result is True:
            continue
        failed += 1
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            logger.error(
                f"Unexpected error processing {address}: {result}", exc_info=result
            )

    return LevelOutcome(attempted=len(addresses), failed=failed, discovered=discovered)
