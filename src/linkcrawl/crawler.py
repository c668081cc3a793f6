"""
Crawler - Depth-Bounded Crawl Loop

Drives one fetch cycle per level until the depth bound is reached, the
frontier runs dry, or a level turns up no new links.
"""

import logging
from enum import Enum
from typing import Callable, Optional

import aiohttp

from linkcrawl.core.config import CrawlConfig
from linkcrawl.core.exceptions import (
    CrawlError,
    CrawlStateError,
    InvalidAddressError,
    InvalidHostError,
)
from linkcrawl.core.utils import build_address, validate_host
from linkcrawl.db import Frontier, VisitedSet
from linkcrawl.models.crawl import CrawlResult, LevelReport, StopReason
from linkcrawl.workers.tasks import run_level

logger = logging.getLogger(__name__)

Reporter = Callable[[LevelReport], None]

__all__ = ["Crawler", "CrawlConfig", "CrawlState", "Reporter"]


class CrawlState(str, Enum):
    READY = "ready"
    RUNNING = "running"
    DONE = "done"


class Crawler:
    """
    Breadth-first crawler for a single host.

    Owns the frontier and the visited set for its whole lifetime. Each
    level fetches the entire frontier concurrently and waits for every
    fetch before the next level begins.
    """

    def __init__(
        self,
        host: str,
        config: Optional[CrawlConfig] = None,
        reporter: Optional[Reporter] = None,
    ):
        self.config = config or CrawlConfig()
        self.host = validate_host(host)
        self.reporter = reporter

        try:
            seed = build_address(self.config.scheme, self.host)
        except InvalidAddressError as e:
            raise InvalidHostError(host, e.reason) from e

        self.visited = VisitedSet()
        self.frontier = Frontier([seed])
        self.depth = 0
        self.state = CrawlState.READY
        self.levels: list[LevelReport] = []

    async def run(self, session: Optional[aiohttp.ClientSession] = None) -> CrawlResult:
        """
        Crawl until a stop condition is met.

        Args:
            session: Session to fetch with. When omitted, one is opened for
                the crawl and closed afterwards.
        """
        if self.state is not CrawlState.READY:
            raise CrawlStateError(f"Crawler is already {self.state.value}")
        self.state = CrawlState.RUNNING

        try:
            if session is not None:
                return await self._crawl(session)

            connector = aiohttp.TCPConnector(
                limit=self.config.concurrency,
                ttl_dns_cache=300,
            )
            async with aiohttp.ClientSession(
                headers={"User-Agent": self.config.user_agent}, connector=connector
            ) as owned_session:
                return await self._crawl(owned_session)
        finally:
            self.state = CrawlState.DONE

    async def _crawl(self, session: aiohttp.ClientSession) -> CrawlResult:
        logger.info(
            f"Crawl started: {self.host} (max_depth={self.config.max_depth}, "
            f"concurrency={self.config.concurrency or 'unbounded'})"
        )

        stop_reason: StopReason
        while self.depth < self.config.max_depth and self.frontier:
            logger.info(f"Level {self.depth + 1}: fetching {len(self.frontier)} addresses")
            try:
                outcome = await run_level(
                    session, self.frontier, self.visited, self.host, self.config
                )
            except CrawlError as e:
                # A failed level still counts toward the depth bound
                self.depth += 1
                logger.error(f"Level {self.depth} failed: {e}", exc_info=True)
                continue

            self.depth += 1
            logger.info(
                f"Level {self.depth} done: {outcome.attempted} fetched, "
                f"{outcome.failed} failed, {len(outcome.discovered)} new links"
            )

            if not outcome.discovered:
                stop_reason = "no_new_links"
                break

            report = LevelReport(
                depth=self.depth,
                discovered=outcome.discovered,
                visited=self.visited.paths(),
                attempted=outcome.attempted,
                failed=outcome.failed,
            )
            self.levels.append(report)
            if self.reporter is not None:
                self.reporter(report)
        else:
            if self.depth >= self.config.max_depth:
                stop_reason = "max_depth"
            else:
                stop_reason = "frontier_exhausted"

        logger.info(
            f"Crawl finished: {self.host} after {self.depth} levels "
            f"({stop_reason}, {len(self.visited)} links)"
        )
        return CrawlResult(
            host=self.host,
            depth=self.depth,
            stop_reason=stop_reason,
            levels=self.levels,
            visited=self.visited.paths(),
        )
