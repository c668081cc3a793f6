"""
Crawl Result Models

Pydantic models describing one level of the crawl and the crawl as a whole.
"""

from typing import Literal

from pydantic import BaseModel, Field

StopReason = Literal["max_depth", "frontier_exhausted", "no_new_links"]


class LevelOutcome(BaseModel):
    """What a single fetch cycle produced"""

    attempted: int = Field(default=0, ge=0, description="Addresses fetched this level")
    failed: int = Field(default=0, ge=0, description="Fetches that yielded no body")
    discovered: list[str] = Field(
        default_factory=list,
        description="Link paths first seen during this level, in discovery order",
    )


class LevelReport(BaseModel):
    """Progress report emitted after a level that found new links"""

    depth: int = Field(..., ge=1, description="Number of levels completed")
    discovered: list[str] = Field(
        default_factory=list, description="Link paths new at this level"
    )
    visited: list[str] = Field(
        default_factory=list, description="All link paths seen so far"
    )
    attempted: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)


class CrawlResult(BaseModel):
    """Final state of a finished crawl"""

    host: str
    depth: int = Field(..., ge=0, description="Levels performed")
    stop_reason: StopReason
    levels: list[LevelReport] = Field(default_factory=list)
    visited: list[str] = Field(default_factory=list)
