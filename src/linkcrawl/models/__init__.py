"""
Models package initialization
"""

from linkcrawl.models.crawl import CrawlResult, LevelOutcome, LevelReport, StopReason

__all__ = ["CrawlResult", "LevelOutcome", "LevelReport", "StopReason"]
