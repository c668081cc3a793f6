"""
linkcrawl package

Breadth-first link discovery crawler. Exposes the main public surface:
    from linkcrawl import Crawler, CrawlConfig
"""

from linkcrawl.crawler import Crawler, CrawlConfig, CrawlState

__all__ = ["Crawler", "CrawlConfig", "CrawlState"]
__version__ = "0.1.0"
