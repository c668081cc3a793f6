"""
Crawler State Layer

Provides Frontier (addresses for the current level) and VisitedSet
(every link path seen so far). Both live in memory for one crawl.
"""

from linkcrawl.db.frontier import Frontier
from linkcrawl.db.visited import VisitedSet

__all__ = ["Frontier", "VisitedSet"]
