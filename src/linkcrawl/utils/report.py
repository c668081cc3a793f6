"""
Console Report Formatting

Renders crawl progress for stdout.
"""

from typing import Iterable

from linkcrawl.models.crawl import LevelReport

# Always printed as the last element, so an empty set renders as "[/]"
ROOT_SENTINEL = "/"


def format_links(paths: Iterable[str]) -> str:
    """Render paths as "[/about, /contact, /]"."""
    return "[" + ", ".join([*paths, ROOT_SENTINEL]) + "]"


def format_level(report: LevelReport) -> str:
    return f"Depth: {report.depth}\n{format_links(report.visited)}"
