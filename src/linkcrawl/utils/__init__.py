"""
Utilities package initialization
"""

from linkcrawl.utils.parser import extract_links
from linkcrawl.utils.report import format_links, format_level

__all__ = ["extract_links", "format_links", "format_level"]
