"""
HTML Link Extraction

Pulls href values out of anchor tags with a single regular expression.
"""

import re
from typing import Iterator

# <a ...href="value"> with the value captured; single quotes are accepted too.
# The attribute run stops at the next "<" so an unclosed tag is scanned once.
ANCHOR_HREF_PATTERN = re.compile(
    r"""<a\s[^<>]*href=(?:"([^"]*)"|'([^']*)')""",
    re.IGNORECASE,
)


def extract_links(body: str) -> Iterator[str]:
    """
    Yield href values of anchor tags in order of appearance.

    Values are returned verbatim and duplicates are kept; deduplication
    belongs to the caller. Text that does not match is skipped silently.

    Args:
        body: Raw HTML string

    Yields:
        Link paths such as "/about" or "contact.html"
    """
    for match in ANCHOR_HREF_PATTERN.finditer(body):
        double_quoted, single_quoted = match.groups()
        yield double_quoted if double_quoted is not None else single_quoted
