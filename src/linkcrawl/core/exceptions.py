"""
Crawler Errors

Every fault the crawler reports belongs to one of four kinds: bad input at
startup, a link that cannot be turned into an address, a failed fetch, or an
internal crawl error. Only input errors end the process.
"""


class CrawlerError(Exception):
    """Base class for all crawler errors"""


class InputError(CrawlerError):
    """Seed host could not be accepted; fatal at startup"""


class MissingHostError(InputError):
    pass


class InvalidHostError(InputError):
    def __init__(self, host: str, reason: str):
        self.host = host
        self.reason = reason
        super().__init__(f"Invalid host '{host}': {reason}")


class ExtractionError(CrawlerError):
    """A single extracted link could not be used; the match is skipped"""


class InvalidAddressError(ExtractionError):
    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid address '{address}': {reason}")


class FetchError(CrawlerError):
    """A single fetch failed; the address yields zero links"""

    def __init__(self, address: str, reason: str, status: int | None = None):
        self.address = address
        self.reason = reason
        self.status = status
        super().__init__(f"Fetch failed for {address}: {reason}")


class CrawlError(CrawlerError):
    """Internal error while processing a level"""


class CrawlStateError(CrawlError):
    pass
