import re
from urllib.parse import urlsplit

from linkcrawl.core.exceptions import InvalidAddressError, InvalidHostError

MAX_URL_LENGTH = 2083

_FORBIDDEN_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def validate_host(host: str | None) -> str:
    """
    Check that `host` is a bare host (optionally with a port).

    Args:
        host: Command-line host such as "example.com" or "localhost:8080"

    Returns:
        The host, stripped of surrounding whitespace

    Raises:
        InvalidHostError: if the host is empty, carries a scheme, path,
            query, credentials or an unparsable port
    """
    if host is None:
        raise InvalidHostError("", "no host given")
    candidate = host.strip()
    if not candidate:
        raise InvalidHostError(host, "host is empty")
    if "://" in candidate:
        raise InvalidHostError(host, "give a bare host without a scheme")
    if _FORBIDDEN_CHARS.search(candidate):
        raise InvalidHostError(host, "host contains whitespace or control characters")

    parts = urlsplit(f"http://{candidate}")
    if parts.path or parts.query or parts.fragment:
        raise InvalidHostError(host, "host must not contain a path, query or fragment")
    if parts.username is not None or parts.password is not None:
        raise InvalidHostError(host, "host must not contain credentials")
    if not parts.hostname:
        raise InvalidHostError(host, "host name is missing")
    try:
        parts.port
    except ValueError as e:
        raise InvalidHostError(host, str(e)) from e
    return candidate


def build_address(scheme: str, host: str, path: str = "") -> str:
    """
    Join scheme, host and a raw link path into a fetchable address.

    The path is appended verbatim; no relative resolution is done.
    """
    address = f"{scheme}://{host}{path}"
    if len(address) > MAX_URL_LENGTH:
        raise InvalidAddressError(address, f"longer than {MAX_URL_LENGTH} characters")
    if _FORBIDDEN_CHARS.search(address):
        raise InvalidAddressError(address, "contains whitespace or control characters")
    try:
        parts = urlsplit(address)
        parts.port
    except ValueError as e:
        raise InvalidAddressError(address, str(e)) from e
    if not parts.hostname:
        raise InvalidAddressError(address, "no host name")
    return address
