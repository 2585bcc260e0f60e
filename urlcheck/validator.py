"""URL syntax validation."""

from urllib.parse import urlsplit, SplitResult
import ipaddress
import re

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Code points a WHATWG URL parser refuses in a host
_FORBIDDEN_HOST_CHARS = re.compile(r'[\x00-\x20\x7f"#%/<>?@\[\\\]^`{|}]')


class InvalidFormat(ValueError):
    """The string is not an absolute http(s) URL."""


def _check_host(hostname: str) -> None:
    if _FORBIDDEN_HOST_CHARS.search(hostname):
        raise InvalidFormat(f"Invalid character in host: {hostname!r}")
    if ":" in hostname:
        # Only a bracketed IPv6 literal may contain colons
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError as e:
            raise InvalidFormat(f"Invalid IPv6 host: {hostname!r}") from e


def validate_url(raw: str) -> SplitResult:
    """Parse ``raw`` as an absolute http or https URL.

    Raises:
        InvalidFormat: if parsing fails, the scheme is not allowed, the
            URL has no host or the host holds characters no URL host may.
    """
    try:
        parsed = urlsplit(raw.strip())
        hostname = parsed.hostname
        # Accessing the port validates it
        parsed.port
    except ValueError as e:
        raise InvalidFormat(str(e)) from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidFormat(f"Invalid protocol: {parsed.scheme or 'none'}")
    if not hostname:
        raise InvalidFormat("URL has no host")
    _check_host(hostname)

    return parsed
