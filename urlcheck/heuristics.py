"""Hostname heuristics used when URLhaus is unreachable."""

from dataclasses import dataclass
from typing import Callable
from urllib.parse import urlsplit
import re

URL_SHORTENERS = frozenset({"bit.ly", "tinyurl.com", "t.co"})

_IPV4_PATTERN = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}")
_LONG_LABEL_PATTERN = re.compile(r"[a-z0-9\-]{20,}\.")
_MIXED_PATTERN = re.compile(r"[0-9]+[a-z]+[0-9]+")


class FallbackFailed(Exception):
    """The heuristic check could not run at all."""


@dataclass(frozen=True)
class HeuristicRule:
    """Named predicate over a lowercased hostname."""
    name: str
    matches: Callable[[str], bool]


def _is_shortener(hostname: str) -> bool:
    return any(
        hostname == domain or hostname.endswith("." + domain)
        for domain in URL_SHORTENERS
    )


# Evaluated in order; a hostname may trip several rules.
RULES: list[HeuristicRule] = [
    HeuristicRule("ip_address", lambda host: bool(_IPV4_PATTERN.fullmatch(host))),
    HeuristicRule("long_label", lambda host: bool(_LONG_LABEL_PATTERN.search(host))),
    HeuristicRule("url_shortener", _is_shortener),
    HeuristicRule("mixed_alphanumeric", lambda host: bool(_MIXED_PATTERN.search(host))),
]


def extract_hostname(url: str) -> str:
    """Return the lowercased hostname of ``url``.

    Raises:
        FallbackFailed: if the URL has no usable hostname.
    """
    try:
        hostname = urlsplit(url).hostname
    except ValueError as e:
        raise FallbackFailed(f"Could not parse URL: {e}") from e
    if not hostname:
        raise FallbackFailed("Could not extract hostname from URL")
    return hostname.lower()


def matching_rules(hostname: str, rules: list[HeuristicRule] = RULES) -> list[str]:
    """Names of every rule the hostname trips, in rule order."""
    host = hostname.lower()
    return [rule.name for rule in rules if rule.matches(host)]
