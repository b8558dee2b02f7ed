"""
Absolute-URL validation helpers.
"""

import re
import urllib.parse
from collections.abc import Iterable

# Whitespace or ASCII control characters anywhere in the candidate.
_BAD_CHARS_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def is_absolute_url(candidate: object) -> bool:
    """
    Return ``True`` when *candidate* is a string that parses as an absolute
    URL, i.e. it has both a scheme and a host.

    No scheme allow-list is applied: ``ftp://host/x`` is accepted while
    ``mailto:a@b.c`` and ``file:///etc/hosts`` are rejected because they
    carry no host.  Bare hostnames and relative paths have no scheme and
    are rejected as well.

    Whitespace or control characters anywhere in the string reject it, so
    ``https://example.com/a b`` is dropped rather than percent-encoded the
    way a WHATWG URL parser would.  Declared webhooks are expected to be
    written already encoded.
    """
    if not isinstance(candidate, str) or not candidate:
        return False
    if _BAD_CHARS_RE.search(candidate):
        return False

    try:
        parsed = urllib.parse.urlsplit(candidate)
        # Accessing .port validates it (non-numeric / out of range).
        parsed.port
    except ValueError:
        return False

    if not parsed.scheme or not parsed.netloc:
        return False
    # "https://user@/" has a netloc but no host
    return bool(parsed.hostname)


def filter_valid_urls(candidates: Iterable[object]) -> list[str]:
    """Keep the candidates that are absolute URLs, in their original order."""
    return [c for c in candidates if is_absolute_url(c)]
