"""
Document loading: read a YAML file and parse it into a generic tree.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from update_webhooks.config import FILE_ENCODING


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a document.

    ``error`` is ``None`` on success, in which case ``tree`` holds the parsed
    value (``None`` for an empty document).  On failure ``error`` carries the
    parser's message and ``tree`` is always ``None``.
    """

    tree: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_text(path: str | Path) -> str:
    """Return the text content of *path*.

    Read failures (``OSError``, ``UnicodeDecodeError``) are not caught here:
    they point at the caller or the environment, not at the document.
    """
    return Path(path).read_text(encoding=FILE_ENCODING)


def parse_document(text: str) -> ParseResult:
    """Parse *text* as YAML without ever raising on malformed content."""
    # Out-of-range timestamps (e.g. 2024-13-45) surface as ValueError, and
    # deeply nested collections exhaust the recursive parser.
    try:
        return ParseResult(tree=yaml.safe_load(text))
    except (yaml.YAMLError, ValueError, RecursionError) as exc:
        return ParseResult(error=str(exc) or type(exc).__name__)


def load_document(
    path: str | Path,
    reader: Callable[[str | Path], str] = read_text,
    parser: Callable[[str], ParseResult] = parse_document,
) -> ParseResult:
    """Read *path* with *reader* and parse the text with *parser*."""
    return parser(reader(path))
