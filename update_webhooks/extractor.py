"""
Webhook extraction: locate the webhook declaration in a parsed document and
return the absolute URLs it lists.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from update_webhooks.config import WEBHOOK_KEY
from update_webhooks.document import ParseResult, load_document, parse_document, read_text
from update_webhooks.utils.url import filter_valid_urls


def get_field(tree: Any, key: str) -> Any:
    """Return ``tree[key]`` when *tree* is a mapping, else ``None``."""
    if isinstance(tree, dict):
        return tree.get(key)
    return None


def extract_candidates(result: ParseResult, key: str = WEBHOOK_KEY) -> list[Any]:
    """
    Return the raw entries listed under *key*, unvalidated.

    A failed parse, a document that is not a mapping, a missing key and a
    value that is not a list all yield ``[]``.  Entries are returned as
    they appear in the document; non-string entries are left for the URL
    validator to reject.
    """
    if not result.ok:
        return []

    value = get_field(result.tree, key)
    if not isinstance(value, list):
        return []
    return list(value)


def extract_webhooks(
    path: str | Path,
    key: str = WEBHOOK_KEY,
    reader: Callable[[str | Path], str] = read_text,
    parser: Callable[[str], ParseResult] = parse_document,
) -> list[str]:
    """
    Return the valid absolute webhook URLs declared under *key* in the
    document at *path*, in declaration order.

    Malformed documents and unexpected shapes give ``[]``.  Errors raised
    while reading the file propagate.
    """
    candidates = extract_candidates(load_document(path, reader, parser), key)
    return filter_valid_urls(candidates)
