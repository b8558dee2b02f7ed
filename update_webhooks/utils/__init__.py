"""Utility helpers for URL validation and logging."""

from update_webhooks.utils.url import is_absolute_url, filter_valid_urls
from update_webhooks.utils.log import setup_logging, log

__all__ = [
    "is_absolute_url",
    "filter_valid_urls",
    "setup_logging",
    "log",
]
