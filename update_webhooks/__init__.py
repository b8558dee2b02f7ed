"""
update_webhooks
===============
Extract the webhook URLs a YAML service definition declares under the
top-level ``x-update-webhooks`` key.

Package structure
-----------------
update_webhooks/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── document.py       – file reading and YAML parsing
├── extractor.py      – webhook field lookup and the extraction pipeline
├── cli.py            – argparse CLI / GitHub Actions step
└── utils/
    ├── url.py        – absolute-URL validation
    └── log.py        – logging setup (colorlog, GitHub Actions annotations)

Quick start
-----------
    from update_webhooks import extract_webhooks

    for url in extract_webhooks("service.yml"):
        print(url)
"""

from .config    import WEBHOOK_KEY
from .document  import ParseResult, load_document, parse_document, read_text
from .extractor import extract_candidates, extract_webhooks, get_field
from .utils.url import filter_valid_urls, is_absolute_url

__all__ = [
    "WEBHOOK_KEY",
    "ParseResult",
    "load_document",
    "parse_document",
    "read_text",
    "extract_candidates",
    "extract_webhooks",
    "get_field",
    "filter_valid_urls",
    "is_absolute_url",
]
