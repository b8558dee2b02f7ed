"""
Main entry point for the update_webhooks package.

Allows running the extractor as: python -m update_webhooks
"""

import sys

from update_webhooks.cli import main

if __name__ == "__main__":
    sys.exit(main())
