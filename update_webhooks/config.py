"""
Configuration constants for the webhook extractor.
"""

# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------
WEBHOOK_KEY = "x-update-webhooks"   # top-level list of URLs to notify
FILE_ENCODING = "utf-8"

# ---------------------------------------------------------------------------
# GitHub Actions integration
# ---------------------------------------------------------------------------
GITHUB_ACTIONS_ENV = "GITHUB_ACTIONS"
GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"
INPUT_FILE_ENV = "INPUT_FILE"        # action input ``file``
DEFAULT_OUTPUT_NAME = "webhooks"
