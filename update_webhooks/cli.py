"""
Command-line interface for the webhook extractor.

Designed to run as a GitHub Actions step: the document path may come from
the action input ``file`` and the result is published as a step output.
"""

import argparse
import json
import os
import sys

from update_webhooks.config import (
    DEFAULT_OUTPUT_NAME, GITHUB_OUTPUT_ENV, INPUT_FILE_ENV, WEBHOOK_KEY,
)
from update_webhooks.document import load_document
from update_webhooks.extractor import extract_candidates
from update_webhooks.utils.url import is_absolute_url
from update_webhooks.utils.log import ci_endgroup, ci_group, log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="update-webhooks",
        description=f"List the webhook URLs declared under '{WEBHOOK_KEY}' "
                    "in a YAML service definition.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  update-webhooks service.yml\n"
            "  update-webhooks service.yml --output-name urls\n"
            f"  {INPUT_FILE_ENV}=service.yml python -m update_webhooks\n"
        ),
    )
    parser.add_argument(
        "file", nargs="?", default=os.environ.get(INPUT_FILE_ENV) or None,
        help=f"YAML document to read (default: ${INPUT_FILE_ENV})",
    )
    parser.add_argument(
        "--output-name", default=DEFAULT_OUTPUT_NAME,
        help=f"Step output name written to ${GITHUB_OUTPUT_ENV} "
             f"(default: {DEFAULT_OUTPUT_NAME})",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    args = parser.parse_args(argv)
    if not args.file:
        parser.error(f"no document given (pass FILE or set {INPUT_FILE_ENV})")
    return args


def write_github_output(name: str, value: str) -> bool:
    """Append ``name=value`` to the ``$GITHUB_OUTPUT`` file.

    Returns ``False`` when not running under GitHub Actions.
    """
    output_file = os.environ.get(GITHUB_OUTPUT_ENV)
    if not output_file:
        return False
    with open(output_file, "a", encoding="utf-8") as f:
        f.write(f"{name}={value}\n")
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    ci_group(f"Extracting webhooks from {args.file}")
    try:
        result = load_document(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Cannot read %s: %s", args.file, exc)
        return 1
    finally:
        ci_endgroup()

    if not result.ok:
        log.warning("%s is not valid YAML: %s", args.file, result.error)

    webhooks = []
    for candidate in extract_candidates(result):
        if is_absolute_url(candidate):
            webhooks.append(candidate)
        else:
            log.debug("Skipping entry that is not an absolute URL: %r", candidate)

    if webhooks:
        log.info("Found %d webhook(s) in %s", len(webhooks), args.file)
        for url in webhooks:
            log.debug("Webhook: %s", url)
    else:
        log.warning("No webhooks declared under '%s' in %s", WEBHOOK_KEY, args.file)

    payload = json.dumps(webhooks)
    print(payload)
    if write_github_output(args.output_name, payload):
        log.debug("Output %s written to $%s", args.output_name, GITHUB_OUTPUT_ENV)
    return 0


if __name__ == "__main__":
    sys.exit(main())
