"""
Logging for the ``update-webhooks`` command.

Console output is coloured with ``colorlog``.  Under GitHub Actions,
warnings and errors become ``::warning::`` / ``::error::`` annotations.
"""

import logging
import os
import sys
from pathlib import Path

import colorlog

from update_webhooks.config import GITHUB_ACTIONS_ENV

log = logging.getLogger("update-webhooks")

_LOG_COLORS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}


def running_in_ci() -> bool:
    return os.environ.get(GITHUB_ACTIONS_ENV) == "true"


def ci_group(title: str) -> None:
    """Open a collapsible log group in GitHub Actions (no-op elsewhere).

    Workflow commands go to stderr; stdout carries the command's result.
    """
    if running_in_ci():
        print(f"::group::{title}", file=sys.stderr, flush=True)


def ci_endgroup() -> None:
    if running_in_ci():
        print("::endgroup::", file=sys.stderr, flush=True)


class _CIFormatter(logging.Formatter):
    """Prefix warnings and errors with GitHub Actions workflow commands."""

    _CI_COMMANDS: dict[int, str] = {
        logging.WARNING:  "::warning::",
        logging.ERROR:    "::error::",
        logging.CRITICAL: "::error::",
    }

    def format(self, record: logging.LogRecord) -> str:
        return self._CI_COMMANDS.get(record.levelno, "") + super().format(record)


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Attach a console handler, plus a DEBUG file handler when *log_file* is set."""
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(logging.DEBUG if log_file else level)
    log.handlers.clear()

    if running_in_ci():
        console = logging.StreamHandler()
        console.setFormatter(_CIFormatter("[%(levelname)s] %(message)s"))
    else:
        console = colorlog.StreamHandler()
        console.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors=_LOG_COLORS,
        ))
    console.setLevel(level)
    log.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        ))
        log.addHandler(fh)
