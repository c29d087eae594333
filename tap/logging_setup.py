"""
FILE: tap/logging_setup.py
PURPOSE: One-time logging configuration for the CLI
EXPORTS:
  - setup_logging(verbose) -> None
DEPENDENCIES:
  - logging (stdlib)
  - rich.logging (RichHandler, renders to stderr)
NOTES:
  - Only tap.* loggers are raised to DEBUG by --verbose / TAP_DEBUG=1
  - Third-party loggers stay at WARNING
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging with a single rich handler on stderr.

    Call this ONCE, before the first log call.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format="%H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    logging.getLogger("tap").setLevel(logging.DEBUG if verbose else logging.WARNING)
