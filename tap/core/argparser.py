"""
FILE: tap/core/argparser.py
PURPOSE: Partition a flat argument vector into per-option ranges
EXPORTS:
  - ArgInfo (dataclass: one option's range and presence flag)
  - ArgRangeParser
DEPENDENCIES:
  - dataclasses, typing (stdlib)
NOTES:
  - An option's range starts right after its token and runs until the
    next registered option token or the end of the scanned span
  - Tokens that are not registered options and not inside a range are
    reported as unknown, in order
  - A registered option seen a second time is reported as unknown;
    its first range is kept
  - Single left-to-right pass, no backtracking
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass
class ArgInfo:
    """
    Arguments belonging to one option.

    Attributes:
        name: Option token (e.g. "add")
        begin: Index of the first argument after the option token
        end: One past the last argument of the option
        passed: Whether the option token occurred at all
    """
    name: str
    begin: int = 0
    end: int = 0
    passed: bool = False

    def is_passed(self) -> bool:
        return self.passed

    def has_args(self) -> bool:
        return self.passed and self.end > self.begin

    @property
    def range(self) -> range:
        return range(self.begin, self.end)

    def values(self, args: Sequence[str]) -> List[str]:
        """The option's arguments, sliced out of the parsed vector."""
        return list(args[self.begin:self.end])


class ArgRangeParser:
    """Splits command-line arguments into ranges keyed by option name."""

    def __init__(self, options: Optional[Sequence[str]] = None):
        self._options: Dict[str, ArgInfo] = {}
        for name in options or ():
            self.register(name)

    def register(self, name: str) -> None:
        """Recognize name as an option token (re-registering resets it)."""
        self._options[name] = ArgInfo(name)

    def get(self, name: str) -> ArgInfo:
        return self._options[name]

    def has_args(self, name: str) -> bool:
        return self._options[name].has_args()

    def is_passed(self, name: str) -> bool:
        return self._options[name].is_passed()

    def parse(self, args: Sequence[str], span: Optional[range] = None) -> List[str]:
        """
        Scan args and assign each token to an option range.

        Args:
            args: Full argument vector (position 0 is the program name)
            span: Positions to scan; defaults to range(1, len(args)).
                The end is clamped to len(args).

        Returns:
            Unknown tokens in the order they were encountered
        """
        if span is None:
            span = range(1, len(args))

        for name in self._options:
            self._options[name] = ArgInfo(name)

        unknown: List[str] = []
        i = span.start
        end = min(span.stop, len(args))

        while i < end:
            token = args[i]
            info = self._options.get(token)

            if info is None or info.passed:
                unknown.append(token)
                i += 1
                continue

            i += 1
            info.begin = i
            info.passed = True
            while i < end and args[i] not in self._options:
                i += 1
            info.end = i
            logger.debug("option %s -> args[%d:%d]", token, info.begin, info.end)

        return unknown
