"""
FILE: tap/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - PROG_NAME: Program name used as diagnostic prefix
  - OPT_ADD, OPT_COMPLETE, OPT_FILE, OPT_REMOVE: Recognized option tokens
  - FLAG_ALL, FLAG_ALL_COMPLETED: Special arguments of complete/remove
  - UNIT_SECONDS: Seconds per relative time unit
  - WIRE_UNSET: Persisted marker for an unset timestamp
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Centralized constants to avoid magic strings
"""

PROG_NAME = "tap"

# Option tokens recognized on the command line
OPT_ADD = "add"
OPT_COMPLETE = "complete"
OPT_FILE = "file"
OPT_REMOVE = "remove"
OPTIONS = (OPT_ADD, OPT_COMPLETE, OPT_FILE, OPT_REMOVE)

FLAG_ALL = "--all"
FLAG_ALL_COMPLETED = "--all-completed"

# Relative time units
UNIT_SECONDS = {
    "y": 365 * 24 * 3600,
    "m": 30 * 24 * 3600,
    "d": 24 * 3600,
    "h": 3600,
    "s": 1,
}

# Absolute time field separators
DATE_SEPARATORS = "-/ :"

TIMESTAMP_FORMAT = "%Y-%m-%d :: %H:%M:%S"
TIMESTAMP_PLACEHOLDER = "unspecified"

# Largest signed 64-bit integer; stored in place of an unset timestamp
WIRE_UNSET = 2**63 - 1

# Config store
ENV_PREFIX = "TAP"
CONFIG_DIRNAME = ".config/tap"
CONFIG_FILENAME = "tap.conf"
DEFAULT_STORE_FILENAME = "tasks.json"
