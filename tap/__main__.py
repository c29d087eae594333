"""Allow running as ``python -m tap``."""

from .cli.main import main

main()
