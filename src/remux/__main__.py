"""Allow ``python -m remux``."""

from remux.cli import main

main()
