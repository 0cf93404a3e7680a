"""Allow ``python -m zero``."""

from zero.cli import main

main()
