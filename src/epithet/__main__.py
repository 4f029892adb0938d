"""Allow ``python -m epithet``."""

from epithet.cli.main import main

main()
