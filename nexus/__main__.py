"""Allow ``python -m nexus``."""

from nexus.interfaces.cli.main import main

main()
