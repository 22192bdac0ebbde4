"""Allow ``python -m tuimenu.cli``."""

from tuimenu.cli import cli_main

cli_main()
