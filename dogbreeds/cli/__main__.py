"""Allow ``python -m dogbreeds.cli`` execution."""

from dogbreeds.cli.lookup import main

main()
