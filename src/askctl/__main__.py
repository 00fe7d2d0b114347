"""Allow ``python -m askctl``."""

from askctl.cli import cli

if __name__ == "__main__":
    cli()
