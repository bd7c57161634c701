"""Allow ``python -m trash_guides``."""

from .cli import cli

if __name__ == "__main__":
    cli()
