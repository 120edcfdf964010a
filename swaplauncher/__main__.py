"""Allow ``python -m swaplauncher``."""

from swaplauncher.main import cli

if __name__ == "__main__":
    cli()
