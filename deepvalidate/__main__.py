"""Main entry point for the deepvalidate package."""

from deepvalidate.cli.cli import cli


def main() -> None:
    """Entry point for the deepvalidate CLI."""
    cli()


if __name__ == "__main__":
    main()
