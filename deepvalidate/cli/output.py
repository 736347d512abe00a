"""Styled output formatting for validation results."""

import click


class Style:
    """Markers and formatters for validation reports."""

    VALID = click.style("ok", fg="green", bold=True)
    INVALID = click.style("fail", fg="red", bold=True)
    NOTICE = click.style("::", fg="yellow")
    BULLET = click.style("•", fg="red")

    @staticmethod
    def notice(text: str) -> str:
        """Format an informational line written to stderr."""
        return f"{Style.NOTICE} {text}"

    @staticmethod
    def valid(text: str) -> str:
        """Format the summary line of a value without failures."""
        return f"{Style.VALID} {text}"

    @staticmethod
    def invalid(text: str, count: int) -> str:
        """Format the summary line of a value with ``count`` failures."""
        return f"{Style.INVALID} {text} has {count} error(s):"

    @staticmethod
    def failure(text: str) -> str:
        """Format a single validation failure."""
        return f"  {Style.BULLET} {text}"
