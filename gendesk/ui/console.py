"""Colored per-package progress lines on the terminal.

    [pkgname]                        Generating desktop file... ok
"""

from __future__ import annotations

import click

NAME_COLUMN = 32


class Reporter:
    """Prints progress to stdout unless quiet, and errors to stderr always."""

    def __init__(self, quiet: bool = False, color: bool = True) -> None:
        self.quiet = quiet
        # None lets click strip styles when stdout is not a terminal
        self.color: bool | None = None if color else False

    def _echo(self, text: str, nl: bool = True, err: bool = False) -> None:
        click.echo(text, nl=nl, err=err, color=self.color)

    def step(self, pkgname: str, message: str) -> None:
        """Start a progress line; finish it with one of the result methods."""
        if self.quiet:
            return
        spaces = " " * (NAME_COLUMN - min(NAME_COLUMN, len(pkgname)))
        gray = {"fg": "black", "bold": True}
        self._echo(
            click.style("[", **gray)
            + click.style(pkgname, fg="blue", bold=True)
            + click.style("]", **gray)
            + spaces
            + click.style(message, **gray)
            + " ",
            nl=False,
        )

    def _result(self, text: str, **style) -> None:
        if not self.quiet:
            self._echo(click.style(text, **style))

    def ok(self) -> None:
        self._result("ok", fg="green")

    def downloaded(self) -> None:
        self._result("ok", fg="cyan", bold=True)

    def no(self) -> None:
        self._result("no", fg="yellow")

    def yes(self) -> None:
        self._result("yes", fg="magenta", bold=True)

    def skipped(self, reason: str) -> None:
        self._result(reason, fg="yellow")

    def error(self, message: str) -> None:
        self._echo(click.style(message, fg="red"), err=True)
