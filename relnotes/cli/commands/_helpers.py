"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import NoReturn, TypeVar

import typer

from relnotes import __version__
from relnotes.core.errors import ErrorCode
from relnotes.core.result import Err, Result
from relnotes.notes.errors import NotesError
from relnotes.output.errors import notes_error_exit_code, notes_error_message

T = TypeVar("T")


def report(error: NotesError) -> int:
    """Print one ``ERROR:`` line on stderr and return the exit code for it."""
    typer.echo(f"ERROR: {notes_error_message(error)}", err=True)
    return notes_error_exit_code(error)


def fail(error: NotesError) -> NoReturn:
    """Report a fatal condition and exit."""
    raise typer.Exit(code=report(error))


def unwrap_or_exit(result: Result[T, NotesError]) -> T:
    """Return the Ok value, or exit through ``fail``.

    Replaces the repetitive pattern:
        if isinstance(result, Err):
            typer.echo(f"ERROR: ...", err=True)
            raise typer.Exit(code=1)
        value = result.value
    """
    if isinstance(result, Err):
        fail(result.error)
    return result.value


def version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))
