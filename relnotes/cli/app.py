from __future__ import annotations

import sys

import click
import typer

from relnotes.cli.commands._helpers import report
from relnotes.cli.commands.notes import notes
from relnotes.core.errors import ErrorCode
from relnotes.notes.errors import UsageInvalid


# Single command: options are given directly, `relnotes --from=73.1 --to=74.2`.
app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode=None,
)

app.command()(notes)


def main() -> None:
    # Parser errors (unknown option, option missing its value) are reported
    # like every other fatal condition: one ERROR line, exit code 1.
    try:
        code = app(standalone_mode=False)
    except click.UsageError as e:
        sys.exit(report(UsageInvalid(message=e.format_message())))
    except typer.Abort:
        typer.echo("Aborted!", err=True)
        sys.exit(int(ErrorCode.USER_ERROR))
    sys.exit(code if isinstance(code, int) else int(ErrorCode.OK))
