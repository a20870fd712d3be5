from __future__ import annotations

import dataclasses
from pathlib import Path

import typer

from relnotes.cli.commands._helpers import unwrap_or_exit, version_callback
from relnotes.cli.context import build_context
from relnotes.github.releases import ReleaseSource
from relnotes.notes.render import write_markdown
from relnotes.notes.service import NotesRequest, build_notes


def notes(
    from_: str | None = typer.Option(
        None, "--from", metavar="VERSION", help="First release to include, e.g. 73.1."
    ),
    to: str | None = typer.Option(
        None, "--to", metavar="VERSION", help="Last release to include, e.g. 74.2."
    ),
    repo: str | None = typer.Option(None, "--repo", help="GitHub repository (owner/name)."),
    prefix: str | None = typer.Option(
        None, "--prefix", help="Release name prefix, e.g. 'ICU' for 'ICU 74.1'."
    ),
    all_pages: bool = typer.Option(
        False, "--all-pages", help="Read every page of the releases listing, not just the first."
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write markdown to this file instead of stdout."
    ),
    config: Path | None = typer.Option(
        None, "--config", envvar="RELNOTES_CONFIG", help="TOML config file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print diagnostics to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Render the release notes from --from through --to as one markdown document."""
    ctx = build_context(config_path=config, verbose=verbose)

    source = ReleaseSource.from_config(ctx.config, all_pages=all_pages)
    if repo is not None:
        source = dataclasses.replace(source, repo=repo)
    if prefix is not None:
        source = dataclasses.replace(source, prefix=prefix)

    document = unwrap_or_exit(
        build_notes(
            NotesRequest(start=from_, end=to),
            http=ctx.http,
            source=source,
            console=ctx.console,
        )
    )

    if output is None:
        typer.echo(document.markdown)
        return

    written = unwrap_or_exit(write_markdown(output, document.markdown))
    if ctx.console is not None:
        ctx.console.info(f"wrote {len(document.releases)} release(s) to {written}")
