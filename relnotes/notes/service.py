"""Notes pipeline: validate the requested range, fetch, select, render.

Each stage returns a Result; the first Err stops the pipeline and is handed
back untouched, so the CLI can report it and exit in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relnotes.core.result import Err, Ok, Result
from relnotes.github.releases import ReleaseSource, fetch_releases
from relnotes.notes.errors import (
    EndpointNotFound,
    EndpointOption,
    InvalidVersionFormat,
    InvertedRange,
    MissingArgument,
    NetworkOrParseFailure,
    NotesError,
)
from relnotes.notes.model import Release
from relnotes.notes.render import render_markdown
from relnotes.notes.selection import select_range
from relnotes.notes.version import Version, compare_versions, parse_version

if TYPE_CHECKING:
    from relnotes.github.http import HttpClient
    from relnotes.output.console import ConsoleProtocol


@dataclass(frozen=True, slots=True)
class NotesRequest:
    """Raw endpoint inputs as given on the command line."""

    start: str | None
    end: str | None


@dataclass(frozen=True, slots=True)
class VersionRange:
    start: Version
    end: Version


@dataclass(frozen=True, slots=True)
class NotesDocument:
    releases: tuple[Release, ...]
    markdown: str


def _require_version(option: EndpointOption, raw: str) -> Result[Version, NotesError]:
    version = parse_version(raw)
    if version is None:
        return Err(InvalidVersionFormat(option=option, value=raw))
    return Ok(version)


def validate_request(request: NotesRequest) -> Result[VersionRange, NotesError]:
    """Check presence and format of both endpoints, then their order.

    Presence of both options is checked before either is parsed, so a run
    missing ``--to`` reports that even when ``--from`` is malformed.
    """
    if request.start is None:
        return Err(MissingArgument(option="from"))
    if request.end is None:
        return Err(MissingArgument(option="to"))

    start = _require_version("from", request.start)
    if isinstance(start, Err):
        return start
    end = _require_version("to", request.end)
    if isinstance(end, Err):
        return end

    if compare_versions(start.value, end.value) != -1:
        return Err(InvertedRange(start=request.start, end=request.end))

    return Ok(VersionRange(start=start.value, end=end.value))


def build_notes(
    request: NotesRequest,
    *,
    http: HttpClient,
    source: ReleaseSource,
    console: ConsoleProtocol | None = None,
) -> Result[NotesDocument, NotesError]:
    """Produce the markdown notes for the requested range.

    No network call is made unless the request validates.
    """
    validated = validate_request(request)
    if isinstance(validated, Err):
        return validated
    bounds = validated.value

    fetched = fetch_releases(http, source, console)
    if isinstance(fetched, Err):
        return Err(NetworkOrParseFailure(detail=str(fetched.error)))

    selected = select_range(fetched.value, bounds.start, bounds.end)
    if isinstance(selected, Err):
        # Report the endpoint as typed ("074.0" rather than "74.0").
        option = selected.error.option
        raw = request.start if option == "from" else request.end
        return Err(EndpointNotFound(option=option, value=raw or selected.error.value))

    releases = selected.value
    if console is not None:
        console.info(f"selected {len(releases)} release(s) from {bounds.start} to {bounds.end}")

    return Ok(NotesDocument(releases=releases, markdown=render_markdown(releases)))
