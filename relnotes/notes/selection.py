from __future__ import annotations

from collections.abc import Iterable

from relnotes.core.result import Err, Ok, Result
from relnotes.notes.errors import EndpointNotFound
from relnotes.notes.model import Release
from relnotes.notes.version import Version, compare_versions


def sort_releases(releases: Iterable[Release]) -> tuple[Release, ...]:
    """Sort ascending by version; releases sharing a version keep input order."""
    return tuple(sorted(releases, key=lambda r: r.version))


def _index_of(releases: tuple[Release, ...], version: Version) -> int | None:
    for i, release in enumerate(releases):
        if compare_versions(release.version, version) == 0:
            return i
    return None


def select_range(
    releases: Iterable[Release],
    start: Version,
    end: Version,
) -> Result[tuple[Release, ...], EndpointNotFound]:
    """Return the sorted releases from ``start`` through ``end``, both included.

    Both endpoints must name an existing release exactly. Callers guarantee
    ``start < end``.
    """
    ordered = sort_releases(releases)

    start_index = _index_of(ordered, start)
    if start_index is None:
        return Err(EndpointNotFound(option="from", value=str(start)))

    end_index = _index_of(ordered, end)
    if end_index is None:
        return Err(EndpointNotFound(option="to", value=str(end)))

    return Ok(ordered[start_index : end_index + 1])
