from __future__ import annotations

from relnotes.core.result import Err, Ok
from relnotes.notes.errors import EndpointNotFound
from relnotes.notes.model import Release
from relnotes.notes.selection import select_range, sort_releases
from relnotes.notes.version import Version


def _release(major: int, minor: int, body: str = "") -> Release:
    return Release(name=f"ICU {major}.{minor}", body=body, version=Version(major, minor))


def test_sort_releases_numeric() -> None:
    releases = [_release(9, 0), _release(10, 0), _release(9, 10), _release(9, 2)]
    assert [str(r.version) for r in sort_releases(releases)] == ["9.0", "9.2", "9.10", "10.0"]


def test_sort_releases_is_stable_for_duplicates() -> None:
    first = _release(74, 1, "first")
    second = _release(74, 1, "second")
    ordered = sort_releases([second, _release(73, 0), first])
    assert [r.body for r in ordered[1:]] == ["second", "first"]


def test_select_inclusive_range() -> None:
    releases = [_release(75, 1), _release(72, 1), _release(74, 0), _release(73, 0)]

    result = select_range(releases, Version(73, 0), Version(74, 0))

    assert isinstance(result, Ok)
    assert [r.name for r in result.value] == ["ICU 73.0", "ICU 74.0"]


def test_select_whole_list() -> None:
    releases = [_release(72, 1), _release(73, 0), _release(74, 0), _release(75, 1)]

    result = select_range(releases, Version(72, 1), Version(75, 1))

    assert isinstance(result, Ok)
    assert len(result.value) == 4


def test_missing_from_endpoint() -> None:
    releases = [_release(72, 1), _release(74, 0)]

    result = select_range(releases, Version(73, 0), Version(74, 0))

    assert result == Err(EndpointNotFound(option="from", value="73.0"))


def test_missing_to_endpoint() -> None:
    releases = [_release(72, 1), _release(74, 0)]

    result = select_range(releases, Version(72, 1), Version(74, 1))

    assert result == Err(EndpointNotFound(option="to", value="74.1"))


def test_from_checked_before_to() -> None:
    result = select_range([], Version(1, 0), Version(2, 0))
    assert isinstance(result, Err)
    assert result.error.option == "from"


def test_no_closest_match() -> None:
    releases = [_release(73, 1), _release(74, 2)]
    result = select_range(releases, Version(73, 0), Version(74, 2))
    assert isinstance(result, Err)
