from __future__ import annotations

from relnotes.core.result import Err, Ok
from relnotes.github.http import HttpError, MockHttpClient
from relnotes.github.releases import ReleaseSource, releases_url
from relnotes.notes.errors import (
    EndpointNotFound,
    InvalidVersionFormat,
    InvertedRange,
    MissingArgument,
    NetworkOrParseFailure,
)
from relnotes.notes.service import NotesRequest, VersionRange, build_notes, validate_request
from relnotes.notes.version import Version
from relnotes.output.console import MockConsole


SOURCE = ReleaseSource()
URL = releases_url(SOURCE)


def _entry(name: str, body: str = "", prerelease: bool = False) -> dict[str, object]:
    return {"name": name, "body": body, "prerelease": prerelease}


def _client(entries: list[dict[str, object]]) -> MockHttpClient:
    client = MockHttpClient()
    client.set_json(URL, entries)
    return client


class TestValidateRequest:
    def test_valid(self) -> None:
        assert validate_request(NotesRequest("73.0", "74.0")) == Ok(
            VersionRange(start=Version(73, 0), end=Version(74, 0))
        )

    def test_missing_from(self) -> None:
        assert validate_request(NotesRequest(None, "74.0")) == Err(MissingArgument("from"))

    def test_missing_to_reported_before_bad_from(self) -> None:
        assert validate_request(NotesRequest("bad", None)) == Err(MissingArgument("to"))

    def test_invalid_from(self) -> None:
        assert validate_request(NotesRequest("74", "75.0")) == Err(
            InvalidVersionFormat(option="from", value="74")
        )

    def test_invalid_to(self) -> None:
        assert validate_request(NotesRequest("74.0", "75.0.1")) == Err(
            InvalidVersionFormat(option="to", value="75.0.1")
        )

    def test_inverted(self) -> None:
        assert validate_request(NotesRequest("75.1", "73.0")) == Err(
            InvertedRange(start="75.1", end="73.0")
        )

    def test_equal_endpoints_rejected(self) -> None:
        assert validate_request(NotesRequest("74.0", "74.0")) == Err(
            InvertedRange(start="74.0", end="74.0")
        )

    def test_numeric_order(self) -> None:
        assert isinstance(validate_request(NotesRequest("9.0", "10.0")), Ok)


class TestBuildNotes:
    def test_renders_selected_range(self) -> None:
        client = _client(
            [
                _entry("ICU 75.1", "five"),
                _entry("ICU 74.0", "four"),
                _entry("ICU 73.0", "three"),
                _entry("ICU 72.1", "two"),
            ]
        )

        result = build_notes(NotesRequest("73.0", "74.0"), http=client, source=SOURCE)

        assert isinstance(result, Ok)
        assert [r.name for r in result.value.releases] == ["ICU 73.0", "ICU 74.0"]
        assert result.value.markdown == "# ICU 73.0\n\nthree\n\n# ICU 74.0\n\nfour\n\n"

    def test_inverted_range_makes_no_request(self) -> None:
        client = _client([_entry("ICU 73.0"), _entry("ICU 75.1")])

        result = build_notes(NotesRequest("75.1", "73.0"), http=client, source=SOURCE)

        assert result == Err(InvertedRange(start="75.1", end="73.0"))
        assert client.calls == []

    def test_prerelease_never_rendered(self) -> None:
        client = _client(
            [
                _entry("ICU 73.0", "a"),
                _entry("ICU 73.5", "preview notes", prerelease=True),
                _entry("ICU 74.0", "b"),
            ]
        )

        result = build_notes(NotesRequest("73.0", "74.0"), http=client, source=SOURCE)

        assert isinstance(result, Ok)
        assert "preview notes" not in result.value.markdown
        assert "73.5" not in result.value.markdown

    def test_prerelease_endpoint_is_not_found(self) -> None:
        client = _client([_entry("ICU 73.0"), _entry("ICU 74.0", prerelease=True)])

        result = build_notes(NotesRequest("73.0", "74.0"), http=client, source=SOURCE)

        assert result == Err(EndpointNotFound(option="to", value="74.0"))

    def test_wrong_prefix_excluded(self) -> None:
        client = _client(
            [
                _entry("ICU 1.0", "icu one"),
                _entry("Unrelated 1.5", "other"),
                _entry("ICU 2.0", "icu two"),
            ]
        )

        result = build_notes(NotesRequest("1.0", "2.0"), http=client, source=SOURCE)

        assert isinstance(result, Ok)
        assert "other" not in result.value.markdown
        assert len(result.value.releases) == 2

    def test_from_not_found_names_from(self) -> None:
        client = _client([_entry("ICU 72.1"), _entry("ICU 74.0")])

        result = build_notes(NotesRequest("73.0", "74.0"), http=client, source=SOURCE)

        assert result == Err(EndpointNotFound(option="from", value="73.0"))

    def test_endpoint_reported_as_typed(self) -> None:
        client = _client([_entry("ICU 74.0")])

        result = build_notes(NotesRequest("072.1", "74.0"), http=client, source=SOURCE)

        assert result == Err(EndpointNotFound(option="from", value="072.1"))

    def test_network_failure(self) -> None:
        client = MockHttpClient()
        client.set_json(URL, HttpError(url=URL, status=0, message="Connection refused"))

        result = build_notes(NotesRequest("73.0", "74.0"), http=client, source=SOURCE)

        assert isinstance(result, Err)
        assert isinstance(result.error, NetworkOrParseFailure)
        assert "Connection refused" in result.error.detail

    def test_diagnostics_go_to_console(self) -> None:
        client = _client([_entry("ICU 73.0"), _entry("ICU 74.0"), _entry("Other 1.0")])
        console = MockConsole()

        result = build_notes(
            NotesRequest("73.0", "74.0"), http=client, source=SOURCE, console=console
        )

        assert isinstance(result, Ok)
        assert console.find("skipped: Other 1.0")
        assert console.find("selected 2 release(s) from 73.0 to 74.0")
