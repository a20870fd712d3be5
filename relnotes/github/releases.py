"""GitHub Releases listing.

Fetches ``GET /repos/{repo}/releases`` and keeps only the entries that are
tracked releases of the project (see ``release_from_entry``). One page of
``per_page`` entries is read unless the source allows more pages.
"""

from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import TYPE_CHECKING

from relnotes.core.config import (
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    DEFAULT_PER_PAGE,
    DEFAULT_PREFIX,
    DEFAULT_REPO,
    Config,
)
from relnotes.core.result import Err, Ok, Result
from relnotes.core.structured import as_obj_list, as_str_dict
from relnotes.github.http import HttpError
from relnotes.notes.model import Release, release_from_entry
from relnotes.output.console import Style

if TYPE_CHECKING:
    from relnotes.github.http import HttpClient
    from relnotes.output.console import ConsoleProtocol

__all__ = ["ReleaseSource", "fetch_releases", "releases_url", "GITHUB_JSON_MEDIA_TYPE"]

GITHUB_JSON_MEDIA_TYPE = "application/vnd.github+json"


@dataclass(frozen=True, slots=True)
class ReleaseSource:
    """Which repository to list and how to recognise its releases."""

    repo: str = DEFAULT_REPO  # owner/name
    prefix: str = DEFAULT_PREFIX
    api_url: str = DEFAULT_API_URL
    api_version: str = DEFAULT_API_VERSION
    per_page: int = DEFAULT_PER_PAGE
    max_pages: int = 1

    @classmethod
    def from_config(cls, config: Config, *, all_pages: bool = False) -> ReleaseSource:
        return cls(
            repo=config.source.repo,
            prefix=config.source.prefix,
            api_url=config.source.api_url,
            api_version=config.http.api_version,
            per_page=config.source.per_page,
            max_pages=config.source.pagination_limit if all_pages else 1,
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": GITHUB_JSON_MEDIA_TYPE,
            "X-GitHub-Api-Version": self.api_version,
        }


def releases_url(source: ReleaseSource, page: int = 1) -> str:
    """Build the listing URL; the first page carries no ``page`` parameter."""
    params: list[tuple[str, str]] = [("per_page", str(source.per_page))]
    if page > 1:
        params.append(("page", str(page)))
    query = urllib.parse.urlencode(params)
    return f"{source.api_url}/repos/{source.repo}/releases?{query}"


def _fetch_page(
    http: HttpClient,
    source: ReleaseSource,
    page: int,
) -> Result[list[object], HttpError]:
    url = releases_url(source, page)
    result = http.get_json(url, headers=source.headers)
    if isinstance(result, Err):
        return result

    entries = as_obj_list(result.value)
    if entries is None:
        return Err(HttpError(url=url, status=0, message="Expected JSON array of releases"))
    return Ok(entries)


def fetch_releases(
    http: HttpClient,
    source: ReleaseSource,
    console: ConsoleProtocol | None = None,
) -> Result[tuple[Release, ...], HttpError]:
    """Fetch the tracked releases of ``source.repo``.

    Entries that are prereleases, lack the name prefix, or carry an
    unparseable version are skipped silently (reported on ``console`` when
    one is given). Network and JSON failures are returned as HttpError and
    are not retried.

    Args:
        http: HTTP client to use
        source: Repository, name prefix and paging settings
        console: Optional diagnostics sink

    Returns:
        Ok with releases in API order, or Err with HttpError
    """
    releases: list[Release] = []

    for page in range(1, max(1, source.max_pages) + 1):
        if console is not None:
            console.info(f"GET {releases_url(source, page)}")

        fetched = _fetch_page(http, source, page)
        if isinstance(fetched, Err):
            return fetched

        entries = fetched.value
        for raw in entries:
            entry = as_str_dict(raw)
            release = release_from_entry(entry, prefix=source.prefix) if entry is not None else None
            if release is None:
                if console is not None:
                    console.print(f"skipped: {_describe(entry)}", Style.DIM)
                continue
            releases.append(release)

        if len(entries) < source.per_page:
            break

    if console is not None:
        console.info(f"{len(releases)} release(s) matched prefix '{source.prefix}'")
    return Ok(tuple(releases))


def _describe(entry: dict[str, object] | None) -> str:
    if entry is None:
        return "<malformed entry>"
    name = entry.get("name")
    label = name if isinstance(name, str) else "<unnamed>"
    if entry.get("prerelease") is True:
        return f"{label} (prerelease)"
    return label
