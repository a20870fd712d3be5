from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from relnotes.core.structured import get_bool, get_raw_str
from relnotes.notes.version import Version, parse_version


@dataclass(frozen=True, slots=True)
class Release:
    """One published, non-prerelease release of the tracked project."""

    name: str  # "<prefix> <version>", e.g. "ICU 74.1"
    body: str  # markdown, used verbatim
    version: Version


def release_from_entry(entry: Mapping[str, object], *, prefix: str) -> Release | None:
    """Build a Release from one entry of the GitHub releases listing.

    Returns None when the entry does not describe a tracked release: a
    prerelease, a name without ``prefix``, or a name whose second word is not
    a two-component version.
    """
    if get_bool(entry, "prerelease"):
        return None

    name = get_raw_str(entry, "name")
    if name is None or not name.startswith(prefix):
        return None

    words = name.split(" ")
    if len(words) < 2:
        return None
    version = parse_version(words[1])
    if version is None:
        return None

    # GitHub sends "body": null for releases created without notes.
    body = get_raw_str(entry, "body") or ""
    return Release(name=name, body=body, version=version)
