from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal


# Matched with fullmatch: "$" alone would accept a trailing newline.
_VERSION_RE = re.compile(r"(\d+)\.(\d+)", re.ASCII)


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """Two-component release version, ordered numerically (``10.0 > 9.0``)."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def parse_version(candidate: str) -> Version | None:
    m = _VERSION_RE.fullmatch(candidate)
    if m is None:
        return None
    return Version(int(m.group(1)), int(m.group(2)))


def compare_versions(a: Version, b: Version) -> Literal[-1, 0, 1]:
    if a.major != b.major:
        return -1 if a.major < b.major else 1
    if a.minor != b.minor:
        return -1 if a.minor < b.minor else 1
    return 0
