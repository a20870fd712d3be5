from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from relnotes.core.result import Err, Ok, Result
from relnotes.notes.errors import OutputWriteFailed
from relnotes.notes.model import Release


def render_markdown(releases: Iterable[Release]) -> str:
    """Concatenate release notes into one markdown document.

    Each release becomes a top-level heading with its name followed by its
    body, verbatim. An empty input renders as the empty string.
    """
    parts: list[str] = []
    for release in releases:
        parts.append(f"# {release.name}\n\n")
        parts.append(f"{release.body}\n\n")
    return "".join(parts)


def write_markdown(path: Path, content: str) -> Result[Path, OutputWriteFailed]:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        return Err(OutputWriteFailed(path=path, reason=str(e)))
    return Ok(path)
