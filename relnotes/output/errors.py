"""Error presentation.

The one place where a ``NotesError`` becomes user-facing text and an exit
code.
"""

from __future__ import annotations

from relnotes.core.errors import ErrorCode
from relnotes.notes.errors import (
    ConfigInvalid,
    EndpointNotFound,
    InvalidVersionFormat,
    InvertedRange,
    MissingArgument,
    NetworkOrParseFailure,
    NotesError,
    OutputWriteFailed,
    UsageInvalid,
)

__all__ = ["notes_error_message", "notes_error_exit_code"]


def notes_error_message(error: NotesError) -> str:
    """Single-line, human-readable description of a fatal condition."""
    match error:
        case MissingArgument(option=option):
            return f"`--{option}=version` option is required"
        case InvalidVersionFormat(option=option, value=value):
            return f"`--{option}={value}` is invalid version"
        case InvertedRange(start=start, end=end):
            return f"`--from={start}` must be less than `--to={end}`"
        case EndpointNotFound(option=option, value=value):
            return f"`--{option}={value}` not found"
        case NetworkOrParseFailure(detail=detail):
            return f"failed to fetch releases: {detail}"
        case ConfigInvalid(message=message):
            return f"invalid config: {message}"
        case OutputWriteFailed(path=path, reason=reason):
            return f"failed to write {path}: {reason}"
        case UsageInvalid(message=message):
            return message


def notes_error_exit_code(_error: NotesError) -> int:
    """Exit code for a fatal condition.

    Every kind maps to ``USER_ERROR``; callers only need to distinguish
    success from failure.
    """
    return int(ErrorCode.USER_ERROR)
