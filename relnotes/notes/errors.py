from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


EndpointOption = Literal["from", "to"]


@dataclass(frozen=True, slots=True)
class MissingArgument:
    option: EndpointOption


@dataclass(frozen=True, slots=True)
class InvalidVersionFormat:
    option: EndpointOption
    value: str


@dataclass(frozen=True, slots=True)
class InvertedRange:
    start: str
    end: str


@dataclass(frozen=True, slots=True)
class EndpointNotFound:
    option: EndpointOption
    value: str


@dataclass(frozen=True, slots=True)
class NetworkOrParseFailure:
    detail: str


@dataclass(frozen=True, slots=True)
class ConfigInvalid:
    message: str


@dataclass(frozen=True, slots=True)
class OutputWriteFailed:
    path: Path
    reason: str


# Command-line syntax rejected by the argument parser.
@dataclass(frozen=True, slots=True)
class UsageInvalid:
    message: str


NotesError = (
    MissingArgument
    | InvalidVersionFormat
    | InvertedRange
    | EndpointNotFound
    | NetworkOrParseFailure
    | ConfigInvalid
    | OutputWriteFailed
    | UsageInvalid
)
