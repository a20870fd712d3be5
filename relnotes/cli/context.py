from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relnotes.cli.commands._helpers import unwrap_or_exit
from relnotes.core.config import Config, load_config_or_default
from relnotes.github.http import HttpClient, RealHttpClient
from relnotes.notes.errors import ConfigInvalid
from relnotes.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    http: HttpClient
    # None unless --verbose; diagnostics are opt-in.
    console: ConsoleProtocol | None


def build_context(*, config_path: Path | None, verbose: bool) -> CLIContext:
    loaded = load_config_or_default(config_path).map_err(lambda e: ConfigInvalid(message=e.message))
    config = unwrap_or_exit(loaded)

    return CLIContext(
        config=config,
        http=RealHttpClient(timeout=config.http.timeout),
        console=RichConsole() if verbose else None,
    )
