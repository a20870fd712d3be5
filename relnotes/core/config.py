"""Typed configuration loading.

Configuration is optional: every field has a default matching the ICU
project on GitHub, and a TOML file (``--config`` or ``RELNOTES_CONFIG``)
overrides individual values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_int, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "HttpConfig",
    "SourceConfig",
    "load_config",
    "load_config_or_default",
    "DEFAULT_API_URL",
    "DEFAULT_API_VERSION",
    "DEFAULT_PER_PAGE",
    "DEFAULT_PREFIX",
    "DEFAULT_REPO",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_REPO = "unicode-org/icu"
DEFAULT_PREFIX = "ICU"
DEFAULT_PER_PAGE = 100
DEFAULT_PAGINATION_LIMIT = 10

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_API_VERSION = "2022-11-28"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SourceConfig:
    """Where releases come from and which of them count."""

    api_url: str = DEFAULT_API_URL
    repo: str = DEFAULT_REPO  # owner/name
    prefix: str = DEFAULT_PREFIX
    per_page: int = DEFAULT_PER_PAGE
    # Page cap used by --all-pages; a plain run reads a single page.
    pagination_limit: int = DEFAULT_PAGINATION_LIMIT


@dataclass(frozen=True, slots=True)
class HttpConfig:
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    api_version: str = DEFAULT_API_VERSION


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    source: SourceConfig = field(default_factory=SourceConfig)
    http: HttpConfig = field(default_factory=HttpConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a numeric setting is out of range.
        """
        source: StrDict = get_table(data, "source") or {}
        http: StrDict = get_table(data, "http") or {}

        per_page = get_int(source, "per_page")
        if per_page is None:
            per_page = DEFAULT_PER_PAGE
        if not 1 <= per_page <= 100:
            raise ValueError(f"source.per_page must be between 1 and 100, got {per_page}")

        pagination_limit = get_int(source, "pagination_limit")
        if pagination_limit is None:
            pagination_limit = DEFAULT_PAGINATION_LIMIT
        if pagination_limit < 1:
            raise ValueError(f"source.pagination_limit must be positive, got {pagination_limit}")

        timeout = get_float(http, "timeout")
        if timeout is None:
            timeout = DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            raise ValueError(f"http.timeout must be positive, got {timeout}")

        return cls(
            source=SourceConfig(
                api_url=(get_str(source, "api_url") or DEFAULT_API_URL).rstrip("/"),
                repo=get_str(source, "repo") or DEFAULT_REPO,
                prefix=get_str(source, "prefix") or DEFAULT_PREFIX,
                per_page=per_page,
                pagination_limit=pagination_limit,
            ),
            http=HttpConfig(
                timeout=timeout,
                api_version=get_str(http, "api_version") or DEFAULT_API_VERSION,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path | None) -> Result[Config, ConfigError]:
    """Load config when a path is given, otherwise return the defaults.

    An explicitly requested file that cannot be read is still an error.
    """
    if path is None:
        return Ok(Config())
    return load_config(path)
