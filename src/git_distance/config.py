"""Configuration loading and management for git-distance.

Configuration sources are merged in priority order:
    1. Defaults (defined in DistanceConfig)
    2. Global config (~/.git-distance.toml)
    3. Project config (./git-distance.toml)
    4. Explicit config file (--config)
    5. Environment variables (GIT_DISTANCE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, metric="hamming")
    >>> config.verbosity
    'verbose'
    >>> config.metric
    'hamming'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "json"]

_VERBOSITIES = ("quiet", "normal", "verbose")
_OUTPUT_FORMATS = ("text", "json")

ENV_PREFIX = "GIT_DISTANCE_"
GLOBAL_CONFIG_NAME = ".git-distance.toml"
PROJECT_CONFIG_NAME = "git-distance.toml"


@dataclass(frozen=True)
class DistanceConfig:
    """Settings for one git-distance run.

    Attributes:
        metric: Metric name used when the command line names none
        list_files: Show per-file rows instead of only the total
        output_format: "text" for the terminal, "json" for machines
        verbosity: Logging verbosity level
        git_timeout_seconds: Timeout applied to every git subprocess
        log_file: Optional file that receives a copy of the log
    """

    metric: str = "levenshtein"
    list_files: bool = False
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"
    git_timeout_seconds: int = 30
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.metric or not self.metric.strip():
            raise ValueError("metric must be a non-empty name")
        if self.output_format not in _OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(_OUTPUT_FORMATS)}")
        if self.verbosity not in _VERBOSITIES:
            raise ValueError(f"verbosity must be one of {', '.join(_VERBOSITIES)}")
        if self.git_timeout_seconds < 1:
            raise ValueError("git_timeout_seconds must be at least 1")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> DistanceConfig:
    """Load configuration from all sources and merge by priority.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask file values.

    Returns:
        Validated DistanceConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global"))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "explicit"))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    unknown = sorted(set(merged) - set(DistanceConfig.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown setting")

    try:
        return DistanceConfig(**merged)
    except ValueError as e:
        key = str(e).split(" ", 1)[0]
        raise InvalidConfigError(key, merged.get(key), str(e)) from e


def _read_config_file(path: Path, label: str) -> dict:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} config '{path}': {e}") from e
    # Settings may live at the top level or under a [git-distance] table
    section = data.get("git-distance", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid {label} config '{path}': expected a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GIT_DISTANCE_* environment variables.

    Supported environment variables:
        GIT_DISTANCE_METRIC: str
        GIT_DISTANCE_LIST_FILES: bool (true/false/1/0)
        GIT_DISTANCE_OUTPUT_FORMAT: text/json
        GIT_DISTANCE_VERBOSITY: quiet/normal/verbose
        GIT_DISTANCE_GIT_TIMEOUT_SECONDS: int
        GIT_DISTANCE_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any GIT_DISTANCE_* vars found.
    """
    type_hints = get_type_hints(DistanceConfig)

    result: dict[str, Any] = {}

    for field_name in DistanceConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
