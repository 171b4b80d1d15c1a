"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import DistanceConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    list_files: bool = False,
    json_output: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> DistanceConfig:
    """Build settings from CLI options.

    Flags that are off do not override config files.
    """
    overrides = {}
    if list_files:
        overrides["list_files"] = True
    if json_output:
        overrides["output_format"] = "json"
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def requested_metrics(flags: dict, metric: Optional[str]) -> List[str]:
    """Collect metric names from boolean flags and --metric, in flag order."""
    names = [name for name, enabled in flags.items() if enabled]
    if metric:
        names.append(metric)
    return names
