"""
Logging configuration for git-distance.

Logs go to stderr through rich so that stdout stays clean for totals and JSON.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """WARNING by default, DEBUG when verbose; quiet wins and keeps only ERROR."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging with rich handler for colored output.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance for git_distance
    """
    level = log_level(verbose=verbose, quiet=quiet)

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # force=True so repeated CLI invocations in one process pick up the new level
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger("git_distance")
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'git_distance.git.provider')
              If None, returns the root git_distance logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("git_distance")

    if not name.startswith("git_distance"):
        name = f"git_distance.{name}"

    return logging.getLogger(name)
