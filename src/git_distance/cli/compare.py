"""Compare command: distance between two refs, per changed file."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..api import resolve_refs
from ..exceptions import GitDistanceError
from ..git import GitContentProvider
from ..logging_config import setup_logging
from ..metrics import select_metric
from ..report import MetricResult, build_report
from . import app
from ._common import console, err_console, requested_metrics, resolve_config
from ._output import ReportFormatter, format_value, render_metric_table


@app.command()
def compare(
    ctx: typer.Context,
    branch1: Optional[str] = typer.Argument(
        None, help="Base ref, or the ref to compare the current branch against"
    ),
    branch2: Optional[str] = typer.Argument(None, help="Ref to compare against BRANCH1"),
    list_files: bool = typer.Option(
        False, "--list", "-L", help="Show per-file distances (default: only total)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Show debug messages"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    json_output: bool = typer.Option(
        False, "--json", help="Output in machine-readable JSON format"
    ),
    levenshtein: bool = typer.Option(
        False, "--levenshtein", help="Levenshtein edit distance (default)"
    ),
    hamming: bool = typer.Option(
        False, "--hamming", help="Hamming distance, shorter side padded with spaces"
    ),
    additions: bool = typer.Option(
        False, "--additions", help="Character count difference (new - old)"
    ),
    damerau: bool = typer.Option(
        False, "--damerau", help="Damerau-Levenshtein distance"
    ),
    jaro_winkler: bool = typer.Option(
        False, "--jaro-winkler", help="Jaro-Winkler distance in [0, 1]"
    ),
    lcs: bool = typer.Option(
        False, "--lcs", help="Longest-common-subsequence distance"
    ),
    lines: bool = typer.Option(False, "--lines", help="Line count difference (new - old)"),
    words: bool = typer.Option(False, "--words", help="Word count difference (new - old)"),
    metric: Optional[str] = typer.Option(
        None, "--metric", "-m", help="Metric by name (see --list-metrics)"
    ),
    list_metrics: bool = typer.Option(
        False, "--list-metrics", help="Show available metrics and exit"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """
    Compare file distances between two git refs.

    With one ref, compares the current branch to it. Only files changed
    between the refs are measured; a file missing on one side counts as
    empty.

    [bold cyan]Examples:[/bold cyan]

      git-distance main

      git-distance main feature --list

      git-distance main feature --lines

      git-distance main feature --json --jaro-winkler
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]git-distance[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if list_metrics:
        render_metric_table(console)
        raise typer.Exit(0)

    if branch1 is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    flags = {
        "levenshtein": levenshtein,
        "hamming": hamming,
        "additions": additions,
        "damerau-levenshtein": damerau,
        "jaro-winkler": jaro_winkler,
        "lcs": lcs,
        "lines": lines,
        "words": words,
    }

    try:
        settings = resolve_config(
            config=config,
            list_files=list_files,
            json_output=json_output,
            verbose=verbose,
            quiet=quiet,
        )
    except GitDistanceError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger = setup_logging(
        verbose=settings.verbose, quiet=settings.quiet, log_file=settings.log_file
    )

    try:
        requested = requested_metrics(flags, metric)
        selected = select_metric(requested or settings.metric)
        logger.debug("Using metric %s", selected.name)

        provider = GitContentProvider(timeout=settings.git_timeout_seconds)
        old_ref, new_ref = resolve_refs(provider, branch1, branch2)

        files = provider.changed_files(old_ref, new_ref)
        fmt = settings.output_format
        if not files and fmt == "text":
            console.print("No changed files between branches.")
            raise typer.Exit(0)

        def _log_result(result: MetricResult) -> None:
            logger.debug("%s: %s", result.identifier, format_value(result.value))

        report = build_report(
            selected,
            provider.iter_pairs(old_ref, new_ref, files),
            observer=_log_result if settings.verbose else None,
        )

        formatter = ReportFormatter(console=console)
        formatter.render(
            report,
            fmt=fmt,
            list_files=settings.list_files,
            old_ref=old_ref,
            new_ref=new_ref,
        )

    except typer.Exit:
        raise
    except GitDistanceError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error in compare")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
