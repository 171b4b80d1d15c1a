"""CLI entry point: registers the compare command."""

import typer

app = typer.Typer(
    name="git-distance",
    help="Measure how far two git refs are apart, file by file.",
    add_completion=False,
    rich_markup_mode="rich",
)


from .compare import compare as _compare  # noqa: F401, E402


def main() -> None:
    app()
