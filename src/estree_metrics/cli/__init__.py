"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="estree-metrics",
    help="estree-metrics - scope-aware ESTree traversal with per-node complexity facts",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .trace import trace as _trace  # noqa: F401, E402
from .trace import dependencies as _dependencies  # noqa: F401, E402
from .syntax import syntax as _syntax  # noqa: F401, E402


def main() -> None:
    app()
