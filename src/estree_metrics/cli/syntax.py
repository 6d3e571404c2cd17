"""``estree-metrics syntax``: show how a node type is specified."""

import typer
from rich.table import Table

from ..syntax import default_registry
from . import app
from ._common import console


def _describe(value) -> str:
    if callable(value):
        return "computed"
    return str(value)


def _describe_records(records) -> str:
    parts = []
    for record in records:
        label = "computed" if record.resolve is not None else str(record.identifier)
        if record.filter is not None:
            label += " (conditional)"
        parts.append(label)
    return ", ".join(parts) or "-"


@app.command()
def syntax(
    node_type: str = typer.Argument(..., help="ESTree node type, e.g. IfStatement"),
) -> None:
    """Print the registry entry for a node type."""
    registry = default_registry()
    if node_type not in registry:
        console.print(f"[yellow]{node_type} is not in the registry; it is skipped when walking[/yellow]")
        raise typer.Exit(1)

    spec = registry.lookup(node_type)
    table = Table(title=node_type, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("children", ", ".join(spec.children) or "-")
    table.add_row("lloc", _describe(spec.lloc))
    table.add_row("cyclomatic", _describe(spec.cyclomatic))
    table.add_row("new scope", _describe(spec.new_scope or False))
    table.add_row("operators", _describe_records(spec.operators))
    table.add_row("operands", _describe_records(spec.operands))
    table.add_row("dependencies", "yes" if spec.dependencies is not None else "-")
    console.print(table)
