"""``estree-metrics trace`` and ``dependencies``: walk an ESTree JSON document."""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from ..consumers import CREATE_SCOPE, POP_SCOPE, collect_dependencies, trace as trace_tree
from ..exceptions import EstreeMetricsError
from ..logging_config import setup_logging
from ..tree import load_tree, node_type
from . import app
from ._common import console, resolve_settings

logger = logging.getLogger(__name__)

_TREE_ARGUMENT = typer.Argument(
    ...,
    help="ESTree JSON document (e.g. parser output passed through JSON.stringify)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)


def _join(values) -> str:
    return " ".join(str(v) for v in values)


@app.command()
def trace(
    tree_file: Path = _TREE_ARGUMENT,
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Configuration file (TOML)"),
    flag: Optional[List[str]] = typer.Option(None, "--flag", help="Settings flag as name=value (repeatable)"),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """Print every scope and node event of a walk, with per-node facts."""
    setup_logging(verbose=verbose)

    try:
        settings = resolve_settings(config=config, flags=flag)
        tree = load_tree(tree_file)
        events = trace_tree(tree, settings)
    except EstreeMetricsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    logger.debug(f"{len(events)} events for {tree_file}")

    if fmt == "json":
        rows = []
        for event in events:
            row = {"event": event.event, "depth": event.depth, "type": node_type(event.node)}
            if event.facts is not None:
                row.update(
                    line=event.facts.line,
                    lloc=event.facts.lloc,
                    cyclomatic=event.facts.cyclomatic,
                    operators=[str(o) for o in event.facts.operators],
                    operands=[str(o) for o in event.facts.operands],
                )
            rows.append(row)
        typer.echo(json.dumps(rows, indent=2))
        return

    table = Table(title=str(tree_file), show_lines=False)
    table.add_column("Event")
    table.add_column("Node")
    table.add_column("Line", justify="right")
    table.add_column("LLOC", justify="right")
    table.add_column("CC", justify="right")
    table.add_column("Operators")
    table.add_column("Operands")

    for event in events:
        indent = "  " * event.depth
        node_label = f"{indent}{node_type(event.node)}"
        if event.event in (CREATE_SCOPE, POP_SCOPE):
            marker = "[cyan]+scope[/cyan]" if event.event == CREATE_SCOPE else "[cyan]-scope[/cyan]"
            table.add_row(marker, node_label, "", "", "", "", "")
            continue
        facts = event.facts
        table.add_row(
            "node",
            node_label,
            str(facts.line or ""),
            str(facts.lloc),
            str(facts.cyclomatic),
            _join(facts.operators),
            _join(facts.operands),
        )

    console.print(table)


@app.command()
def dependencies(
    tree_file: Path = _TREE_ARGUMENT,
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """List module and CommonJS dependencies referenced by a tree."""
    setup_logging(verbose=verbose)

    try:
        settings = resolve_settings()
        records = collect_dependencies(load_tree(tree_file), settings)
    except EstreeMetricsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not records:
        console.print("[dim]No dependencies found[/dim]")
        return

    for record in records:
        console.print(f"{record['line'] or '?':>5}  {record['type']:<8}  {record['path']}")
