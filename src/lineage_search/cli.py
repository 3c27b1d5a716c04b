"""CLI interface for lineage search."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import SearchConfig, load_config
from .errors import MalformedInputError, NameNotFoundError
from .explorer import GenealogyExplorer
from .logging import configure_logging
from .payload import load_graph

app = typer.Typer(
    name="lineage-search",
    help="Ancestry, common-ancestor and relationship-path queries over a genealogy graph",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    data: Path = typer.Option(None, "--data", "-d", help="Graph payload JSON file"),
):
    """Load configuration and remember which payload to query."""
    config = load_config()
    configure_logging(config.log_level)
    ctx.obj = {"config": config, "data": data or config.data_path}


def _explorer(ctx: typer.Context) -> GenealogyExplorer:
    config: SearchConfig = ctx.obj["config"]
    path: Path = ctx.obj["data"]
    try:
        graph = load_graph(path)
    except OSError as e:
        console.print(f"[red]Error: cannot read {path}: {e.strerror or e}[/red]")
        raise typer.Exit(1)
    except MalformedInputError as e:
        console.print(f"[red]Error: not a valid graph payload: {path}[/red]")
        console.print(str(e), markup=False)
        raise typer.Exit(1)
    return GenealogyExplorer.from_graph(graph, config)


def _resolve(explorer: GenealogyExplorer, name: str) -> int:
    try:
        return explorer.resolve(name)
    except NameNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _edge_table(title: str, pairs: list[tuple[str, str]]) -> Table:
    table = Table(title=title)
    table.add_column("Parent", style="cyan")
    table.add_column("Child", style="green")
    for parent, child in pairs:
        table.add_row(parent, child)
    return table


@app.command()
def stats(ctx: typer.Context):
    """Show the size of the loaded graph."""
    explorer = _explorer(ctx)
    graph = explorer.graph

    table = Table(title="Graph")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("People", str(graph.node_count()))
    table.add_row("Parent links", str(graph.edge_count()))
    table.add_row("Distinct names", str(len(graph.names)))
    table.add_row("Id capacity", str(graph.capacity))
    console.print(table)


@app.command()
def ancestry(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Person whose ancestry to show"),
    limit: int = typer.Option(None, "--limit", "-l", help="Ancestor count before falling back to parents only"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Show the ancestry of a person."""
    explorer = _explorer(ctx)
    person_id = _resolve(explorer, name)
    view = explorer.ancestry(person_id, limit=limit)
    pairs = explorer.edges_to_names(view.edges)

    if as_json:
        typer.echo(json.dumps({
            "person": explorer.name_of(person_id),
            "parents_only": view.parents_only,
            "edges": pairs,
        }, indent=2))
        return

    if view.parents_only:
        console.print("[yellow]Ancestry too large; showing parents only.[/yellow]")
    if not pairs:
        console.print(f"No recorded ancestors for {explorer.name_of(person_id)}.")
        return
    console.print(_edge_table(f"Ancestry of {explorer.name_of(person_id)}", pairs))


@app.command()
def common(
    ctx: typer.Context,
    first: str = typer.Argument(..., help="First person"),
    second: str = typer.Argument(..., help="Second person"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Show the nearest common ancestor(s) of two people."""
    explorer = _explorer(ctx)
    a = _resolve(explorer, first)
    b = _resolve(explorer, second)
    view = explorer.common_ancestry(a, b)
    ancestor_names = [explorer.name_of(ancestor) for ancestor in view.ancestors]
    pairs = explorer.edges_to_names(view.edges)

    if as_json:
        typer.echo(json.dumps({
            "people": [explorer.name_of(a), explorer.name_of(b)],
            "common_ancestors": ancestor_names,
            "relationship": view.kinship.relationship if view.kinship else None,
            "edges": pairs,
        }, indent=2))
        return

    if not view.related:
        console.print(f"{explorer.name_of(a)} and {explorer.name_of(b)} share no recorded ancestor.")
        return

    console.print(Panel(
        f"[bold]Nearest common ancestor:[/bold] {', '.join(ancestor_names)}\n"
        f"[bold]Relationship:[/bold] {explorer.name_of(a)} is {view.kinship.relationship} "
        f"of {explorer.name_of(b)}",
        title="Common Ancestry",
    ))
    if pairs:
        console.print(_edge_table("Connecting lineage", pairs))


@app.command()
def path(
    ctx: typer.Context,
    first: str = typer.Argument(..., help="First person"),
    second: str = typer.Argument(..., help="Second person"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of text"),
):
    """Show the shortest relationship path between two people."""
    explorer = _explorer(ctx)
    a = _resolve(explorer, first)
    b = _resolve(explorer, second)
    view = explorer.path(a, b)
    names = [explorer.name_of(person_id) for person_id in view.path] if view.path else None

    if as_json:
        typer.echo(json.dumps({"path": names, "edges": explorer.edges_to_names(view.edges)}, indent=2))
        return

    if names is None:
        console.print(f"{explorer.name_of(a)} and {explorer.name_of(b)} are not connected.")
        return
    console.print(" -> ".join(names), markup=False)
    console.print(f"[dim]{len(names) - 1} link(s)[/dim]")


if __name__ == "__main__":
    app()
