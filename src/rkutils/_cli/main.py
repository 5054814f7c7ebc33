import logging
from pathlib import Path
from typing import Annotated

import tomli_w
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from rkutils._graph import CycleReferenceError, topological_sort
from rkutils._routes import RouteTable

from .config import ConfigError, get_config
from .inputs import InputFileError, load_graph_file, load_routes_file

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """rkutils CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _resolve_input(path: Path | None, key: str) -> Path:
    """Return `path`, falling back to the [tool.rkutils] entry named `key`."""
    if path is not None:
        return path
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    configured = getattr(config, key)
    if configured is None:
        err_console.print(f"[red]✗ No {key} file given and no \\[tool.rkutils].{key} configured[/red]")
        raise typer.Exit(code=1)
    logger.debug(f"Using {key} file from config: {configured}")
    return configured


@app.command()
def sort(
    graph: Annotated[
        Path | None,
        typer.Argument(help="TOML file with a [dependencies] table (defaults to [tool.rkutils].graph)"),
    ] = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write the order to this TOML file"),
    ] = None,
) -> None:
    """Print the nodes of a dependency graph in topological order."""
    graph_path = _resolve_input(graph, "graph")
    err_console.print(f"[cyan]Loading graph from:[/cyan] {graph_path}")

    try:
        graph_file = load_graph_file(graph_path)
    except InputFileError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    try:
        order = topological_sort(graph_file.dependencies)
    except CycleReferenceError as e:
        err_console.print("[red]✗ Cyclic reference detected for:[/red]")
        for node in sorted(e.unresolved):
            err_console.print(f"  [red]•[/red] {escape(node)}")
        raise typer.Exit(code=1) from e

    for node in order:
        out_console.print(escape(node), highlight=False)

    if output is not None:
        with output.open("wb") as f:
            tomli_w.dump({"order": order}, f)
        err_console.print(f"[cyan]Exported order to:[/cyan] {output}")


@app.command()
def match(
    urls: Annotated[
        list[str],
        typer.Argument(help="URLs to resolve"),
    ],
    *,
    routes: Annotated[
        Path | None,
        typer.Option("-r", "--routes", help="TOML file with a [routes] table (defaults to [tool.rkutils].routes)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit non-zero if any URL has no matching route"),
    ] = False,
) -> None:
    """Resolve URLs to the handler of their most specific route."""
    routes_path = _resolve_input(routes, "routes")
    err_console.print(f"[cyan]Loading routes from:[/cyan] {routes_path}")

    try:
        routes_file = load_routes_file(routes_path)
    except InputFileError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    table_routes = RouteTable.from_mapping(routes_file.routes)

    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("URL", style="dim")
    table.add_column("Handler")

    unmatched = 0
    for url in urls:
        handler = table_routes.match(url)
        if handler is None:
            unmatched += 1
            table.add_row(escape(url), "[yellow]-[/yellow]")
        else:
            table.add_row(escape(url), escape(handler))

    out_console.print(table)

    if strict and unmatched:
        err_console.print(f"[red]✗ {unmatched} URL(s) did not match any route[/red]")
        raise typer.Exit(code=1)

