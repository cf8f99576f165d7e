"""Click CLI entry point for dotcraft."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dotcraft import __version__
from dotcraft.config import (
    DOTCRAFT_DIR,
    ConfigError,
    ProjectConfig,
    is_initialized,
    load_config,
    load_config_or_default,
    save_config,
)
from dotcraft.loader import LoaderError, load_graph
from dotcraft.models import Graph

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

LOGGER = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="dotcraft")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to the project config)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """dotcraft: typed Graphviz DOT graphs from YAML or JSON descriptions."""
    ctx.ensure_object(dict)
    try:
        config = load_config_or_default(Path.cwd())
    except ConfigError as e:
        click.echo(f"Error: {e}")
        ctx.exit(1)
    level = (log_level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj["config"] = config
    LOGGER.debug("Using config %s", config)


@cli.command()
@click.option("--no-validate", "no_validate", is_flag=True, default=False,
              help="Skip validation by default")
@click.option("--undirected", is_flag=True, default=False,
              help="Descriptions without 'directed' build undirected graphs")
@click.pass_context
def init(ctx: click.Context, no_validate: bool, undirected: bool) -> None:
    """Write a .dotcraft/config.json for this directory."""
    project_root = Path.cwd()
    already = is_initialized(project_root)
    if already:
        click.echo("Warning: Project is already initialized. Updating configuration.")
        config = load_config(project_root)
    else:
        config = ProjectConfig()

    config.validate = not no_validate
    config.default_directed = not undirected
    path = save_config(config, project_root)
    click.echo(f"Config:  {path}")
    if not already:
        click.echo(f"Initialized dotcraft project in {project_root / DOTCRAFT_DIR}/")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write DOT to this file instead of stdout")
@click.option("--no-validate", "no_validate", is_flag=True, default=False,
              help="Render without validating, even if the project config asks for it")
@click.pass_context
def render(ctx: click.Context, file: Path, output: Path | None, no_validate: bool) -> None:
    """Render a graph description as Graphviz DOT."""
    from dotcraft.exporters.dot import export_dot, render_dot
    from dotcraft.validation import validate_graph

    config: ProjectConfig = ctx.obj["config"]
    graph = _load(ctx, file, config)

    if config.validate and not no_validate:
        errors = validate_graph(graph)
        if errors:
            click.echo(f"Validation failed with {len(errors)} error(s):")
            for error in errors:
                click.echo(f"  {error}")
            ctx.exit(1)
            return

    if output is not None:
        with output.open("w") as fh:
            render_dot(graph, fh)
        click.echo(f"Wrote: {output}")
    else:
        click.echo(export_dot(graph), nl=False)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--require-declared-nodes", is_flag=True, default=False,
              help="Also report edges to nodes that have no node statement")
@click.pass_context
def validate(ctx: click.Context, file: Path, require_declared_nodes: bool) -> None:
    """Validate a graph description."""
    from dotcraft.validation import validate_graph

    graph = _load(ctx, file, ctx.obj["config"])
    errors = validate_graph(graph, require_declared_nodes=require_declared_nodes)
    if errors:
        click.echo(f"Found {len(errors)} validation error(s):")
        for error in errors:
            click.echo(f"  {error}")
        ctx.exit(1)
        return

    click.echo(f"OK: {_describe(graph)}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", type=click.Choice(["json", "dot"]), default="json")
@click.pass_context
def export(ctx: click.Context, file: Path, fmt: str) -> None:
    """Export the loaded graph model as JSON or DOT."""
    from dotcraft.exporters.dot import export_dot
    from dotcraft.exporters.json_export import export_json

    graph = _load(ctx, file, ctx.obj["config"])
    if fmt == "dot":
        click.echo(export_dot(graph), nl=False)
    else:
        click.echo(export_json(graph))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def stats(ctx: click.Context, file: Path) -> None:
    """Summarize the structure of a graph description."""
    import networkx as nx

    from dotcraft.graph import to_networkx

    graph = _load(ctx, file, ctx.obj["config"])
    nxg = to_networkx(graph)
    click.echo(_describe(graph))
    click.echo(f"Nodes (including edge endpoints): {nxg.number_of_nodes()}")
    click.echo(f"Edges: {nxg.number_of_edges()}")
    if graph.directed:
        cycles = list(nx.simple_cycles(nxg))
        click.echo(f"Cycles detected: {len(cycles)}")
        click.echo(f"Weakly connected components: {nx.number_weakly_connected_components(nxg)}")
    else:
        click.echo(f"Connected components: {nx.number_connected_components(nxg)}")


def _load(ctx: click.Context, file: Path, config: ProjectConfig) -> Graph:
    try:
        return load_graph(file, default_directed=config.default_directed)
    except LoaderError as e:
        click.echo(f"Error: {e}")
        ctx.exit(1)


def _describe(graph: Graph) -> str:
    name = graph.id if graph.id is not None else "<anonymous>"
    kind = f"strict {graph.graph_keyword}" if graph.strict else graph.graph_keyword
    return (
        f"{kind} {name}: {len(graph.nodes)} node(s), {len(graph.edges)} edge(s), "
        f"{len(graph.subgraphs)} subgraph(s)"
    )
