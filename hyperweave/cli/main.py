"""Hyperweave CLI: generate random graphs and inspect JSON graph files."""

from __future__ import annotations

import json
import logging
import random
import sys

import click

from hyperweave.engine.edges import edge_kind, edge_kinds
from hyperweave.engine.graph import Graph
from hyperweave.engine.persistence import load_graph, save_graph
from hyperweave.errors import GenerationExhaustedError
from hyperweave.generator.random_graph import GraphGen, int_nodes
from hyperweave.models import CoreConfig, Metrics, NodeDegreeRange

logger = logging.getLogger("hyperweave.cli")


def _degree_range(min_degree: int, max_degree: int) -> NodeDegreeRange:
    try:
        return NodeDegreeRange(min_degree=min_degree, max_degree=max_degree)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
@click.option("--scan-incidences", is_flag=True, help="Do not index incident edges.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, scan_incidences: bool) -> None:
    """Generate, inspect and check hyperweave graphs."""
    # Logging goes to stderr; stdout carries the JSON output
    level = logging.WARNING - 10 * min(verbose, 2)
    logging.basicConfig(stream=sys.stderr, level=level, format="%(levelname)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["config"] = CoreConfig(index_incidences=not scan_incidences)


@cli.command()
@click.option("--order", type=int, required=True, help="Number of nodes.")
@click.option("--min-degree", type=int, default=1, show_default=True, help="Minimum node degree.")
@click.option("--max-degree", type=int, default=4, show_default=True, help="Maximum node degree.")
@click.option(
    "--kind",
    "kinds",
    multiple=True,
    default=("DiEdge",),
    show_default=True,
    type=click.Choice(edge_kinds()),
    help="Permitted edge kind (repeatable).",
)
@click.option("--edges", "edge_budget", type=int, default=None, help="Edge count to aim for.")
@click.option("--disconnected", is_flag=True, help="Do not require a single component.")
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Write to a file.")
@click.pass_context
def generate(
    ctx: click.Context,
    order: int,
    min_degree: int,
    max_degree: int,
    kinds: tuple[str, ...],
    edge_budget: int | None,
    disconnected: bool,
    seed: int | None,
    output: str | None,
) -> None:
    """Generate a random graph over int nodes and print it as JSON."""
    if order < 1:
        raise click.BadParameter("order must be at least 1", param_hint="--order")
    gen = GraphGen(
        Graph,
        order,
        int_nodes(order),
        _degree_range(min_degree, max_degree),
        [edge_kind(name) for name in kinds],
        connected=not disconnected,
        edge_budget=edge_budget,
        config=ctx.obj["config"],
    )
    try:
        graph = gen.draw(random.Random(seed))
    except GenerationExhaustedError as e:
        raise click.ClickException(str(e)) from e
    logger.info("Generated %r", graph)
    if output:
        save_graph(graph, output)
        click.echo(f"Wrote graph with {graph.order} nodes and {graph.graph_size} edges to {output}")
    else:
        click.echo(json.dumps(graph.to_dict(), indent=2))


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def stats(ctx: click.Context, input_file: str) -> None:
    """Show order, size and degree figures of a JSON graph file."""
    s = load_graph(input_file, config=ctx.obj["config"]).stats()
    click.echo(f"Order: {s.order}  Size: {s.size}  Total degree: {s.total_degree}")
    click.echo(f"Degrees: {s.min_degree}..{s.max_degree}  Connected: {s.is_connected}")
    if s.edges_by_kind:
        click.echo("Edges by kind:")
        for kind, count in sorted(s.edges_by_kind.items()):
            click.echo(f"  {kind}: {count}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--min-degree", type=int, required=True, help="Minimum node degree.")
@click.option("--max-degree", type=int, required=True, help="Maximum node degree.")
@click.option("--order", type=int, default=None, help="Expected order (default: file's order).")
@click.option("--disconnected", is_flag=True, help="Do not require a single component.")
@click.pass_context
def check(
    ctx: click.Context,
    input_file: str,
    min_degree: int,
    max_degree: int,
    order: int | None,
    disconnected: bool,
) -> None:
    """Check a JSON graph file against order/degree/connectivity metrics."""
    graph = load_graph(input_file, config=ctx.obj["config"])
    metrics = Metrics(
        order=order if order is not None else max(graph.order, 1),
        node_degrees=_degree_range(min_degree, max_degree),
        connected=not disconnected,
    )
    report = metrics.verify(graph)
    if report.valid:
        click.echo("Graph meets the metrics.")
        return
    click.echo("Metric violations:")
    for err in report.errors:
        click.echo(f"  ERROR: {err}")
    ctx.exit(1)


if __name__ == "__main__":
    cli()
