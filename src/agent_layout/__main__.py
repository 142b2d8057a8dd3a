"""CLI entry point for agent-layout."""

import logging
import sys

import click

from agent_layout.errors import GraphShapeError
from agent_layout.layout.engine import layout_with_mode
from agent_layout.parsers import parse
from agent_layout.renderers.base import Renderer
from agent_layout.renderers.document import JsonRenderer


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--group", "-g", "use_grouping", is_flag=True, help="Lay out by group runs when nodes carry groups")
@click.option("--strip-auxiliary", "strip_auxiliary", is_flag=True, help="Drop provider sub-nodes before layout")
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation (0 for compact)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout warnings and decisions to stderr")
def main(
    input: str | None, use_grouping: bool, strip_auxiliary: bool, indent: int, output: str | None, verbose: bool
) -> None:
    """Agent graph configuration to positioned JSON output."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        graph = parse(text, strip_auxiliary=strip_auxiliary)
    except GraphShapeError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    laid_out, mode = layout_with_mode(graph, use_grouping=use_grouping)
    if verbose:
        click.echo(f"layout: {mode.value}, {len(laid_out.nodes)} node(s)", err=True)

    renderer: Renderer = JsonRenderer(indent=indent or None)
    rendered = renderer.render(laid_out)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
