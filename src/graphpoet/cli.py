from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from graphpoet.core.config import Config
from graphpoet.core.exceptions import GraphPoetError
from graphpoet.poet.generator import GraphPoet


app = typer.Typer(help="GraphPoet: bridge words through a corpus affinity graph.", add_completion=False, no_args_is_help=True)
console = Console()

_state = {"config": None}


def setup_logging(config: Config, debug: bool = False, verbose: bool = False) -> None:
    """Configure the root logger from config, with CLI flags taking priority."""

    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, str(config.get('logging.level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt='%H:%M:%S',
    )
    logging.getLogger('graphpoet').setLevel(log_level)


def _load_poet(corpus: str, representation: Optional[str]) -> GraphPoet:
    config: Config = _state["config"] or Config()
    try:
        return GraphPoet.from_file(corpus, representation=representation or config.representation)
    except GraphPoetError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


@app.callback()
def main(
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at INFO level"),
    debug: bool = typer.Option(False, "--debug", help="Log every bridge decision"),
) -> None:
    """Generate poems from a corpus word-affinity graph."""
    try:
        config = Config(config_path)
    except GraphPoetError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    _state["config"] = config
    setup_logging(config, debug=debug, verbose=verbose)


@app.command()
def poem(
    corpus: str = typer.Argument(..., help="Corpus text file"),
    text: str = typer.Argument(..., help="Input sentence to turn into a poem"),
    representation: Optional[str] = typer.Option(
        None, "--representation", "-r", help="Graph representation: vertices|edges"
    ),
) -> None:
    """Insert bridge words into TEXT using the graph built from CORPUS."""

    poet = _load_poet(corpus, representation)
    typer.echo(poet.poem(text))


@app.command()
def bridge(
    corpus: str = typer.Argument(..., help="Corpus text file"),
    first: str = typer.Argument(..., help="Word before the bridge"),
    second: str = typer.Argument(..., help="Word after the bridge"),
    representation: Optional[str] = typer.Option(
        None, "--representation", "-r", help="Graph representation: vertices|edges"
    ),
) -> None:
    """Show the best bridge word between FIRST and SECOND."""

    poet = _load_poet(corpus, representation)
    word = poet.bridge(first, second)
    if word is None:
        typer.echo(f"No bridge between {first!r} and {second!r}")
    else:
        typer.echo(word)


@app.command()
def graph(
    corpus: str = typer.Argument(..., help="Corpus text file"),
    representation: Optional[str] = typer.Option(
        None, "--representation", "-r", help="Graph representation: vertices|edges"
    ),
) -> None:
    """Print the affinity graph built from CORPUS."""

    poet = _load_poet(corpus, representation)
    edges = poet.edges()
    if not edges:
        console.print("Empty Graph")
        return

    table = Table(title="Affinity Graph")
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Weight", justify="right")
    for edge in edges:
        table.add_row(escape(edge.source), escape(edge.target), str(edge.weight))
    console.print(table)
    console.print(f"{len(poet.vertices())} vertices, {len(edges)} edges")


if __name__ == "__main__":
    app()
