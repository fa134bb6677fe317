# src/monkey/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..ast_json import AstDecodeError, load
from ..environment import Environment
from ..evaluator import BUILTINS, EVAL_SUMMARY, evaluate, reset_summary
from ..evaluator.utils import is_error

console = Console()
logger = logging.getLogger("monkey.cli")


def _setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_program(file):
    try:
        return load(file)
    except AstDecodeError as e:
        console.print(f"[bold red]AST Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="Monkey")
def cli():
    """Monkey runtime core - evaluate pre-built ASTs"""
    pass


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--debug', is_flag=True, help="Log every evaluation step.")
@click.option('--stats', is_flag=True, help="Print evaluation counters afterwards.")
def run(file, debug, stats):
    """Evaluate a JSON-encoded AST"""
    _setup_logging(debug)
    program = _load_program(file)
    logger.debug("Loaded %r from %s", program, file)

    reset_summary()
    result = evaluate(program, Environment(), debug_mode=debug)

    if stats:
        table = Table(title="Evaluation Summary")
        table.add_column("Counter", style="cyan")
        table.add_column("Value", style="yellow", justify="right")
        for key, value in EVAL_SUMMARY.items():
            table.add_row(key, str(value))
        console.print(table)

    if is_error(result):
        console.print(f"[bold red]{escape(result.inspect())}[/bold red]", highlight=False)
        sys.exit(1)

    console.print(result.inspect(), markup=False, highlight=False)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show the canonical source rendering of a JSON-encoded AST"""
    program = _load_program(file)
    console.print(Panel.fit(
        str(program),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue"
    ))


@cli.command()
def builtins():
    """List the built-in functions"""
    table = Table(title="Builtins")
    table.add_column("Name", style="cyan")
    table.add_column("Object", style="green")
    for name, fn in BUILTINS.items():
        table.add_row(name, fn.inspect())
    console.print(table)


if __name__ == "__main__":
    cli()
