import logging
from dataclasses import replace
from pathlib import Path

import click
from eth_utils import is_address
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from emitscope.core.config import QueryConfig
from emitscope.correlation import EmissionStatus, correlate_interface, describe_emissions
from emitscope.errors import EmitscopeError
from emitscope.interface import categorize, parse_interface
from emitscope.naming import dataset_name, extract_contract_name
from emitscope.queries import generate_analytical_queries, generate_event_queries

console = Console()

_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


def _load(abi_path: Path):
    try:
        categorized = categorize(parse_interface(abi_path))
    except EmitscopeError as e:
        raise click.ClickException(str(e)) from e
    for line in categorized.diagnostics:
        console.print(f"[yellow]warning[/]: {escape(line)}")
    return categorized


def _read_source(source_path: Path) -> str:
    try:
        return source_path.read_text()
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{source_path} is not a UTF-8 text file") from e


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def cli(log_level: str) -> None:
    """emitscope: map contract functions to events and draft indexer queries."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.command("categorize")
@click.argument("abi_path", type=_PATH)
def categorize_cmd(abi_path: Path) -> None:
    """List read functions, write functions and events of an ABI."""
    categorized = _load(abi_path)

    table = Table(title=abi_path.name)
    table.add_column("kind")
    table.add_column("signature")
    table.add_column("detail")
    for fn in categorized.read_functions:
        table.add_row("read", fn.signature, fn.state_mutability)
    for fn in categorized.write_functions:
        table.add_row("write", fn.signature, fn.state_mutability)
    for ev in categorized.events:
        table.add_row("event", ev.signature, ev.topic0)
    console.print(table)


@cli.command("correlate")
@click.argument("source_path", type=_PATH)
@click.argument("abi_path", type=_PATH)
def correlate_cmd(source_path: Path, abi_path: Path) -> None:
    """Show which events each write function emits."""
    categorized = _load(abi_path)
    if not categorized.write_functions:
        console.print("no write functions")
        return

    mapping = correlate_interface(_read_source(source_path), categorized)
    names = [fn.name for fn in categorized.write_functions]

    table = Table(title=source_path.name)
    table.add_column("function")
    table.add_column("events")
    for fn, status in describe_emissions(mapping, names).items():
        if status is EmissionStatus.MAPPED:
            table.add_row(fn, ", ".join(mapping[fn]))
        else:
            table.add_row(fn, "[dim]unknown (no event detected)[/]")
    console.print(table)


@cli.command("queries")
@click.argument("abi_path", type=_PATH)
@click.option("--dataset", "dataset_id", type=str, default=None, help="Dataset id, e.g. ns/name@dev")
@click.option("--source", "source_path", type=_PATH, default=None, help="Contract source to derive the dataset id")
@click.option("--address", type=str, default=None, help="Filter rows by emitting contract")
@click.option(
    "--kind",
    type=click.Choice(["analytical", "explorer"]),
    default="analytical",
    show_default=True,
)
@click.option("--limit", type=int, default=None, help="Row cap for series queries")
def queries_cmd(
    abi_path: Path,
    dataset_id: str | None,
    source_path: Path | None,
    address: str | None,
    kind: str,
    limit: int | None,
) -> None:
    """Print generated SQL for the ABI's events."""
    if address is not None and not is_address(address):
        raise click.BadParameter(f"not an address: {address}", param_hint="--address")

    if dataset_id is None:
        if source_path is None:
            raise click.UsageError("Pass --dataset or --source")
        contract = extract_contract_name(_read_source(source_path))
        if contract is None:
            raise click.ClickException(f'No "contract Name {{" declaration in {source_path}')
        dataset_id = dataset_name(contract)

    categorized = _load(abi_path)
    if not categorized.events:
        console.print("no events declared")
        return

    config = QueryConfig()
    if limit is not None:
        config = replace(config, series_row_cap=limit)

    generate = generate_analytical_queries if kind == "analytical" else generate_event_queries
    for query in generate(categorized.events, dataset_id, address, config):
        console.print(f"[bold]{query.name}[/]: {query.description}")
        console.print(Syntax(query.query_text, "sql"))
        console.print()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
