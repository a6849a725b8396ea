"""CLI entry point: solpragma.

Subcommands:
    solpragma scan contracts/                 # every *.sol under a directory
    solpragma scan Token.sol Vault.sol --json
    solpragma analyze Token.sol               # one file, JSON result
    cat Token.sol | solpragma analyze -       # from stdin
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from solpragma.api import analyze
from solpragma.core.logging import setup_logging
from solpragma.discovery import scan_paths
from solpragma.exceptions import SolPragmaError
from solpragma.schemas import FileAnalysis


def _print_results(results: list[FileAnalysis], as_json: bool) -> None:
    if as_json:
        rows = [r.model_dump(by_alias=True) for r in results]
        click.echo(json.dumps(rows, indent=2))
        return

    if not results:
        click.echo("No Solidity sources found.")
        return

    with_pragmas = sum(1 for r in results if r.version_pragmas)
    click.echo(f"Scanned {len(results)} file(s), {with_pragmas} with version pragmas\n")
    for r in results:
        if r.version_pragmas:
            click.echo(f"  {r.source_file}")
            for pragma in r.version_pragmas:
                click.echo(f"    solidity {pragma}")
        else:
            click.echo(f"  {r.source_file}  (no version pragma)")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """solpragma: extract `pragma solidity` version constraints from Solidity sources."""
    setup_logging("DEBUG" if verbose else None)


@main.command("scan")
@click.argument("paths", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--only-with-pragmas",
    is_flag=True,
    help="Leave out files that declare no version pragma",
)
def scan_command(paths: tuple[str, ...], as_json: bool, only_with_pragmas: bool) -> None:
    """Scan files or directories for version pragmas."""
    roots = [Path(p) for p in paths]
    for root in roots:
        if not root.exists():
            click.echo(f"Error: {root} does not exist", err=True)
            sys.exit(1)

    results = scan_paths(roots)
    if only_with_pragmas:
        results = [r for r in results if r.version_pragmas]
    _print_results(results, as_json)


@main.command("analyze")
@click.argument("source", default="-")
def analyze_command(source: str) -> None:
    """Analyze one source file (or stdin with '-') and print the JSON result."""
    if source == "-":
        data = click.get_binary_stream("stdin").read()
    else:
        path = Path(source)
        if not path.is_file():
            click.echo(f"Error: {path} does not exist or is not a file", err=True)
            sys.exit(1)
        try:
            data = path.read_bytes()
        except OSError as e:
            click.echo(f"Error: cannot read {path}: {e}", err=True)
            sys.exit(1)

    try:
        result = analyze(data)
    except SolPragmaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(json.dumps(result.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    main()
