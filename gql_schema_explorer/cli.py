"""CLI for gql-schema."""

import logging
from dataclasses import dataclass, field
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import config, log, schema_loader
from .report import emit_summary, print_type
from .schema import Schema

app = typer.Typer(help="GraphQL introspection schema explorer")
config_app = typer.Typer(help="Configuration operations")
app.add_typer(config_app, name="config")

console = Console()
state = {"debug": False}


@dataclass
class SourceOptions:
    """Where to load the schema from."""

    url: Optional[str] = None
    schema_file: Optional[str] = None
    headers: list[str] = field(default_factory=list)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    debug: bool = typer.Option(False, "--debug", help="Re-raise errors with a traceback"),
):
    """Inspect GraphQL schemas from introspection responses."""
    state["debug"] = debug
    if verbose:
        log.setLevel(logging.DEBUG)


def load(opts: SourceOptions) -> Schema:
    """
    Load the schema described by the source options.

    Config headers are sent in addition to the ones given on the command line,
    and the config URL is used when neither a URL nor a file is given.
    """
    cfg = config.load()
    url = opts.url or cfg.default_url
    return schema_loader.load_schema(
        url=url,
        schema_file=opts.schema_file,
        headers=[*cfg.headers, *opts.headers],
    )


def fail(e: Exception) -> None:
    console.print(f"[red]Error: {escape(str(e))}[/red]")
    if state["debug"]:
        raise e
    raise typer.Exit(1)


@app.command("summary")
def summary_cmd(
    url: Optional[str] = typer.Option(None, help="GraphQL endpoint URL"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Saved introspection response"),
    header: list[str] = typer.Option([], "--header", "-H", help="Extra header, 'Name: Value'"),
    output: str = typer.Option("console", help="Output format (console|json)"),
):
    """Show root operation types and type counts."""
    try:
        schema = load(SourceOptions(url=url, schema_file=file, headers=header))
        emit_summary(schema, output)
    except Exception as e:
        fail(e)


@app.command("types")
def types_cmd(
    url: Optional[str] = typer.Option(None, help="GraphQL endpoint URL"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Saved introspection response"),
    header: list[str] = typer.Option([], "--header", "-H", help="Extra header, 'Name: Value'"),
    kind: Optional[str] = typer.Option(None, help="Only types of this kind, e.g. OBJECT"),
):
    """List type names."""
    try:
        schema = load(SourceOptions(url=url, schema_file=file, headers=header))
        types = schema.get_types_of_kind(kind) if kind else schema.types or ()
        for typ in types:
            if typ.name is not None:
                console.print(f"{escape(typ.name)} [dim]{escape(typ.kind or '')}[/dim]")
    except Exception as e:
        fail(e)


@app.command("show")
def show_cmd(
    name: str = typer.Argument(..., help="Type name"),
    url: Optional[str] = typer.Option(None, help="GraphQL endpoint URL"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Saved introspection response"),
    header: list[str] = typer.Option([], "--header", "-H", help="Extra header, 'Name: Value'"),
):
    """Show the fields, inputs and enum values of a type."""
    try:
        schema = load(SourceOptions(url=url, schema_file=file, headers=header))
        typ = schema.get_type(name)
        if typ is None:
            console.print(f"[red]Error: type {escape(name)} not found[/red]")
            raise typer.Exit(1)
        print_type(typ)
    except typer.Exit:
        raise
    except Exception as e:
        fail(e)


@config_app.command("init")
def config_init(
    path: Optional[str] = typer.Option(None, help="Config file path"),
):
    """Write an example config file."""
    try:
        written = config.create_example_config(path)
        console.print(f"[green]✓[/green] Config written to {escape(written)}")
    except Exception as e:
        fail(e)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
