"""Output formatting and reporting."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import utils
from .models import TableItem, Type
from .schema import Schema

console = Console()


def emit_summary(schema: Schema, fmt: str) -> None:
    """
    Output a schema summary.

    Args:
        schema: Parsed schema
        fmt: Output format ("json" or "console")
    """
    roots = {
        "query": schema.get_query_name(),
        "mutation": schema.get_mutation_name(),
        "subscription": schema.get_subscription_name(),
    }
    kinds = schema.kind_counts()

    if fmt == "json":
        print(
            utils.to_json({
                **roots,
                "types": len(schema.types or ()),
                "directives": len(schema.directives or ()),
                "kinds": kinds,
            })
        )
        return

    console.print("\n[bold cyan]Schema Summary[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Root", style="cyan")
    table.add_column("Type")
    for root, name in roots.items():
        table.add_row(root.capitalize(), name or "[dim]-[/dim]")
    console.print(table)

    print_kv("Types by kind", kinds)


def print_kv(title: str, data: dict) -> None:
    """
    Print key-value pairs.

    Args:
        title: Section title
        data: Key-value data
    """
    console.print(f"\n[bold cyan]{title}[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="yellow")

    for k, v in data.items():
        table.add_row(k, str(v))

    console.print(table)
    console.print()


def print_rows(title: str, items: Sequence[TableItem]) -> None:
    """
    Print schema members as a table, one row per item.

    Args:
        title: Table title
        items: Fields, inputs or enum values (all of the same model)
    """
    if not items:
        console.print(f"[dim]{title}: none[/dim]")
        return

    table = Table(title=title, title_justify="left", title_style="bold cyan")
    for header in items[0].table_headers:
        table.add_column(header)

    for item in items:
        table.add_row(*(escape(cell) for cell in item.table_fields()))

    console.print(table)


def print_type(typ: Type) -> None:
    """Print a type's description, member tables and related types."""
    console.print(f"\n[bold]{escape(utils.sanitize(typ.name))}[/bold] [dim]({utils.sanitize(typ.kind)})[/dim]")
    if typ.description:
        console.print(escape(utils.sanitize(typ.description)))
    console.print()

    for title, items in typ.members():
        print_rows(title, items)

    for field in typ.fields or ():
        if field.args:
            print_rows(f"Arguments of {utils.sanitize(field.name)}", field.args)

    if typ.interfaces:
        console.print("[cyan]Implements:[/cyan] " + escape(", ".join(t.decorated_name() for t in typ.interfaces)))
    if typ.possible_types:
        console.print("[cyan]Possible types:[/cyan] " + escape(", ".join(t.decorated_name() for t in typ.possible_types)))
    console.print()
