"""Product catalog and classification commands."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from midi_configurator.configurator import (
    Scene,
    UnknownProductError,
    classify_parts,
    get_product,
    list_products,
)

console = Console()


def _load_product(name: str):
    try:
        return get_product(name)
    except UnknownProductError:
        known = ", ".join(p.name for p in list_products())
        raise click.BadParameter(f"unknown product {name!r} (choose from {known})")


@click.command()
def products() -> None:
    """List configurable products."""
    table = Table(title="Products")
    table.add_column("Name", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Views", style="yellow")
    table.add_column("Price", style="magenta")

    for product in list_products():
        table.add_row(
            product.name,
            product.title,
            ", ".join(view.value for view in product.views),
            f"{product.price} {product.currency}",
        )

    console.print(table)


@click.command()
@click.argument("product")
def palette(product: str) -> None:
    """Show the color swatches of a product.

    Example: midi-configurator palette mixo
    """
    definition = _load_product(product)

    table = Table(title=f"{definition.title} palette")
    table.add_column("Bucket", style="cyan")
    table.add_column("Color", style="green")
    table.add_column("Hex", style="white")

    for bucket in definition.palette.buckets:
        for color in definition.palette.colors(bucket):
            table.add_row(bucket, color.name, f"[{color.hex}]■[/] {color.hex}")

    console.print(table)


@click.command()
@click.argument("product")
@click.argument("parts_json", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def classify(product: str, parts_json: Path) -> None:
    """Classify a model's part list and show the default configuration.

    PARTS_JSON holds {"parts": [...]} with part names or
    {"name": ..., "color": [r, g, b]} entries.

    Example: midi-configurator classify mixo parts.json
    """
    definition = _load_product(product)
    try:
        data = json.loads(parts_json.read_text())
    except ValueError as e:
        raise click.ClickException(f"Invalid part list: {e}")

    result = classify_parts(Scene.from_dict(data), definition)

    table = Table(title=f"{definition.title} parts")
    table.add_column("Part", style="cyan")
    table.add_column("Bucket", style="green")
    table.add_column("Color", style="yellow")
    table.add_column("Companion", style="magenta")

    for part in result.parts:
        companion = result.pairing.find_companion(part)
        table.add_row(
            part.name,
            part.bucket,
            part.color_name,
            companion.name if companion else "-",
        )

    console.print(table)

    if result.fixed:
        console.print(f"[dim]Fixed white: {', '.join(m.name for m in result.fixed)}[/dim]")
    if result.unclassified:
        console.print(f"[dim]Unclassified: {', '.join(m.name for m in result.unclassified)}[/dim]")

    console.print(f"\n[bold]Specification:[/bold] {result.record.specification()}")
