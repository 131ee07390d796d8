"""Main CLI entry point for the MIDI configurator."""

import click

from midi_configurator import __version__
from midi_configurator.utils import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="MIDI Configurator")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """MIDI Configurator - color configurator and checkout backend.

    Inspect product palettes, dry-run part classification on a model's
    part list, sign payments and run the checkout server.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        setup_logging("DEBUG")


from midi_configurator.cli.catalog import products, palette, classify
from midi_configurator.cli.payments_cmd import signature
from midi_configurator.cli.serve import serve

cli.add_command(products)
cli.add_command(palette)
cli.add_command(classify)
cli.add_command(signature)
cli.add_command(serve)


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
