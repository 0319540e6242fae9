"""Entry point for the findingdeck command line."""

import click

from findingdeck import __version__
from findingdeck.cli.commands.export import export
from findingdeck.cli.commands.records import records
from findingdeck.cli.commands.view import view


@click.group()
@click.version_option(version=__version__, prog_name="findingdeck")
def main() -> None:
    """findingdeck - browse a corpus of code findings one tab at a time."""


main.add_command(view)
main.add_command(export)
main.add_command(records)


if __name__ == "__main__":
    main()
