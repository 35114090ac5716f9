"""CLI entry point for healthrank."""

import click

from . import __version__
from .commands import assess, compare, reference
from .commands.base import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="healthrank")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """healthrank: health percentiles and risk scoring.

    Rank your health metrics against people of the same age and sex, get an
    overall health score, and see how far you are from your goals.

    Example usage:

        # Rank current stats
        healthrank assess stats.json

        # Compare against goals
        healthrank compare stats.json goals.json

        # Inspect a reference table
        healthrank reference cardio_fitness --sex female
    """
    setup_logging(verbose)


# Register commands
main.add_command(assess)
main.add_command(compare)
main.add_command(reference)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
