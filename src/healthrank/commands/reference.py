"""Reference table browsing command."""

import json

import click

from ..models.profile import Sex
from ..models.reference import AGE_BRACKETS, REFERENCE_TABLES, find_age_bracket
from .base import format_table, handle_input_errors


@click.command()
@click.argument("table_name", type=click.Choice(sorted(REFERENCE_TABLES)))
@click.option(
    "--sex",
    type=click.Choice([s.value for s in Sex]),
    default=None,
    help="Only show this sex (other = male/female average)",
)
@click.option("--age", type=int, default=None, help="Only show the bracket containing this age")
@click.option("--json", "as_json", is_flag=True, help="Print the whole table as JSON")
@handle_input_errors
def reference(table_name: str, sex: str | None, age: int | None, as_json: bool):
    """Show reference distribution parameters for TABLE_NAME.

    Examples:
        healthrank reference blood_sugar

        healthrank reference strength_squat --sex female --age 42
    """
    table = REFERENCE_TABLES[table_name]

    if as_json:
        click.echo(json.dumps(table.to_dict(), indent=2))
        return

    brackets = [find_age_bracket(age)] if age is not None else list(AGE_BRACKETS)
    sexes = [Sex(sex)] if sex else [Sex.MALE, Sex.FEMALE]

    direction = "higher is better" if table.higher_is_better else "lower is better"
    click.echo(click.style(f"{table.name} ({table.unit}, {direction})", bold=True))

    rows = []
    for bracket in brackets:
        for s in sexes:
            dist = table.distribution(bracket, s)
            rows.append([bracket.label, s.value, f"{dist.mean:g}", f"{dist.sd:g}"])
    click.echo(format_table(["Age", "Sex", "Mean", "SD"], rows))
