"""Assess command."""

import json

import click

from ..engine import assess as run_assessment
from ..models.results import Assessment, Metric
from .base import (
    echo_info,
    format_option,
    format_table,
    handle_input_errors,
    load_document,
    logger,
    parse_inputs,
    to_date,
    today_option,
)

METRIC_LABELS = {
    Metric.CARDIO_FITNESS: "Cardio fitness (1 mile)",
    Metric.HEART_RATE: "Resting heart rate",
    Metric.STRENGTH: "Strength",
    Metric.BLOOD_SUGAR: "Blood sugar (HbA1c)",
    Metric.CHOLESTEROL: "Cholesterol",
    Metric.SLEEP: "Sleep",
}


def render_assessment(assessment: Assessment) -> None:
    """Print an assessment as a table followed by the overall risk."""
    rows = [
        [METRIC_LABELS[metric], f"{assessment.percentiles[metric.value]:.1f}"]
        for metric in Metric
        if metric.value in assessment.percentiles
    ]
    if rows:
        click.echo(format_table(["Metric", "Percentile"], rows))
    else:
        echo_info("No metrics supplied; nothing was assessed.")

    calculated = assessment.calculated_values
    if calculated.one_rep_max is not None:
        click.echo(f"Estimated 1RM: {calculated.one_rep_max} ({calculated.strength_ratio}x body weight)")
    if calculated.sleep_score is not None:
        click.echo(f"Sleep score: {calculated.sleep_score:.1f}")

    risk = assessment.overall_health_risk
    click.echo()
    click.echo(click.style("Overall:", bold=True) + f" {risk.score:.2f} ({risk.level.value})")
    click.echo(f"Average risk: {risk.average_risk:.2f}")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@format_option
@today_option
@handle_input_errors
def assess(input_file: str, output_format: str, today):
    """Compute percentiles and overall health risk for INPUT_FILE.

    INPUT_FILE is a JSON document with "dateOfBirth" (or "age"), "sex" and
    "weight", plus any of "cardioFitness", "heartRate", "strengthTraining",
    "bloodSugar", "cholesterol" and "sleep".

    Examples:
        healthrank assess stats.json

        healthrank assess stats.json --format json --today 2025-01-01
    """
    profile, readings = parse_inputs(load_document(input_file), today=to_date(today))
    assessment = run_assessment(profile, readings)
    logger.debug("Assessment: %s", assessment)

    if output_format == "json":
        click.echo(json.dumps(assessment.to_dict(), indent=2))
        return

    click.echo(click.style(f"Age {profile.age}, {profile.sex.value}", bold=True))
    click.echo("=" * 40)
    render_assessment(assessment)
