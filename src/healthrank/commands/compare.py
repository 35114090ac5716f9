"""Goal comparison command."""

import json

import click

from ..engine import assess as run_assessment
from ..engine import compare_to_goal
from .assess import METRIC_LABELS
from .base import (
    echo_success,
    format_option,
    format_table,
    handle_input_errors,
    load_document,
    logger,
    parse_inputs,
    to_date,
    today_option,
)

# Keys a goal document may omit and inherit from the current stats
PROFILE_KEYS = ("dateOfBirth", "age", "sex", "gender", "weight")


def merge_profile(current: dict, goal: dict) -> dict:
    """Fill missing demographic keys of a goal document from the current one."""
    if any(goal.get(key) is not None for key in PROFILE_KEYS):
        return goal
    merged = {key: current[key] for key in PROFILE_KEYS if key in current}
    merged.update(goal)
    return merged


@click.command()
@click.argument("current_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("goal_file", type=click.Path(exists=True, dir_okay=False))
@format_option
@today_option
@handle_input_errors
def compare(current_file: str, goal_file: str, output_format: str, today):
    """Compare current stats in CURRENT_FILE against goals in GOAL_FILE.

    Both files use the same shape as for 'healthrank assess'. A goal file
    without any demographic fields uses those of the current file.
    """
    current_doc = load_document(current_file)
    goal_doc = merge_profile(current_doc, load_document(goal_file))
    reference_date = to_date(today)

    current = run_assessment(*parse_inputs(current_doc, today=reference_date))
    goal = run_assessment(*parse_inputs(goal_doc, today=reference_date))
    comparison = compare_to_goal(current, goal)
    logger.debug("Comparison: %s", comparison)

    if output_format == "json":
        click.echo(
            json.dumps(
                {
                    "current": current.to_dict(),
                    "goal": goal.to_dict(),
                    "comparison": comparison.to_dict(),
                },
                indent=2,
            )
        )
        return

    rows = []
    for progress in comparison.metrics:
        current_text = f"{progress.current:.1f}" if progress.current is not None else "-"
        status = "met" if progress.achieved else f"{progress.gap:+.1f}"
        rows.append(
            [METRIC_LABELS[progress.metric], current_text, f"{progress.goal:.1f}", status]
        )

    if rows:
        click.echo(format_table(["Metric", "Current", "Goal", "Gap"], rows))
        click.echo()

    click.echo(
        f"Overall: {comparison.current_score:.2f} -> {comparison.goal_score:.2f} "
        f"({current.overall_health_risk.level.value} -> {goal.overall_health_risk.level.value})"
    )
    if comparison.metrics and comparison.achieved_count == len(comparison.metrics):
        echo_success("All goals met!")
    else:
        click.echo(f"Goals met: {comparison.achieved_count}/{len(comparison.metrics)}")
