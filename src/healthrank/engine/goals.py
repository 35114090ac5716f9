"""Comparison of current standing against goal targets."""

from ..models.results import Assessment, GoalComparison, Metric, MetricProgress


def compare_to_goal(current: Assessment, goal: Assessment) -> GoalComparison:
    """Compare a current assessment with a goal assessment.

    Both assessments should be computed for the same profile so that their
    percentiles are on the same scale. Every metric the goal sets is
    reported, in display order; metrics without a goal are skipped.

    Args:
        current: Assessment of the subject's current readings
        goal: Assessment of the subject's target readings

    Returns:
        Per-metric progress plus the current and goal overall scores
    """
    metrics = [
        MetricProgress(
            metric=metric,
            current=current.percentiles.get(metric.value),
            goal=goal.percentiles[metric.value],
        )
        for metric in Metric
        if metric.value in goal.percentiles
    ]

    return GoalComparison(
        metrics=metrics,
        current_score=current.overall_health_risk.score,
        goal_score=goal.overall_health_risk.score,
    )
