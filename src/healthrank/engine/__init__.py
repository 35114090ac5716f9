"""Percentile and health-risk computation engine.

Typical use::

    profile = SubjectProfile(age=30, sex=Sex.MALE, body_weight=80)
    result = assess(profile, MetricReadings(blood_sugar=5.4))
    result.overall_health_risk.level
"""

from ..models.profile import SubjectProfile, derive_age
from ..models.readings import MetricReadings
from ..models.results import Assessment
from .calculations import estimate_one_rep_max, sleep_score
from .goals import compare_to_goal
from .percentiles import PercentileEngine, compute_percentiles
from .risk import (
    PEAK_THRESHOLD,
    PROGRESSING_THRESHOLD,
    HealthRiskAggregator,
    assess_risk,
    risk_level,
)


def assess(profile: SubjectProfile, readings: MetricReadings) -> Assessment:
    """Run the percentile engine and risk aggregator in sequence."""
    computation = compute_percentiles(profile, readings)
    return Assessment(
        percentiles=computation.percentiles,
        calculated_values=computation.calculated_values,
        overall_health_risk=assess_risk(computation.percentiles),
    )


__all__ = [
    "PEAK_THRESHOLD",
    "PROGRESSING_THRESHOLD",
    "HealthRiskAggregator",
    "PercentileEngine",
    "assess",
    "assess_risk",
    "compare_to_goal",
    "compute_percentiles",
    "derive_age",
    "estimate_one_rep_max",
    "risk_level",
    "sleep_score",
]
