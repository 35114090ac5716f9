"""Aggregate health-risk classification from a percentile map."""

from typing import Mapping

from ..models.results import HealthRisk, RiskLevel

# Score cut-offs, inclusive lower bounds
PEAK_THRESHOLD = 66.67
PROGRESSING_THRESHOLD = 33.34


def risk_level(score: float) -> RiskLevel:
    """Map an aggregate score to its tier."""
    if score >= PEAK_THRESHOLD:
        return RiskLevel.PEAK
    if score >= PROGRESSING_THRESHOLD:
        return RiskLevel.PROGRESSING
    return RiskLevel.STARTING


class HealthRiskAggregator:
    """Summarizes percentile standing as a single score and tier."""

    def assess(self, percentiles: Mapping[str, float]) -> HealthRisk:
        """Average the available percentiles into a HealthRisk.

        An empty map is not an error: it scores 0 in the lowest tier.
        ``average_risk`` is always ``100 - score``.
        """
        if percentiles:
            score = round(sum(percentiles.values()) / len(percentiles), 2)
        else:
            score = 0.0

        return HealthRisk(
            score=score,
            average_risk=round(100 - score, 2),
            level=risk_level(score),
        )


_default_aggregator = HealthRiskAggregator()


def assess_risk(percentiles: Mapping[str, float]) -> HealthRisk:
    """Assess overall health risk from a percentile map."""
    return _default_aggregator.assess(percentiles)
