"""Engine output models."""

from dataclasses import dataclass, field
from enum import Enum


class Metric(str, Enum):
    """Keys of a percentile map, in display order."""

    CARDIO_FITNESS = "cardioFitness"
    HEART_RATE = "heartRate"
    STRENGTH = "strength"
    BLOOD_SUGAR = "bloodSugar"
    CHOLESTEROL = "cholesterol"
    SLEEP = "sleep"


# Percentile per metric name, 0-100. Unassessed metrics are absent.
PercentileResult = dict[str, float]


class RiskLevel(str, Enum):
    """Overall standing tier, lowest first."""

    STARTING = "starting"
    PROGRESSING = "progressing"
    PEAK = "peak"


@dataclass(frozen=True)
class CalculatedValues:
    """Values derived from readings rather than supplied directly."""

    one_rep_max: float | None = None
    strength_ratio: float | None = None  # one_rep_max / body weight
    sleep_score: float | None = None  # 0-100 composite

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting values that were not derived."""
        data = {}
        if self.one_rep_max is not None:
            data["oneRepMax"] = self.one_rep_max
        if self.strength_ratio is not None:
            data["strengthRatio"] = self.strength_ratio
        if self.sleep_score is not None:
            data["sleepScore"] = self.sleep_score
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CalculatedValues":
        """Create from dictionary."""
        return cls(
            one_rep_max=data.get("oneRepMax"),
            strength_ratio=data.get("strengthRatio"),
            sleep_score=data.get("sleepScore"),
        )


@dataclass(frozen=True)
class PercentileComputation:
    """Output of the percentile engine."""

    percentiles: PercentileResult
    calculated_values: CalculatedValues


@dataclass(frozen=True)
class HealthRisk:
    """Aggregate standing across all assessed metrics.

    ``score + average_risk == 100`` for every instance produced by the
    aggregator.
    """

    score: float
    average_risk: float
    level: RiskLevel

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "score": self.score,
            "averageRisk": self.average_risk,
            "level": self.level.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HealthRisk":
        """Create from dictionary."""
        return cls(
            score=data["score"],
            average_risk=data["averageRisk"],
            level=RiskLevel(data["level"]),
        )


@dataclass(frozen=True)
class Assessment:
    """Combined engine output as stored and rendered by callers."""

    percentiles: PercentileResult
    calculated_values: CalculatedValues
    overall_health_risk: HealthRisk

    def to_dict(self) -> dict:
        """Convert to the document shape used by callers."""
        return {
            "percentiles": dict(self.percentiles),
            "calculatedValues": self.calculated_values.to_dict(),
            "overallHealthRisk": self.overall_health_risk.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Assessment":
        """Create from a previously stored document."""
        return cls(
            percentiles=dict(data.get("percentiles", {})),
            calculated_values=CalculatedValues.from_dict(data.get("calculatedValues", {})),
            overall_health_risk=HealthRisk.from_dict(data["overallHealthRisk"]),
        )


@dataclass(frozen=True)
class MetricProgress:
    """Current vs goal percentile for one metric."""

    metric: Metric
    current: float | None
    goal: float

    @property
    def gap(self) -> float:
        """Percentile points still needed; negative once the goal is passed."""
        return round(self.goal - (self.current or 0.0), 1)

    @property
    def achieved(self) -> bool:
        """True when the current percentile meets or beats the goal."""
        return self.current is not None and self.current >= self.goal

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "metric": self.metric.value,
            "current": self.current,
            "goal": self.goal,
            "gap": self.gap,
            "achieved": self.achieved,
        }


@dataclass(frozen=True)
class GoalComparison:
    """Progress of a current assessment toward a goal assessment."""

    metrics: list[MetricProgress] = field(default_factory=list)
    current_score: float = 0.0
    goal_score: float = 0.0

    @property
    def score_gap(self) -> float:
        """Overall score points between current standing and the goal."""
        return round(self.goal_score - self.current_score, 2)

    @property
    def achieved_count(self) -> int:
        """Number of metrics whose goal is met."""
        return sum(1 for m in self.metrics if m.achieved)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "metrics": [m.to_dict() for m in self.metrics],
            "currentScore": self.current_score,
            "goalScore": self.goal_score,
            "scoreGap": self.score_gap,
            "achieved": self.achieved_count,
        }
