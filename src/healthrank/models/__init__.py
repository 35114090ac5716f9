"""Data models for healthrank."""

from .profile import Sex, SubjectProfile, derive_age
from .readings import (
    Cholesterol,
    MetricReadings,
    Sleep,
    StrengthExercise,
    StrengthMode,
    StrengthTraining,
)
from .results import (
    Assessment,
    CalculatedValues,
    GoalComparison,
    HealthRisk,
    Metric,
    MetricProgress,
    PercentileComputation,
    PercentileResult,
    RiskLevel,
)

__all__ = [
    "Assessment",
    "CalculatedValues",
    "Cholesterol",
    "GoalComparison",
    "HealthRisk",
    "Metric",
    "MetricProgress",
    "MetricReadings",
    "PercentileComputation",
    "PercentileResult",
    "RiskLevel",
    "Sex",
    "Sleep",
    "StrengthExercise",
    "StrengthMode",
    "StrengthTraining",
    "SubjectProfile",
    "derive_age",
]
