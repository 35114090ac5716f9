"""Metric reading data models."""

from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidMetricRangeError


class StrengthExercise(str, Enum):
    """Lifts with strength reference tables."""

    SQUAT = "squat"
    BENCH = "bench"


class StrengthMode(str, Enum):
    """How a strength reading was recorded."""

    ONE_REP_MAX = "oneRepMax"  # Tested single-rep max
    WEIGHT_REPS = "weightReps"  # Sub-maximal set, 1RM is estimated


@dataclass(frozen=True)
class StrengthTraining:
    """A strength reading for one lift."""

    exercise: StrengthExercise
    mode: StrengthMode
    one_rep_max: float | None = None
    weight: float | None = None
    reps: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {"exercise": self.exercise.value, "type": self.mode.value}
        if self.mode == StrengthMode.ONE_REP_MAX:
            data["oneRepMax"] = self.one_rep_max
        else:
            data["weight"] = self.weight
            data["reps"] = self.reps
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "StrengthTraining":
        """Create from dictionary."""
        return cls(
            exercise=StrengthExercise(data["exercise"]),
            mode=StrengthMode(data["type"]),
            one_rep_max=data.get("oneRepMax"),
            weight=data.get("weight"),
            reps=data.get("reps"),
        )


@dataclass(frozen=True)
class Cholesterol:
    """Lipid panel values in mg/dL."""

    total: float
    hdl: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"total": self.total, "hdl": self.hdl}

    @classmethod
    def from_dict(cls, data: dict) -> "Cholesterol":
        """Create from dictionary."""
        return cls(total=data["total"], hdl=data["hdl"])


@dataclass(frozen=True)
class Sleep:
    """A night of sleep.

    Efficiency and stage fractions are 0-1, not percentages.
    """

    duration: float  # hours
    efficiency: float | None = None
    rem: float | None = None
    deep: float | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "duration": self.duration,
            "efficiency": self.efficiency,
            "rem": self.rem,
            "deep": self.deep,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Sleep":
        """Create from dictionary."""
        return cls(
            duration=data["duration"],
            efficiency=data.get("efficiency"),
            rem=data.get("rem"),
            deep=data.get("deep"),
        )


@dataclass(frozen=True)
class MetricReadings:
    """Raw readings for a subject. Every metric is optional."""

    cardio_fitness: float | None = None  # 1-mile time in seconds
    heart_rate: float | None = None  # resting bpm
    strength_training: StrengthTraining | None = None
    blood_sugar: float | None = None  # HbA1c %
    cholesterol: Cholesterol | None = None
    sleep: Sleep | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting absent metrics."""
        data: dict = {}
        if self.cardio_fitness is not None:
            data["cardioFitness"] = self.cardio_fitness
        if self.heart_rate is not None:
            data["heartRate"] = self.heart_rate
        if self.strength_training is not None:
            data["strengthTraining"] = self.strength_training.to_dict()
        if self.blood_sugar is not None:
            data["bloodSugar"] = self.blood_sugar
        if self.cholesterol is not None:
            data["cholesterol"] = self.cholesterol.to_dict()
        if self.sleep is not None:
            data["sleep"] = self.sleep.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "MetricReadings":
        """Create from a request-style dictionary.

        Empty nested objects (e.g. ``"cholesterol": {}``) count as absent,
        matching what the entry form submits when fields are left blank.
        """
        for key in ("strengthTraining", "cholesterol", "sleep"):
            value = data.get(key)
            if value is not None and not isinstance(value, dict):
                raise InvalidMetricRangeError(key, value, "an object")

        strength = data.get("strengthTraining") or {}
        cholesterol = data.get("cholesterol") or {}
        sleep = data.get("sleep") or {}

        return cls(
            cardio_fitness=data.get("cardioFitness"),
            heart_rate=data.get("heartRate"),
            strength_training=(
                StrengthTraining.from_dict(strength)
                if strength.get("exercise") and strength.get("type")
                else None
            ),
            blood_sugar=data.get("bloodSugar"),
            cholesterol=(
                Cholesterol.from_dict(cholesterol)
                if cholesterol.get("total") is not None and cholesterol.get("hdl") is not None
                else None
            ),
            sleep=(
                Sleep.from_dict(sleep)
                if any(value is not None for value in sleep.values())
                else None
            ),
        )
