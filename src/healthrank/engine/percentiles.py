"""Percentile ranking of readings against reference populations."""

from numbers import Real
from typing import Mapping

from ..errors import InvalidMetricRangeError, UnsupportedDemographicError
from ..models.profile import SubjectProfile
from ..models.readings import MetricReadings, StrengthMode, StrengthTraining
from ..models.reference import REFERENCE_TABLES, AgeBracket, ReferenceTable, find_age_bracket
from ..models.results import CalculatedValues, Metric, PercentileComputation
from .calculations import estimate_one_rep_max, normal_cdf, sleep_score

# Readings further than this many standard deviations from the mean
# saturate at 0 or 100.
EXTRAPOLATION_LIMIT_Z = 3.0

# Reading domains: (low, high, low_inclusive). High bounds are inclusive.
CARDIO_SECONDS = (0.0, 3600.0, False)
HEART_RATE_BPM = (30.0, 220.0, True)
BLOOD_SUGAR_PCT = (3.5, 70.0, True)
BODY_WEIGHT = (1.0, 1000.0, True)
MAX_REPS = 100


def _check_range(field: str, value, low: float, high: float, low_inclusive: bool = True) -> float:
    """Validate a numeric reading against its domain."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidMetricRangeError(field, value, "a number")
    low_ok = value >= low if low_inclusive else value > low
    if not (low_ok and value <= high):
        bracket = "[" if low_inclusive else "("
        raise InvalidMetricRangeError(field, value, f"{bracket}{low}, {high}]")
    return float(value)


def _check_positive(field: str, value) -> float:
    return _check_range(field, value, 0.0, float("inf"), low_inclusive=False)


def _check_fraction(field: str, value) -> float | None:
    if value is None:
        return None
    return _check_range(field, value, 0.0, 1.0)


class PercentileEngine:
    """Ranks a subject's readings against age/sex reference distributions.

    The engine holds no per-call state; one instance can serve any number
    of concurrent callers.
    """

    def __init__(self, tables: Mapping[str, ReferenceTable] | None = None):
        self.tables = REFERENCE_TABLES if tables is None else tables

    def compute(self, profile: SubjectProfile, readings: MetricReadings) -> PercentileComputation:
        """Compute percentiles and calculated values for every present reading.

        Args:
            profile: Age, sex and body weight of the subject
            readings: Raw readings; absent metrics are skipped

        Returns:
            Percentile map (only assessed metrics) and derived values

        Raises:
            UnsupportedDemographicError: If the age/sex has no reference data
            InvalidMetricRangeError: If a reading is outside its domain
        """
        if isinstance(profile.age, bool) or not isinstance(profile.age, int) or profile.age < 0:
            raise UnsupportedDemographicError(f"Age must be a non-negative integer, got {profile.age!r}")
        bracket = find_age_bracket(profile.age)

        percentiles: dict[str, float] = {}
        one_rep_max = None
        strength_ratio = None
        sleep_composite = None

        if readings.cardio_fitness is not None:
            seconds = _check_range("cardioFitness", readings.cardio_fitness, *CARDIO_SECONDS)
            percentiles[Metric.CARDIO_FITNESS.value] = self._rank(
                "cardio_fitness", seconds, bracket, profile
            )

        if readings.heart_rate is not None:
            bpm = _check_range("heartRate", readings.heart_rate, *HEART_RATE_BPM)
            percentiles[Metric.HEART_RATE.value] = self._rank("heart_rate", bpm, bracket, profile)

        if readings.strength_training is not None:
            body_weight = _check_range("weight", profile.body_weight, *BODY_WEIGHT)
            one_rep_max = self._one_rep_max(readings.strength_training)
            strength_ratio = round(one_rep_max / body_weight, 3)
            table = f"strength_{readings.strength_training.exercise.value}"
            percentiles[Metric.STRENGTH.value] = self._rank(
                table, one_rep_max / body_weight, bracket, profile
            )

        if readings.blood_sugar is not None:
            a1c = _check_range("bloodSugar", readings.blood_sugar, *BLOOD_SUGAR_PCT)
            percentiles[Metric.BLOOD_SUGAR.value] = self._rank("blood_sugar", a1c, bracket, profile)

        if readings.cholesterol is not None:
            total = _check_positive("cholesterol.total", readings.cholesterol.total)
            hdl = _check_positive("cholesterol.hdl", readings.cholesterol.hdl)
            # Mean of both sub-ranks: low total and high HDL are both favourable
            combined = (
                self._rank("cholesterol_total", total, bracket, profile)
                + self._rank("cholesterol_hdl", hdl, bracket, profile)
            ) / 2
            percentiles[Metric.CHOLESTEROL.value] = round(combined, 1)

        if readings.sleep is not None:
            sleep = readings.sleep
            _check_range("sleep.duration", sleep.duration, 0.0, 24.0)
            _check_fraction("sleep.efficiency", sleep.efficiency)
            _check_fraction("sleep.rem", sleep.rem)
            _check_fraction("sleep.deep", sleep.deep)
            sleep_composite = sleep_score(sleep)
            percentiles[Metric.SLEEP.value] = self._rank(
                "sleep_score", sleep_composite, bracket, profile
            )

        return PercentileComputation(
            percentiles=percentiles,
            calculated_values=CalculatedValues(
                one_rep_max=one_rep_max,
                strength_ratio=strength_ratio,
                sleep_score=sleep_composite,
            ),
        )

    def _one_rep_max(self, strength: StrengthTraining) -> float:
        if strength.mode == StrengthMode.ONE_REP_MAX:
            _check_positive("strengthTraining.oneRepMax", strength.one_rep_max)
            return strength.one_rep_max

        weight = _check_positive("strengthTraining.weight", strength.weight)
        reps = strength.reps
        if isinstance(reps, bool) or not isinstance(reps, int) or not 1 <= reps <= MAX_REPS:
            raise InvalidMetricRangeError(
                "strengthTraining.reps", reps, f"an integer in [1, {MAX_REPS}]"
            )
        return estimate_one_rep_max(weight, reps)

    def _rank(
        self, table_name: str, value: float, bracket: AgeBracket, profile: SubjectProfile
    ) -> float:
        """Convert a raw value to a direction-adjusted percentile."""
        table = self.tables.get(table_name)
        if table is None:
            raise UnsupportedDemographicError(f"No reference table for {table_name}")

        dist = table.distribution(bracket, profile.sex)
        z = (value - dist.mean) / dist.sd
        if not table.higher_is_better:
            z = -z

        if z >= EXTRAPOLATION_LIMIT_Z:
            return 100.0
        if z <= -EXTRAPOLATION_LIMIT_Z:
            return 0.0
        return round(min(100.0, max(0.0, 100 * normal_cdf(z))), 1)


_default_engine = PercentileEngine()


def compute_percentiles(profile: SubjectProfile, readings: MetricReadings) -> PercentileComputation:
    """Compute percentiles with the built-in reference tables."""
    return _default_engine.compute(profile, readings)
