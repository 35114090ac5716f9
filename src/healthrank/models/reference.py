"""Reference population distributions by metric, age bracket and sex."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..errors import UnsupportedDemographicError
from .profile import Sex


@dataclass(frozen=True)
class AgeBracket:
    """Inclusive age range in whole years."""

    low: int
    high: int

    @property
    def label(self) -> str:
        return f"{self.low}-{self.high}"

    def contains(self, age: int) -> bool:
        return self.low <= age <= self.high


@dataclass(frozen=True)
class Distribution:
    """Normal approximation of a reference population."""

    mean: float
    sd: float


@dataclass(frozen=True)
class ReferenceTable:
    """Distributions for one metric, one entry per age bracket and sex."""

    name: str
    unit: str
    higher_is_better: bool
    male: tuple[Distribution, ...]
    female: tuple[Distribution, ...]

    def distribution(self, bracket: AgeBracket, sex: Sex) -> Distribution:
        """Get the distribution for a bracket and sex.

        ``Sex.OTHER`` uses the average of the male and female parameters.
        """
        index = AGE_BRACKETS.index(bracket)
        if sex == Sex.MALE:
            return self.male[index]
        if sex == Sex.FEMALE:
            return self.female[index]
        if sex == Sex.OTHER:
            m, f = self.male[index], self.female[index]
            return Distribution(mean=(m.mean + f.mean) / 2, sd=(m.sd + f.sd) / 2)
        raise UnsupportedDemographicError(f"No {self.name} reference data for sex {sex!r}")

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return {
            "name": self.name,
            "unit": self.unit,
            "higher_is_better": self.higher_is_better,
            "brackets": {
                bracket.label: {
                    "male": {"mean": m.mean, "sd": m.sd},
                    "female": {"mean": f.mean, "sd": f.sd},
                }
                for bracket, m, f in zip(AGE_BRACKETS, self.male, self.female)
            },
        }


AGE_BRACKETS: tuple[AgeBracket, ...] = (
    AgeBracket(18, 29),
    AgeBracket(30, 39),
    AgeBracket(40, 49),
    AgeBracket(50, 59),
    AgeBracket(60, 69),
    AgeBracket(70, 99),
)


def find_age_bracket(age: int) -> AgeBracket:
    """Find the bracket containing an age.

    Raises:
        UnsupportedDemographicError: If no bracket covers the age
    """
    for bracket in AGE_BRACKETS:
        if bracket.contains(age):
            return bracket
    raise UnsupportedDemographicError(
        f"Age {age} is outside the supported range "
        f"{AGE_BRACKETS[0].low}-{AGE_BRACKETS[-1].high}"
    )


def _table(
    name: str,
    unit: str,
    higher_is_better: bool,
    male: list[tuple[float, float]],
    female: list[tuple[float, float]],
) -> ReferenceTable:
    assert len(male) == len(female) == len(AGE_BRACKETS), name
    return ReferenceTable(
        name=name,
        unit=unit,
        higher_is_better=higher_is_better,
        male=tuple(Distribution(mean, sd) for mean, sd in male),
        female=tuple(Distribution(mean, sd) for mean, sd in female),
    )


# (mean, sd) per bracket: 18-29, 30-39, 40-49, 50-59, 60-69, 70-99
_TABLES = [
    _table(
        "cardio_fitness",
        "seconds per mile",
        higher_is_better=False,
        male=[(540, 90), (570, 95), (600, 100), (650, 110), (720, 120), (810, 140)],
        female=[(630, 100), (660, 105), (700, 110), (750, 120), (820, 130), (910, 150)],
    ),
    _table(
        "heart_rate",
        "bpm",
        higher_is_better=False,
        male=[(68, 9), (69, 9), (70, 9.5), (71, 10), (70, 10), (70, 10.5)],
        female=[(71, 9), (72, 9), (73, 9.5), (73, 10), (72, 10), (72, 10.5)],
    ),
    # Strength is ranked as estimated 1RM divided by body weight
    _table(
        "strength_squat",
        "x body weight",
        higher_is_better=True,
        male=[(1.35, 0.35), (1.30, 0.35), (1.20, 0.33), (1.05, 0.30), (0.90, 0.28), (0.75, 0.25)],
        female=[(0.95, 0.28), (0.90, 0.27), (0.82, 0.25), (0.72, 0.23), (0.62, 0.20), (0.52, 0.18)],
    ),
    _table(
        "strength_bench",
        "x body weight",
        higher_is_better=True,
        male=[(1.00, 0.28), (0.97, 0.27), (0.90, 0.26), (0.80, 0.24), (0.70, 0.22), (0.60, 0.20)],
        female=[(0.60, 0.18), (0.57, 0.17), (0.52, 0.16), (0.46, 0.15), (0.40, 0.13), (0.35, 0.12)],
    ),
    _table(
        "blood_sugar",
        "% HbA1c",
        higher_is_better=False,
        male=[(5.2, 0.45), (5.35, 0.5), (5.5, 0.55), (5.7, 0.6), (5.85, 0.65), (5.95, 0.65)],
        female=[(5.15, 0.4), (5.3, 0.45), (5.45, 0.5), (5.65, 0.55), (5.8, 0.6), (5.9, 0.6)],
    ),
    _table(
        "cholesterol_total",
        "mg/dL",
        higher_is_better=False,
        male=[(175, 33), (192, 36), (203, 37), (205, 38), (198, 39), (188, 40)],
        female=[(172, 32), (185, 34), (199, 36), (216, 38), (217, 39), (210, 40)],
    ),
    _table(
        "cholesterol_hdl",
        "mg/dL",
        higher_is_better=True,
        male=[(47, 11), (46, 11), (46, 12), (47, 12), (49, 13), (50, 13)],
        female=[(57, 13), (57, 14), (59, 15), (61, 16), (62, 16), (62, 17)],
    ),
    _table(
        "sleep_score",
        "score",
        higher_is_better=True,
        male=[(72, 12), (70, 12), (68, 12.5), (66, 13), (64, 13), (62, 14)],
        female=[(73, 12), (71, 12), (69, 12.5), (67, 13), (65, 13), (63, 14)],
    ),
]

REFERENCE_TABLES: Mapping[str, ReferenceTable] = MappingProxyType(
    {table.name: table for table in _TABLES}
)
