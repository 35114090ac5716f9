"""Subject profile data models."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from ..errors import InvalidDateError, UnsupportedDemographicError


class Sex(str, Enum):
    """Biological sex used to select reference tables."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"  # resolved to the average of male and female tables


def derive_age(date_of_birth: date | datetime | str, today: date | None = None) -> int:
    """Calculate age in whole years from a date of birth.

    Args:
        date_of_birth: Birth date as a date, datetime or ISO-8601 string
        today: Reference date (defaults to the current local date)

    Returns:
        Completed years between the birth date and the reference date

    Raises:
        InvalidDateError: If the date cannot be parsed or is in the future
    """
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()

    if isinstance(date_of_birth, datetime):
        birth = date_of_birth.date()
    elif isinstance(date_of_birth, date):
        birth = date_of_birth
    elif isinstance(date_of_birth, str):
        try:
            # Accept full timestamps as stored by browsers ("1990-05-01T00:00:00Z")
            birth = datetime.fromisoformat(date_of_birth.strip().replace("Z", "+00:00")).date()
        except ValueError as e:
            raise InvalidDateError(f"Cannot parse date of birth: {date_of_birth!r}") from e
    else:
        raise InvalidDateError(f"Unsupported date of birth type: {type(date_of_birth).__name__}")

    if birth > today:
        raise InvalidDateError(f"Date of birth {birth.isoformat()} is in the future")

    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


@dataclass(frozen=True)
class SubjectProfile:
    """Demographic context for a percentile computation."""

    age: int
    sex: Sex
    body_weight: float

    @classmethod
    def from_date_of_birth(
        cls,
        date_of_birth: date | datetime | str,
        sex: Sex | str,
        body_weight: float,
        today: date | None = None,
    ) -> "SubjectProfile":
        """Create a profile, deriving age from a date of birth."""
        return cls(
            age=derive_age(date_of_birth, today=today),
            sex=Sex(sex),
            body_weight=body_weight,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "age": self.age,
            "sex": self.sex.value,
            "weight": self.body_weight,
        }

    @classmethod
    def from_dict(cls, data: dict, today: date | None = None) -> "SubjectProfile":
        """Create from a request-style dictionary.

        Uses ``dateOfBirth`` when present, otherwise ``age``. The legacy
        ``gender`` key is accepted in place of ``sex``.
        """
        raw_sex = data.get("sex", data.get("gender"))
        try:
            sex = Sex(raw_sex)
        except ValueError as e:
            raise UnsupportedDemographicError(f"Unsupported sex: {raw_sex!r}") from e

        if data.get("dateOfBirth"):
            return cls.from_date_of_birth(
                data["dateOfBirth"], sex, data["weight"], today=today
            )
        return cls(age=data["age"], sex=sex, body_weight=data["weight"])
