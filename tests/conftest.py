"""Pytest configuration and fixtures."""

import json

import pytest

from healthrank.models.profile import Sex, SubjectProfile
from healthrank.models.readings import (
    Cholesterol,
    MetricReadings,
    Sleep,
    StrengthExercise,
    StrengthMode,
    StrengthTraining,
)


@pytest.fixture
def male_profile():
    """A 25 year old male weighing 80."""
    return SubjectProfile(age=25, sex=Sex.MALE, body_weight=80)


@pytest.fixture
def full_readings():
    """Readings for every supported metric."""
    return MetricReadings(
        cardio_fitness=480,
        heart_rate=62,
        strength_training=StrengthTraining(
            exercise=StrengthExercise.SQUAT,
            mode=StrengthMode.WEIGHT_REPS,
            weight=100,
            reps=5,
        ),
        blood_sugar=5.1,
        cholesterol=Cholesterol(total=180, hdl=55),
        sleep=Sleep(duration=7.5, efficiency=0.9, rem=0.22, deep=0.16),
    )


@pytest.fixture
def stats_document():
    """A request-style stats document as submitted by the entry form."""
    return {
        "dateOfBirth": "1995-01-01",
        "gender": "male",
        "weight": 80,
        "cardioFitness": 480,
        "heartRate": 62,
        "bloodSugar": 5.6,
        "cholesterol": {"total": 200, "hdl": 50},
        "sleep": {"duration": 7, "efficiency": 0.85, "rem": 0.2, "deep": 0.12},
        "strengthTraining": {"exercise": "squat", "type": "weightReps", "weight": 100, "reps": 5},
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a document to a JSON file and return its path."""

    def _write(name: str, data: dict) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write
