"""Integration tests for the full pipeline.

These drive the engine the way an outer application does: a request-style
document goes in, a stored assessment document comes out, and a stored goal
document is later compared against fresh stats.
"""

import json
from datetime import date

import pytest
from click.testing import CliRunner

from healthrank.cli import main
from healthrank.engine import assess, compare_to_goal
from healthrank.models.profile import SubjectProfile
from healthrank.models.readings import MetricReadings
from healthrank.models.results import Assessment, RiskLevel

TODAY = date(2025, 6, 1)


@pytest.fixture
def stats_document():
    """Current stats as submitted by the entry form."""
    return {
        "dateOfBirth": "1988-09-12",
        "gender": "female",
        "weight": 64,
        "cardioFitness": 610,
        "heartRate": 66,
        "strengthTraining": {"exercise": "bench", "type": "weightReps", "weight": 35, "reps": 8},
        "bloodSugar": 5.5,
        "cholesterol": {"total": 205, "hdl": 58},
        "sleep": {"duration": 6.5, "efficiency": 0.82, "rem": 0.18, "deep": 0.11},
    }


@pytest.fixture
def goal_document():
    """Targets the user is working toward."""
    return {
        "cardioFitness": 540,
        "heartRate": 60,
        "strengthTraining": {"exercise": "bench", "type": "oneRepMax", "oneRepMax": 50},
        "bloodSugar": 5.2,
        "cholesterol": {"total": 185, "hdl": 65},
        "sleep": {"duration": 8, "efficiency": 0.9, "rem": 0.22, "deep": 0.16},
    }


class TestPipelineIntegration:
    """Integration tests for assessment and goal tracking."""

    def test_document_to_stored_assessment(self, stats_document):
        """Test a stats document produces a storable assessment."""
        profile = SubjectProfile.from_dict(stats_document, today=TODAY)
        readings = MetricReadings.from_dict(stats_document)
        result = assess(profile, readings)

        assert profile.age == 36
        stored = json.loads(json.dumps(result.to_dict()))
        assert Assessment.from_dict(stored) == result
        assert len(stored["percentiles"]) == 6
        assert stored["overallHealthRisk"]["score"] + stored["overallHealthRisk"][
            "averageRisk"
        ] == pytest.approx(100)

    def test_goal_round_trip(self, stats_document, goal_document):
        """Test a stored goal is compared against current stats."""
        profile = SubjectProfile.from_dict(stats_document, today=TODAY)
        current = assess(profile, MetricReadings.from_dict(stats_document))
        goal = assess(profile, MetricReadings.from_dict(goal_document))

        # Goals are stored and read back before comparison
        stored_goal = Assessment.from_dict(json.loads(json.dumps(goal.to_dict())))
        comparison = compare_to_goal(current, stored_goal)

        assert len(comparison.metrics) == 6
        assert comparison.goal_score > comparison.current_score
        assert goal.overall_health_risk.level in (RiskLevel.PROGRESSING, RiskLevel.PEAK)
        assert goal.calculated_values.one_rep_max == 50

    def test_cli_end_to_end(self, tmp_path, stats_document, goal_document):
        """Test the CLI produces the same numbers as the library."""
        stats_path = tmp_path / "stats.json"
        goal_path = tmp_path / "goal.json"
        stats_path.write_text(json.dumps(stats_document))
        goal_path.write_text(json.dumps(goal_document))

        runner = CliRunner()
        result = runner.invoke(
            main,
            ["compare", str(stats_path), str(goal_path), "--format", "json", "--today", "2025-06-01"],
        )
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        profile = SubjectProfile.from_dict(stats_document, today=TODAY)
        expected = assess(profile, MetricReadings.from_dict(stats_document))
        assert data["current"] == expected.to_dict()
        assert data["comparison"]["currentScore"] == expected.overall_health_risk.score
