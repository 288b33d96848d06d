"""Tests for the aggregator and its never-raising boundary."""

import logging

import pytest

from linkup_matching.models.matching import MATCH_WEIGHTS, ScoreBreakdown
from linkup_matching.models.profiles import CandidateProfile, JobPosting
from linkup_matching.services.dimensions import round_half_up
from linkup_matching.services.scoring import (
    IncompatibleOutcome,
    ScoredOutcome,
    evaluate,
    get_recommendation,
    score,
    weighted_total,
)

DIMENSION_NAMES = ("skills", "title", "industry", "location", "experience", "contract", "salary")


def _recomputed_total(result: ScoreBreakdown) -> int:
    details = result.details.model_dump()
    return round_half_up(sum(details[name] * w for name, w in MATCH_WEIGHTS.items()))


def test_weights_sum_to_one():
    assert sum(MATCH_WEIGHTS.values()) == pytest.approx(1.0)
    assert set(MATCH_WEIGHTS) == set(DIMENSION_NAMES)


@pytest.mark.parametrize(
    "total, label",
    [
        (100, "perfect match"),
        (90, "perfect match"),
        (89, "excellent"),
        (80, "excellent"),
        (75, "good"),
        (60, "correct"),
        (55, "average"),
        (40, "weak"),
        (39, "very weak"),
        (0, "very weak"),
    ],
)
def test_get_recommendation(total, label):
    assert get_recommendation(total) == label


def test_weighted_total_clamps():
    assert weighted_total({name: 100 for name in DIMENSION_NAMES}) == 100
    assert weighted_total({}) == 0


class TestScenarios:
    def test_frontend_developer_on_react_job(self, frontend_candidate, react_job):
        result = score(frontend_candidate, react_job)
        assert result.details.skills == 100
        assert result.details.location == 90  # hybride
        assert result.details.experience == 100
        assert result.details.title == 27
        assert result.details.industry == 31
        assert result.details.incompatibility is None
        assert result.score == 62
        assert result.recommendation == "correct"

    def test_complete_profile_is_excellent(self, complete_candidate, complete_job):
        result = score(complete_candidate, complete_job)
        assert result.details.model_dump(exclude_none=True) == {
            "skills": 100,
            "title": 100,
            "industry": 69,
            "location": 60,
            "experience": 80,
            "contract": 90,
            "salary": 80,
        }
        assert result.score == 87
        assert result.recommendation == "excellent"

    def test_medical_profile_on_software_job(self, medical_candidate, software_job):
        result = score(medical_candidate, software_job)
        assert result.score <= 15
        assert result.score == 5
        assert result.details.incompatibility
        for name in DIMENSION_NAMES:
            assert getattr(result.details, name) == 0
        assert result.recommendation == "very weak"

    def test_empty_candidate(self):
        result = score({}, {"title": "Comptable"})
        assert result.score == 0
        assert result.details.skills == 0
        assert result.details.title == 0
        assert result.details.location == 0
        assert result.details.experience == 0
        assert result.recommendation == "very weak"


class TestInvariants:
    def test_deterministic(self, complete_candidate, complete_job):
        first = score(complete_candidate, complete_job)
        second = score(complete_candidate, complete_job)
        assert first.model_dump() == second.model_dump()

    @pytest.mark.parametrize(
        "candidate_fixture, job_fixture",
        [
            ("frontend_candidate", "react_job"),
            ("complete_candidate", "complete_job"),
            ("frontend_candidate", "complete_job"),
            ("complete_candidate", "react_job"),
        ],
    )
    def test_total_is_the_weighted_sum(self, request, candidate_fixture, job_fixture):
        result = score(
            request.getfixturevalue(candidate_fixture),
            request.getfixturevalue(job_fixture),
        )
        assert 0 <= result.score <= 100
        assert result.score == _recomputed_total(result)
        assert result.weights == dict(MATCH_WEIGHTS)

    def test_accepts_models_and_camel_case_records(self):
        as_model = score(
            CandidateProfile(job_title="Comptable", experience_level="junior"),
            JobPosting(title="Comptable", experience="junior"),
        )
        as_record = score(
            {"jobTitle": "Comptable", "experienceLevel": "junior"},
            {"title": "Comptable", "experienceRequired": "junior"},
        )
        assert as_model == as_record
        assert as_model.details.title == 100
        assert as_model.details.experience == 100

    def test_comma_separated_skills(self, react_job):
        result = score({"skills": "javascript, react"}, react_job)
        assert result.details.skills == 100


class TestFailureBoundary:
    @pytest.mark.parametrize(
        "candidate, job",
        [
            ({"skills": 5}, {"title": "Comptable"}),
            ({"job_title": ["not", "text"]}, {"title": "Comptable"}),
            ({}, {"salary_max": "beaucoup"}),
            (None, {"title": "Comptable"}),
        ],
    )
    def test_malformed_record_yields_zero_breakdown(self, candidate, job):
        result = score(candidate, job)
        assert result.score == 0
        assert result.recommendation == ""
        assert result.details.skills == 0

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="linkup_matching.services.scoring"):
            score({"skills": 5}, {})
        assert "Matching score failed" in caplog.text


class TestEvaluate:
    def test_gate_short_circuits(self, medical_candidate, software_job):
        outcome = evaluate(
            CandidateProfile.model_validate(medical_candidate),
            JobPosting.model_validate(software_job),
        )
        assert isinstance(outcome, IncompatibleOutcome)
        assert outcome.total == 5

    def test_scored_outcome_has_every_dimension(self, frontend_candidate, react_job):
        outcome = evaluate(
            CandidateProfile.model_validate(frontend_candidate),
            JobPosting.model_validate(react_job),
        )
        assert isinstance(outcome, ScoredOutcome)
        assert set(outcome.sub_scores) == set(DIMENSION_NAMES)


class TestStorageRemoteFlag:
    def test_remote_false_scores_like_missing(self, complete_candidate, complete_job):
        result = score(complete_candidate, {**complete_job, "remote": False})
        assert result.score == 87
        assert result.details.location == 60
        assert result.recommendation == "excellent"

    def test_remote_true_counts_as_remote(self, complete_candidate, complete_job):
        result = score(complete_candidate, {**complete_job, "remote": True})
        assert result.details.location == 90
        assert result.score == 90

    def test_remote_flag_parsed_by_model(self):
        assert JobPosting.model_validate({"remote": True}).remote_mode == "remote"
        assert JobPosting.model_validate({"remote": False}).remote_mode is None
        assert JobPosting.model_validate({"remote": "Hybride"}).remote_mode == "Hybride"
