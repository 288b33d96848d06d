"""Tests for the domain incompatibility gate."""

from linkup_matching.models.profiles import CandidateProfile, JobPosting
from linkup_matching.services.incompatibility import (
    INCOMPATIBILITY_PENALTY,
    check_incompatibility,
)
from linkup_matching.services.lexicon import DEFAULT_LEXICON, DomainCluster, Lexicon


def test_medical_candidate_vs_software_job(medical_candidate, software_job):
    result = check_incompatibility(
        CandidateProfile.model_validate(medical_candidate),
        JobPosting.model_validate(software_job),
    )
    assert result.fired is True
    assert result.penalty == INCOMPATIBILITY_PENALTY
    assert "medical" in result.reason


def test_developer_vs_medical_job():
    candidate = CandidateProfile(job_title="Développeur Python", skills=["python"])
    job = JobPosting(
        title="Médecin urgentiste",
        description="Service des urgences",
        industry="Santé",
    )
    result = check_incompatibility(candidate, job)
    assert result.fired is True
    assert "tech" in result.reason


def test_job_side_domain_fires():
    candidate = CandidateProfile(job_title="Développeur web")
    job = JobPosting(title="Juriste droit des affaires")
    result = check_incompatibility(candidate, job)
    assert result.fired is True
    assert result.reason.startswith("job in the legal domain")


def test_compatible_pair_does_not_fire(frontend_candidate, react_job):
    result = check_incompatibility(
        CandidateProfile.model_validate(frontend_candidate),
        JobPosting.model_validate(react_job),
    )
    assert result.fired is False
    assert result.reason == ""
    assert result.penalty == 0


def test_empty_records_do_not_fire():
    assert check_incompatibility(CandidateProfile(), JobPosting()).fired is False


def test_clusters_are_evaluated_in_order():
    first = DomainCluster(name="first", keywords=("alpha",), incompatible_with=("beta",))
    second = DomainCluster(name="second", keywords=("alpha",), incompatible_with=("beta",))
    lexicon = Lexicon(domain_clusters=(first, second))

    result = check_incompatibility(
        CandidateProfile(job_title="alpha"), JobPosting(title="beta"), lexicon
    )
    assert "first" in result.reason


def test_default_cluster_order():
    names = [c.name for c in DEFAULT_LEXICON.domain_clusters]
    assert names == ["medical", "tech", "legal", "education"]
