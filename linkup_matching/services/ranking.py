"""Batch ranking of jobs for a candidate, and of candidates for a job.

Each pair is scored independently; the result list is filtered and then
sorted with a stable descending sort, so equal scores keep the order of
the input collection.
"""

import logging
from itertools import islice
from typing import Any, Iterable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from linkup_matching.models.matching import RankedCandidate, RankedJob, RankOptions
from linkup_matching.models.profiles import CandidateProfile, JobPosting
from linkup_matching.services.lexicon import DEFAULT_LEXICON, Lexicon
from linkup_matching.services.scoring import score

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _coerce(record: Any, model: type[M]) -> M | None:
    if isinstance(record, model):
        return record
    try:
        return model.model_validate(record)
    except ValidationError:
        return None


def _bounded(records: Iterable[Any], limit: int | None) -> list[Any]:
    if limit is None:
        return list(records)
    return list(islice(records, limit))


def _contains(text: str | None, needle: str) -> bool:
    return isinstance(text, str) and needle.lower() in text.lower()


def _company_industry(job: JobPosting) -> str | None:
    company = getattr(job, "company", None)
    if isinstance(company, Mapping):
        return company.get("industry")
    return getattr(company, "industry", None)


def _job_passes_facets(record: Any, options: RankOptions) -> bool:
    if not options.industry and not options.location:
        return True
    job = _coerce(record, JobPosting)
    if job is None:
        return False

    if options.industry and not (
        _contains(job.industry, options.industry)
        or _contains(_company_industry(job), options.industry)
    ):
        return False
    if options.location and not _contains(job.location, options.location):
        return False
    return True


def _candidate_passes_facets(record: Any, options: RankOptions) -> bool:
    if not options.industry and not options.location:
        return True
    candidate = _coerce(record, CandidateProfile)
    if candidate is None:
        return False

    if options.industry and not _contains(candidate.profile_text(), options.industry):
        return False
    if options.location:
        where = f"{candidate.city or ''} {candidate.country or ''}"
        if not _contains(where, options.location):
            return False
    return True


def rank_jobs_for_candidate(
    candidate: CandidateProfile | Mapping[str, Any],
    jobs: Iterable[JobPosting | Mapping[str, Any]],
    options: RankOptions | None = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> list[RankedJob]:
    """Score every job for one candidate, best match first.

    ``options.limit`` caps how many jobs are scored, not how many are
    returned; ``min_score`` and the industry/location facets then filter
    the scored list.
    """
    options = options or RankOptions()
    pool = _bounded(jobs, options.limit)
    subject = _coerce(candidate, CandidateProfile) or candidate

    ranked = [RankedJob(job=job, matching=score(subject, job, lexicon)) for job in pool]
    ranked = [
        entry for entry in ranked
        if entry.matching.score >= options.min_score
        and _job_passes_facets(entry.job, options)
    ]
    ranked.sort(key=lambda entry: entry.matching.score, reverse=True)

    logger.debug("Ranked %d of %d jobs for candidate", len(ranked), len(pool))
    return ranked


def rank_candidates_for_job(
    job: JobPosting | Mapping[str, Any],
    candidates: Iterable[CandidateProfile | Mapping[str, Any]],
    options: RankOptions | None = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> list[RankedCandidate]:
    """Score every candidate for one job, best match first.

    Facets apply to the candidate: ``industry`` is looked up in the
    title, bio and skills, ``location`` in the city and country.
    """
    options = options or RankOptions()
    pool = _bounded(candidates, options.limit)
    subject = _coerce(job, JobPosting) or job

    ranked = [
        RankedCandidate(candidate=candidate, matching=score(candidate, subject, lexicon))
        for candidate in pool
    ]
    ranked = [
        entry for entry in ranked
        if entry.matching.score >= options.min_score
        and _candidate_passes_facets(entry.candidate, options)
    ]
    ranked.sort(key=lambda entry: entry.matching.score, reverse=True)

    logger.debug("Ranked %d of %d candidates for job", len(ranked), len(pool))
    return ranked
