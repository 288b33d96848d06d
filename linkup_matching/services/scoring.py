"""Aggregator: one candidate-job pair -> ScoreBreakdown.

Flow:
    candidate + job
      ├─ check_incompatibility()      → fired?  IncompatibleOutcome (score <= 15)
      └─ DIMENSIONS (7 scorers)       → ScoredOutcome
                       ↓
         weighted sum, clamp, recommendation → ScoreBreakdown

``score()`` is the call boundary for batch callers: it never raises.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from linkup_matching.models.matching import MATCH_WEIGHTS, MatchDetails, ScoreBreakdown
from linkup_matching.models.profiles import CandidateProfile, JobPosting
from linkup_matching.services.dimensions import DIMENSIONS, round_half_up
from linkup_matching.services.incompatibility import check_incompatibility
from linkup_matching.services.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

INCOMPATIBLE_CEILING = 15

# (minimum total, label), highest first
RECOMMENDATION_THRESHOLDS = (
    (90, "perfect match"),
    (80, "excellent"),
    (70, "good"),
    (60, "correct"),
    (50, "average"),
    (40, "weak"),
)
LOWEST_RECOMMENDATION = "very weak"


@dataclass(frozen=True)
class IncompatibleOutcome:
    reason: str
    total: int


@dataclass(frozen=True)
class ScoredOutcome:
    sub_scores: Mapping[str, int]


MatchOutcome = Union[IncompatibleOutcome, ScoredOutcome]


def get_recommendation(total: int) -> str:
    for threshold, label in RECOMMENDATION_THRESHOLDS:
        if total >= threshold:
            return label
    return LOWEST_RECOMMENDATION


def weighted_total(sub_scores: Mapping[str, int]) -> int:
    """Weighted sum of the sub-scores, rounded and clamped to 0-100."""
    raw = 0.0
    for name, weight in MATCH_WEIGHTS.items():
        raw += sub_scores.get(name, 0) * weight
    return min(100, max(0, round_half_up(raw)))


def evaluate(
    candidate: CandidateProfile,
    job: JobPosting,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> MatchOutcome:
    """Run the domain gate, then every dimension scorer if it let the pair through."""
    gate = check_incompatibility(candidate, job, lexicon)
    if gate.fired:
        logger.debug("Domain gate fired: %s", gate.reason)
        return IncompatibleOutcome(
            reason=gate.reason,
            total=min(INCOMPATIBLE_CEILING, gate.penalty),
        )

    sub_scores = {
        dimension.name: min(100, max(0, dimension.scorer(candidate, job, lexicon)))
        for dimension in DIMENSIONS
    }
    return ScoredOutcome(sub_scores=sub_scores)


def to_breakdown(outcome: MatchOutcome) -> ScoreBreakdown:
    if isinstance(outcome, IncompatibleOutcome):
        return ScoreBreakdown(
            score=outcome.total,
            details=MatchDetails(incompatibility=outcome.reason),
            recommendation=get_recommendation(outcome.total),
        )

    total = weighted_total(outcome.sub_scores)
    return ScoreBreakdown(
        score=total,
        details=MatchDetails(**outcome.sub_scores),
        recommendation=get_recommendation(total),
    )


def _as_candidate(record: Any) -> CandidateProfile:
    if isinstance(record, CandidateProfile):
        return record
    return CandidateProfile.model_validate(record)


def _as_job(record: Any) -> JobPosting:
    if isinstance(record, JobPosting):
        return record
    return JobPosting.model_validate(record)


def score(
    candidate: CandidateProfile | Mapping[str, Any],
    job: JobPosting | Mapping[str, Any],
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> ScoreBreakdown:
    """Score one candidate against one job.

    Accepts models or plain records as returned by the storage layer.
    A record that cannot be read or scored yields a zero breakdown with
    an empty recommendation instead of an exception.
    """
    try:
        breakdown = to_breakdown(evaluate(_as_candidate(candidate), _as_job(job), lexicon))
    except Exception as e:
        logger.warning("Matching score failed, returning zero score: %s", e)
        return ScoreBreakdown(score=0, recommendation="")

    logger.debug("Matching score %d (%s)", breakdown.score, breakdown.recommendation)
    return breakdown
