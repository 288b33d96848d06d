"""Pydantic contracts for the matching engine."""

from linkup_matching.models.matching import (
    MATCH_WEIGHTS,
    MatchDetails,
    MatchInsights,
    RankedCandidate,
    RankedJob,
    RankOptions,
    ScoreBreakdown,
)
from linkup_matching.models.profiles import CandidateProfile, JobPosting

__all__ = [
    "MATCH_WEIGHTS",
    "CandidateProfile",
    "JobPosting",
    "MatchDetails",
    "MatchInsights",
    "RankedCandidate",
    "RankedJob",
    "RankOptions",
    "ScoreBreakdown",
]
