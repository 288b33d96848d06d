"""Candidate-job compatibility scoring for the LinkUp marketplace."""

from linkup_matching.services.insights import summarize_matches
from linkup_matching.services.ranking import rank_candidates_for_job, rank_jobs_for_candidate
from linkup_matching.services.scoring import score

__all__ = [
    "rank_candidates_for_job",
    "rank_jobs_for_candidate",
    "score",
    "summarize_matches",
]
