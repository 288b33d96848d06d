"""Summary statistics over a ranked job list for one candidate."""

from collections import Counter
from typing import Any, Mapping, Sequence

from linkup_matching.models.matching import (
    IndustryCount,
    MatchInsights,
    RankedCandidate,
    RankedJob,
    ScoreDistribution,
    TopJob,
)
from linkup_matching.services.dimensions import round_half_up

TOP_N = 5
LOW_AVERAGE_THRESHOLD = 60
LOW_LOCATION_THRESHOLD = 50
UNKNOWN_INDUSTRY = "Other"


def _get(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def average_score(ranked: Sequence[RankedJob | RankedCandidate]) -> int:
    if not ranked:
        return 0
    return round_half_up(sum(r.matching.score for r in ranked) / len(ranked))


def list_meta(ranked: Sequence[RankedJob | RankedCandidate]) -> dict[str, int]:
    """Totals reported alongside a ranked listing."""
    return {"total": len(ranked), "average_score": average_score(ranked)}


def _industry_of(job: Any) -> str:
    industry = _get(job, "industry")
    if not industry:
        industry = _get(_get(job, "company") or {}, "industry")
    return industry or UNKNOWN_INDUSTRY


def _top_job(entry: RankedJob) -> TopJob:
    job = entry.job
    company = _get(job, "company")
    job_id = _get(job, "id_job_offer")
    if job_id is None:
        job_id = _get(job, "id")
    return TopJob(
        id=job_id,
        title=_get(job, "title"),
        company=_get(company, "name") if company else None,
        score=entry.matching.score,
        recommendation=entry.matching.recommendation,
    )


def summarize_matches(ranked: Sequence[RankedJob]) -> MatchInsights:
    """Build insights from jobs already ranked best-first.

    Recommendations are advice for the candidate: complete the profile
    when the average is low, focus on the dominant sector, and consider
    remote work when some jobs score poorly on location.
    """
    if not ranked:
        return MatchInsights()

    average = average_score(ranked)

    # Counter preserves first-seen order among equal counts
    industries = Counter(_industry_of(entry.job) for entry in ranked)
    top_industries = [
        IndustryCount(industry=name, count=count)
        for name, count in industries.most_common(TOP_N)
    ]

    recommendations: list[str] = []
    if average < LOW_AVERAGE_THRESHOLD:
        recommendations.append("Complete your profile with more skills")
    if top_industries:
        recommendations.append(
            f"Focus on offers in the {top_industries[0].industry} sector"
        )
    if any(entry.matching.details.location < LOW_LOCATION_THRESHOLD for entry in ranked):
        recommendations.append("Consider remote work to widen your opportunities")

    scores = [entry.matching.score for entry in ranked]
    distribution = ScoreDistribution(
        excellent=sum(1 for s in scores if s >= 90),
        good=sum(1 for s in scores if 70 <= s < 90),
        average=sum(1 for s in scores if 50 <= s < 70),
        poor=sum(1 for s in scores if s < 50),
    )

    return MatchInsights(
        total_jobs=len(ranked),
        average_score=average,
        top_jobs=[_top_job(entry) for entry in ranked[:TOP_N]],
        top_industries=top_industries,
        recommendations=recommendations,
        score_distribution=distribution,
    )
