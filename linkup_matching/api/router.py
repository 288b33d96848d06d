from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from linkup_matching.config import settings
from linkup_matching.models.matching import RankOptions
from linkup_matching.models.requests import (
    InsightsRequest,
    RankCandidatesRequest,
    RankJobsRequest,
    ScoreRequest,
)
from linkup_matching.models.responses import (
    CandidateListingResponse,
    InsightsResponse,
    JobListingResponse,
    ListingMeta,
    ScoreData,
    ScoreResponse,
)
from linkup_matching.services import insights, ranking, scoring

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _check_batch(size: int) -> None:
    if size > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Too many records. Max batch size: {settings.max_batch_size}",
        )


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/matching/score", response_model=ScoreResponse, response_model_exclude_none=True)
@limiter.limit(settings.rate_limit)
async def score_pair(request: Request, body: ScoreRequest):
    matching = scoring.score(body.candidate, body.job)
    return ScoreResponse(data=ScoreData(matching=matching))


@router.post("/matching/jobs", response_model=JobListingResponse, response_model_exclude_none=True)
@limiter.limit(settings.rate_limit)
async def matching_jobs(request: Request, body: RankJobsRequest):
    _check_batch(len(body.jobs))
    options = RankOptions(
        limit=body.limit if body.limit is not None else settings.default_job_limit,
        min_score=body.min_score,
        industry=body.industry,
        location=body.location,
    )
    ranked = ranking.rank_jobs_for_candidate(body.candidate, body.jobs, options)
    return JobListingResponse(
        data=ranked,
        meta=ListingMeta(**insights.list_meta(ranked), filters=options),
    )


@router.post(
    "/matching/candidates",
    response_model=CandidateListingResponse,
    response_model_exclude_none=True,
)
@limiter.limit(settings.rate_limit)
async def matching_candidates(request: Request, body: RankCandidatesRequest):
    _check_batch(len(body.candidates))
    options = RankOptions(
        limit=body.limit if body.limit is not None else settings.default_candidate_limit,
        min_score=body.min_score,
        industry=body.industry,
        location=body.location,
    )
    ranked = ranking.rank_candidates_for_job(body.job, body.candidates, options)
    return CandidateListingResponse(
        data=ranked,
        meta=ListingMeta(**insights.list_meta(ranked), filters=options),
    )


@router.post("/matching/insights", response_model=InsightsResponse, response_model_exclude_none=True)
@limiter.limit(settings.rate_limit)
async def matching_insights(request: Request, body: InsightsRequest):
    _check_batch(len(body.jobs))
    ranked = ranking.rank_jobs_for_candidate(
        body.candidate, body.jobs, RankOptions(limit=settings.insights_job_limit)
    )
    return InsightsResponse(data=insights.summarize_matches(ranked))
