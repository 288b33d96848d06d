from pydantic import BaseModel

from linkup_matching.models.matching import (
    MatchInsights,
    RankedCandidate,
    RankedJob,
    RankOptions,
    ScoreBreakdown,
)


class ListingMeta(BaseModel):
    total: int = 0
    average_score: int = 0
    filters: RankOptions = RankOptions()


class ScoreData(BaseModel):
    matching: ScoreBreakdown


class ScoreResponse(BaseModel):
    success: bool = True
    data: ScoreData


class JobListingResponse(BaseModel):
    success: bool = True
    data: list[RankedJob] = []
    meta: ListingMeta = ListingMeta()


class CandidateListingResponse(BaseModel):
    success: bool = True
    data: list[RankedCandidate] = []
    meta: ListingMeta = ListingMeta()


class InsightsResponse(BaseModel):
    success: bool = True
    data: MatchInsights = MatchInsights()
