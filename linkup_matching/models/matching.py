"""Match results: per-pair score breakdowns, ranked lists and insights."""

from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field

# Dimension weights, in the order the weighted sum is accumulated
MATCH_WEIGHTS = MappingProxyType({
    "skills": 0.30,
    "title": 0.25,
    "industry": 0.20,
    "location": 0.10,
    "experience": 0.10,
    "contract": 0.03,
    "salary": 0.02,
})


class MatchDetails(BaseModel):
    """Per-dimension sub-scores, each 0-100."""
    skills: int = Field(default=0, ge=0, le=100)
    location: int = Field(default=0, ge=0, le=100)
    experience: int = Field(default=0, ge=0, le=100)
    title: int = Field(default=0, ge=0, le=100)
    industry: int = Field(default=0, ge=0, le=100)
    contract: int = Field(default=0, ge=0, le=100)
    salary: int = Field(default=0, ge=0, le=100)
    incompatibility: str | None = None  # set only when the domain gate fired


class ScoreBreakdown(BaseModel):
    """Compatibility of one candidate-job pair."""
    score: int = Field(default=0, ge=0, le=100)
    details: MatchDetails = MatchDetails()
    weights: dict[str, float] = Field(default_factory=lambda: dict(MATCH_WEIGHTS))
    recommendation: str = ""

    @property
    def total(self) -> int:
        return self.score


class RankOptions(BaseModel):
    limit: int | None = Field(default=None, ge=0)  # applied to the input, before scoring
    min_score: int = Field(default=0, ge=0, le=100)
    industry: str | None = None
    location: str | None = None


class RankedJob(BaseModel):
    job: Any
    matching: ScoreBreakdown


class RankedCandidate(BaseModel):
    candidate: Any
    matching: ScoreBreakdown


class TopJob(BaseModel):
    id: Any = None
    title: str | None = None
    company: str | None = None
    score: int = 0
    recommendation: str = ""


class IndustryCount(BaseModel):
    industry: str
    count: int


class ScoreDistribution(BaseModel):
    excellent: int = 0  # >= 90
    good: int = 0  # 70-89
    average: int = 0  # 50-69
    poor: int = 0  # < 50


class MatchInsights(BaseModel):
    """Summary of how one candidate fares across a set of jobs."""
    total_jobs: int = 0
    average_score: int = 0
    top_jobs: list[TopJob] = []
    top_industries: list[IndustryCount] = []
    recommendations: list[str] = []
    score_distribution: ScoreDistribution = ScoreDistribution()
