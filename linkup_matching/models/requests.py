"""Request bodies for the matching endpoints.

Records are kept as plain mappings: the engine reads them itself so one
malformed record degrades to a zero score instead of rejecting the
whole request.
"""

from typing import Any

from pydantic import BaseModel, Field

Record = dict[str, Any]


class ScoreRequest(BaseModel):
    candidate: Record
    job: Record


class RankJobsRequest(BaseModel):
    candidate: Record
    jobs: list[Any] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=0, description="Jobs scored, defaults to settings")
    min_score: int = Field(default=0, ge=0, le=100)
    industry: str | None = None
    location: str | None = None


class RankCandidatesRequest(BaseModel):
    job: Record
    candidates: list[Any] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=0, description="Candidates scored, defaults to settings")
    min_score: int = Field(default=0, ge=0, le=100)
    industry: str | None = None
    location: str | None = None


class InsightsRequest(BaseModel):
    candidate: Record
    jobs: list[Any] = Field(default_factory=list)
