"""Read-only snapshots of the two records a match is computed from.

Both models accept the column names used by the storage layer
(``job_title``, ``bio_pro``, ``remote``, ``experience`` ...) as well as
their camelCase forms, and keep any unknown keys untouched.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

_SNAPSHOT_CONFIG = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class CandidateProfile(BaseModel):
    """What the engine reads from a candidate account."""

    model_config = _SNAPSHOT_CONFIG

    skills: list[str] = []
    job_title: str | None = Field(
        default=None, validation_alias=AliasChoices("job_title", "jobTitle")
    )
    bio: str | None = Field(
        default=None, validation_alias=AliasChoices("bio", "bio_pro", "bioText")
    )
    city: str | None = None
    country: str | None = None
    experience_level: str | None = Field(
        default=None, validation_alias=AliasChoices("experience_level", "experienceLevel")
    )
    available_immediately: bool | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "available_immediately", "availability", "availableImmediately"
        ),
    )

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [s.strip() for s in value.split(",") if s.strip()]
        return value

    def profile_text(self) -> str:
        """Title, bio and skills as one lowercase blob."""
        return " ".join(
            (self.job_title or "", self.bio or "", " ".join(self.skills))
        ).lower()


class JobPosting(BaseModel):
    """What the engine reads from a job offer."""

    model_config = _SNAPSHOT_CONFIG

    title: str | None = None
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    remote_mode: str | None = Field(
        default=None, validation_alias=AliasChoices("remote_mode", "remote", "remoteMode")
    )
    experience_required: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "experience_required", "experience", "experienceRequired"
        ),
    )
    contract_type: str | None = Field(
        default=None, validation_alias=AliasChoices("contract_type", "contractType")
    )
    salary_min: int | None = Field(
        default=None, validation_alias=AliasChoices("salary_min", "salaryMin")
    )
    salary_max: int | None = Field(
        default=None, validation_alias=AliasChoices("salary_max", "salaryMax")
    )

    @field_validator("remote_mode", mode="before")
    @classmethod
    def _remote_flag(cls, value):
        # storage keeps ``remote`` as a boolean column
        if value is True:
            return "remote"
        if value is False:
            return None
        return value

    def posting_text(self) -> str:
        """Title, description and industry as one lowercase blob."""
        return " ".join(
            (self.title or "", self.description or "", self.industry or "")
        ).lower()
