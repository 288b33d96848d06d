"""The seven dimension scorers.

Each ``*_match`` function takes only the fields it needs and returns an
integer 0-100. Missing inputs always give 0, never a neutral midpoint:
an incomplete profile should rank below a complete one.

``DIMENSIONS`` wraps them behind a common ``(candidate, job, lexicon)``
signature, in the order the aggregator sums them.
"""

import math
from typing import Callable, NamedTuple, Sequence

from linkup_matching.models.profiles import CandidateProfile, JobPosting
from linkup_matching.services.lexicon import DEFAULT_LEXICON, Lexicon

# Tunable constants
SHARED_WORDS_CEILING = 80  # word overlap never reaches the exact-match band
SEMANTIC_GROUP_SCORE = 70
INDUSTRY_ONLY_SCORE = 10  # right sector, no declared keyword
REMOTE_SCORE = 90
CITY_SCORE = 85
COUNTRY_SCORE = 70
AVAILABLE_SCORE = 90
FAR_SCORE = 10

# |level difference| -> score
EXPERIENCE_GAP_SCORES = {0: 100, 1: 80, 2: 60, 3: 40}

# (max % gap from expected salary, score)
SALARY_GAP_SCORES = ((10, 100), (20, 80), (30, 60), (50, 40))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


def skills_match(
    skills: Sequence[str],
    job_title: str | None,
    job_description: str | None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    """Share of the candidate's recognized skills that the job mentions.

    A skill is recognized when it overlaps a vocabulary term (either one
    contains the other). It matches when the job title or description
    contains it, or contains a vocabulary term that contains it.
    """
    if not skills:
        return 0

    job_blob = f"{job_title or ''} {job_description or ''}".lower()
    vocabulary = lexicon.skill_vocabulary

    relevant = 0
    matched = 0
    for skill in skills:
        term = skill.lower().strip()
        if not term:
            continue
        if not any(term in known or known in term for known in vocabulary):
            continue

        relevant += 1
        if term in job_blob or any(
            term in known and known in job_blob for known in vocabulary
        ):
            matched += 1

    if relevant == 0:
        return 0
    return round_half_up(matched / relevant * 100)


def title_match(
    candidate_title: str | None,
    candidate_bio: str | None,
    job_title: str | None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    """Compare the candidate's title and bio with the job title.

    Containment either way is a perfect match. Otherwise the share of
    significant shared words scores up to 80, and failing that a shared
    job family (see ``Lexicon.semantic_groups``) scores 70.
    """
    if _blank(job_title):
        return 0

    user_text = f"{candidate_title or ''} {candidate_bio or ''}".lower().strip()
    if not user_text:
        return 0

    title = job_title.lower().strip()
    if title in user_text or user_text in title:
        return 100

    user_words = [w for w in user_text.split() if len(w) > 2]
    job_words = [w for w in title.split() if len(w) > 2]
    job_vocab = set(job_words)

    shared = [
        w for w in user_words
        if w in job_vocab and len(w) > 3 and w not in lexicon.title_stop_words
    ]
    if shared:
        ratio = len(shared) / max(len(user_words), len(job_words))
        return round_half_up(ratio * SHARED_WORDS_CEILING)

    for keywords in lexicon.semantic_groups.values():
        if any(k in user_text for k in keywords) and any(k in title for k in keywords):
            return SEMANTIC_GROUP_SCORE

    return 0


def industry_match(
    profile_text: str,
    industry: str | None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    """Coverage of the job sector's keywords by the candidate profile text."""
    if _blank(industry):
        return 0

    sector = industry.lower().strip()
    for name, keywords in lexicon.industry_keywords.items():
        if name in sector or sector in name:
            hits = sum(1 for k in keywords if k in profile_text)
            if hits == 0:
                return INDUSTRY_ONLY_SCORE
            return round_half_up(hits / len(keywords) * 100)

    return 0


def location_match(
    city: str | None,
    country: str | None,
    job_location: str | None,
    remote_mode: str | None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    if remote_mode:
        mode = remote_mode.lower()
        if any(k in mode for k in lexicon.remote_keywords):
            return REMOTE_SCORE

    user_city = (city or "").lower().strip()
    user_country = (country or "").lower().strip()
    if not user_city and not user_country:
        return 0
    if _blank(job_location):
        return 0

    user_location = f"{user_city} {user_country}".strip()
    place = job_location.lower().strip()

    if user_location in place or place in user_location:
        return 100
    if user_city and user_city in place:
        return CITY_SCORE
    if user_country and user_country in place:
        return COUNTRY_SCORE

    if user_country:
        for region in lexicon.regions:
            if not any(member in place for member in region.members):
                continue
            # a member country counts too, not only a country string naming the region
            if region.name in user_country or user_country in region.members:
                return region.score

    return 0


def experience_match(
    candidate_level: str | None,
    required_level: str | None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    if _blank(candidate_level) or _blank(required_level):
        return 0

    levels = lexicon.experience_levels
    default = lexicon.default_experience_level
    user_rank = levels.get(candidate_level.lower().strip(), default)
    job_rank = levels.get(required_level.lower().strip(), default)

    return EXPERIENCE_GAP_SCORES.get(abs(user_rank - job_rank), FAR_SCORE)


def contract_match(
    available: bool | None,
    contract_type: str | None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    if _blank(contract_type):
        return 0
    if available:
        return AVAILABLE_SCORE

    kind = contract_type.lower()
    for keyword, score in lexicon.contract_scores:
        if keyword in kind:
            return score
    return 0


def salary_match(
    candidate_level: str | None,
    salary_min: int | None,
    salary_max: int | None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    """Closeness of the offered salary to the average for the candidate's level."""
    if not salary_min and not salary_max:
        return 0

    expected = lexicon.average_salaries.get(
        (candidate_level or "").lower().strip(), lexicon.default_salary
    )
    offered = salary_max or salary_min
    gap_pct = abs(expected - offered) / expected * 100

    for ceiling, score in SALARY_GAP_SCORES:
        if gap_pct <= ceiling:
            return score
    return FAR_SCORE


# ---------------------------------------------------------------------------
# Common (candidate, job, lexicon) -> int interface
# ---------------------------------------------------------------------------


def score_skills(candidate: CandidateProfile, job: JobPosting, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    return skills_match(candidate.skills, job.title, job.description, lexicon)


def score_title(candidate: CandidateProfile, job: JobPosting, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    return title_match(candidate.job_title, candidate.bio, job.title, lexicon)


def score_industry(candidate: CandidateProfile, job: JobPosting, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    return industry_match(candidate.profile_text(), job.industry, lexicon)


def score_location(candidate: CandidateProfile, job: JobPosting, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    return location_match(
        candidate.city, candidate.country, job.location, job.remote_mode, lexicon
    )


def score_experience(candidate: CandidateProfile, job: JobPosting, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    return experience_match(candidate.experience_level, job.experience_required, lexicon)


def score_contract(candidate: CandidateProfile, job: JobPosting, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    return contract_match(candidate.available_immediately, job.contract_type, lexicon)


def score_salary(candidate: CandidateProfile, job: JobPosting, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    return salary_match(
        candidate.experience_level, job.salary_min, job.salary_max, lexicon
    )


class Dimension(NamedTuple):
    name: str
    scorer: Callable[[CandidateProfile, JobPosting, Lexicon], int]


DIMENSIONS: tuple[Dimension, ...] = (
    Dimension("skills", score_skills),
    Dimension("title", score_title),
    Dimension("industry", score_industry),
    Dimension("location", score_location),
    Dimension("experience", score_experience),
    Dimension("contract", score_contract),
    Dimension("salary", score_salary),
)
