"""Keyword tables driving the heuristic candidate-job matching.

Everything here is data. The tables are bundled into a frozen
:class:`Lexicon` so scorers receive them as an explicit argument
instead of reaching for module globals; ``DEFAULT_LEXICON`` is built
once at import and shared read-only.

Vocabulary is mostly French with English synonyms, matching the
profiles and postings the marketplace stores.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DomainCluster:
    """A professional domain and the keywords that clash with it."""

    name: str
    keywords: tuple[str, ...]
    incompatible_with: tuple[str, ...]


@dataclass(frozen=True)
class Region:
    """A geographic region and the place names that belong to it.

    A job located in one of ``members`` scores ``score`` for a candidate
    whose country names the region or is itself a member.
    """

    name: str
    members: tuple[str, ...]
    score: int


# ---------------------------------------------------------------------------
# Skills vocabulary
# ---------------------------------------------------------------------------

SKILL_VOCABULARY: tuple[str, ...] = (
    # Development
    "javascript", "react", "node.js", "python", "java", "php", "sql", "mongodb",
    "html", "css", "typescript", "vue.js", "angular", "express", "django",
    # Tooling & infrastructure
    "git", "docker", "kubernetes", "aws", "azure", "gcp", "linux", "windows",
    # Design
    "figma", "photoshop", "illustrator", "sketch", "adobe", "design",
    # Marketing
    "marketing", "seo", "sem", "analytics", "google analytics", "facebook",
    "salesforce", "hubspot", "mailchimp", "wordpress", "shopify",
    # Methodologies
    "project management", "agile", "scrum", "kanban", "jira", "trello",
    # Office
    "excel", "powerpoint", "word", "office", "google suite",
    # Soft skills
    "communication", "leadership", "teamwork", "problem solving",
    # Data
    "data analysis", "statistics", "machine learning", "ai", "blockchain",
    # Health
    "medical", "healthcare", "clinical", "pharmaceutical", "diagnostic",
    # Legal
    "legal", "law", "juridique", "droit", "contract",
    # Finance
    "finance", "accounting", "banking", "investment", "trading",
)


# ---------------------------------------------------------------------------
# Incompatible domains (evaluated in this order, first match wins)
# ---------------------------------------------------------------------------

_MEDICAL_TERMS = (
    "médecin", "docteur", "médecine", "medical", "healthcare", "hospital",
)
_TECH_TERMS = (
    "développeur", "developer", "programming", "coding",
)

DOMAIN_CLUSTERS: tuple[DomainCluster, ...] = (
    DomainCluster(
        name="medical",
        keywords=_MEDICAL_TERMS + (
            "clinique", "patient", "diagnostic", "traitement", "pharmacie",
            "pharmaceutique", "chirurgie", "infirmier", "infirmière",
        ),
        incompatible_with=(
            "tech", "informatique", "développement", "programming", "developer",
            "coding", "software", "web", "application", "it", "technologie",
            "ingénieur logiciel",
        ),
    ),
    DomainCluster(
        name="tech",
        keywords=(
            "développeur", "developer", "programming", "coding", "software", "web",
            "application", "it", "technologie", "ingénieur logiciel",
            "javascript", "python", "java", "react", "node",
        ),
        incompatible_with=_MEDICAL_TERMS + (
            "pharmacie", "pharmaceutique", "chirurgie", "infirmier", "infirmière",
        ),
    ),
    DomainCluster(
        name="legal",
        keywords=(
            "avocat", "juriste", "droit", "legal", "lawyer", "attorney",
            "justice", "tribunal", "juridique",
        ),
        incompatible_with=(
            "médecin", "docteur", "médecine", "medical", "healthcare",
        ) + _TECH_TERMS,
    ),
    DomainCluster(
        name="education",
        keywords=(
            "professeur", "enseignant", "teacher", "education", "enseignement",
            "école", "université", "académique",
        ),
        incompatible_with=_TECH_TERMS + ("médecin", "docteur", "médecine"),
    ),
)


# ---------------------------------------------------------------------------
# Title matching
# ---------------------------------------------------------------------------

TITLE_STOP_WORDS: frozenset[str] = frozenset({
    "de", "le", "la", "les", "un", "une", "du", "des", "et", "ou",
    "pour", "avec", "sur", "dans",
})

# Title synonyms grouped by job family
SEMANTIC_GROUPS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "développement": (
        "développeur", "dev", "programmer", "developer", "ingénieur logiciel",
        "engineer", "software", "coding", "programmation",
    ),
    "design": ("designer", "design", "ux", "ui", "graphiste", "graphic", "creative"),
    "marketing": (
        "marketing", "marketeur", "communication", "brand", "publicité", "advertising",
    ),
    "vente": ("commercial", "sales", "business", "account", "business development"),
    "management": ("manager", "lead", "chef", "directeur", "head", "director"),
    "medical": (
        "médecin", "docteur", "medical", "healthcare", "clinique", "hospital", "médecine",
    ),
    "legal": ("avocat", "juriste", "legal", "lawyer", "droit", "juridique"),
    "finance": ("finance", "comptable", "accounting", "banking", "investment", "trading"),
    "education": ("professeur", "enseignant", "teacher", "education", "enseignement"),
})


# ---------------------------------------------------------------------------
# Industry keywords
# ---------------------------------------------------------------------------

_DEV_KEYWORDS = (
    "javascript", "python", "java", "react", "node.js", "programming",
    "development", "développeur", "developer", "software", "web",
    "application", "coding",
)
_HEALTH_KEYWORDS = (
    "medical", "health", "pharmaceutical", "clinical", "research", "médecin",
    "docteur", "médecine", "healthcare", "hospital", "clinique",
)
_EDUCATION_KEYWORDS = (
    "teaching", "education", "training", "learning", "academic", "professeur",
    "enseignant", "enseignement",
)
_LEGAL_KEYWORDS = (
    "legal", "law", "juridique", "droit", "avocat", "juriste", "lawyer", "contract",
)

# Ordered: the first entry whose name overlaps the posting's industry wins
INDUSTRY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "tech": _DEV_KEYWORDS,
    "informatique": _DEV_KEYWORDS + ("it", "technologie"),
    "design": (
        "figma", "photoshop", "illustrator", "design", "ux", "ui", "graphic",
        "graphiste", "creative",
    ),
    "marketing": (
        "marketing", "seo", "analytics", "social media", "advertising", "brand",
        "communication", "publicité",
    ),
    "finance": (
        "finance", "accounting", "banking", "investment", "trading", "comptable",
        "financier",
    ),
    "healthcare": _HEALTH_KEYWORDS,
    "medical": _HEALTH_KEYWORDS,
    "éducation": _EDUCATION_KEYWORDS,
    "education": _EDUCATION_KEYWORDS,
    "legal": _LEGAL_KEYWORDS,
    "juridique": _LEGAL_KEYWORDS,
})


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

REMOTE_KEYWORDS: tuple[str, ...] = ("remote", "télétravail", "hybride")

REGIONS: tuple[Region, ...] = (
    Region(
        name="france",
        members=("paris", "lyon", "marseille", "toulouse", "nantes", "lille", "strasbourg"),
        score=60,
    ),
    Region(
        name="europe",
        members=("france", "allemagne", "espagne", "italie", "belgique", "suisse"),
        score=40,
    ),
)


# ---------------------------------------------------------------------------
# Experience, contract and salary
# ---------------------------------------------------------------------------

EXPERIENCE_LEVELS: Mapping[str, int] = MappingProxyType({
    "débutant": 1,
    "junior": 2,
    "intermédiaire": 3,
    "senior": 4,
    "expert": 5,
    "lead": 6,
    "manager": 7,
})

# Checked in order against the lowercased contract type
CONTRACT_SCORES: tuple[tuple[str, int], ...] = (
    ("cdi", 80),
    ("cdd", 70),
    ("stage", 60),
    ("freelance", 50),
)

# Average annual gross salary per level (France, EUR)
AVERAGE_SALARIES: Mapping[str, int] = MappingProxyType({
    "débutant": 30000,
    "junior": 35000,
    "intermédiaire": 45000,
    "senior": 60000,
    "expert": 80000,
    "lead": 90000,
    "manager": 100000,
})


@dataclass(frozen=True)
class Lexicon:
    """Read-only bundle of every table the scorers consult."""

    skill_vocabulary: tuple[str, ...] = SKILL_VOCABULARY
    domain_clusters: tuple[DomainCluster, ...] = DOMAIN_CLUSTERS
    title_stop_words: frozenset[str] = TITLE_STOP_WORDS
    semantic_groups: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: SEMANTIC_GROUPS)
    industry_keywords: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: INDUSTRY_KEYWORDS)
    remote_keywords: tuple[str, ...] = REMOTE_KEYWORDS
    regions: tuple[Region, ...] = REGIONS
    experience_levels: Mapping[str, int] = field(default_factory=lambda: EXPERIENCE_LEVELS)
    default_experience_level: int = 3
    contract_scores: tuple[tuple[str, int], ...] = CONTRACT_SCORES
    average_salaries: Mapping[str, int] = field(default_factory=lambda: AVERAGE_SALARIES)
    default_salary: int = 45000


DEFAULT_LEXICON = Lexicon()
