"""Domain incompatibility gate.

Vetoes a pair before any dimension is scored when the candidate and the
job sit in professional domains that exclude each other (a physician
applying to a software job, a developer to a legal one...).
"""

from dataclasses import dataclass

from linkup_matching.models.profiles import CandidateProfile, JobPosting
from linkup_matching.services.lexicon import DEFAULT_LEXICON, Lexicon

INCOMPATIBILITY_PENALTY = 5


@dataclass(frozen=True)
class IncompatibilityResult:
    fired: bool
    reason: str = ""
    penalty: int = 0


NO_INCOMPATIBILITY = IncompatibilityResult(fired=False)


def _mentions_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def check_incompatibility(
    candidate: CandidateProfile,
    job: JobPosting,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> IncompatibilityResult:
    """Return the first domain clash between candidate and job, if any."""
    user_blob = candidate.profile_text()
    job_blob = job.posting_text()

    for cluster in lexicon.domain_clusters:
        if _mentions_any(user_blob, cluster.keywords) and _mentions_any(
            job_blob, cluster.incompatible_with
        ):
            return IncompatibilityResult(
                fired=True,
                reason=(
                    f"candidate profile in the {cluster.name} domain is "
                    f"incompatible with the job's sector"
                ),
                penalty=INCOMPATIBILITY_PENALTY,
            )

        if _mentions_any(job_blob, cluster.keywords) and _mentions_any(
            user_blob, cluster.incompatible_with
        ):
            return IncompatibilityResult(
                fired=True,
                reason=(
                    f"job in the {cluster.name} domain is incompatible "
                    f"with the candidate profile"
                ),
                penalty=INCOMPATIBILITY_PENALTY,
            )

    return NO_INCOMPATIBILITY
