"""
Explainer
Short, ordered reasons shown next to the match percentage. Display only:
nothing here feeds back into scoring.
"""

from typing import List

from job_matching.models.match_result import ExperienceMatch, SkillsMatch
from job_matching.services.experience import FULL_CREDIT
from job_matching.services.logging_utils import format_limited

MAX_NAMED_MATCHED = 3
MAX_MISSING_LISTED = 3
NAMED_MISSING_WHEN_TRUNCATED = 2


def build_reasons(
    skills: SkillsMatch,
    experience: ExperienceMatch,
    shortfall_threshold: float = 70.0,
) -> List[str]:
    reasons: List[str] = []

    if skills.matched:
        reasons.append(f"Matches {format_limited(skills.matched, MAX_NAMED_MATCHED)}")

    if skills.missing:
        shown = (
            len(skills.missing)
            if len(skills.missing) <= MAX_MISSING_LISTED
            else NAMED_MISSING_WHEN_TRUNCATED
        )
        reasons.append(f"Missing {format_limited(skills.missing, shown)}")

    if experience.score >= FULL_CREDIT:
        reasons.append(f"Experience level matches ({experience.candidate_level})")
    elif experience.score < shortfall_threshold:
        reasons.append(f"Requires {experience.required_level} level experience")

    return reasons
