"""
Experience Comparator
Puts candidate years and the job's declared level on one ordinal scale and
scores the gap. Under-qualified candidates get partial credit capped below
full marks, so they never show as a full match on this axis.
"""

from typing import Dict, Optional

from job_matching.models.config import EXPERIENCE_MATCH_THRESHOLD, EXPERIENCE_PARTIAL_CREDIT_CEILING
from job_matching.models.match_result import ExperienceMatch

EXPERIENCE_LEVELS: Dict[str, int] = {
    "entry": 1,
    "junior": 1,
    "mid": 2,
    "intermediate": 2,
    "senior": 3,
    "lead": 4,
    "principal": 5,
    "expert": 5,
}
DEFAULT_LEVEL = "entry"
FLOOR_ORDINAL = 1

# (minimum years, level), checked top-down
YEARS_TO_LEVEL = (
    (7, "senior"),
    (3, "mid"),
    (1, "junior"),
)

FULL_CREDIT = 100.0


def level_from_years(years: Optional[float]) -> str:
    years = years or 0
    for min_years, level in YEARS_TO_LEVEL:
        if years >= min_years:
            return level
    return DEFAULT_LEVEL


def level_ordinal(level: Optional[str]) -> int:
    """Ordinal for a free-text level; unknown text sits on the entry floor."""
    return EXPERIENCE_LEVELS.get((level or "").strip().lower(), FLOOR_ORDINAL)


def compare_experience(
    years_of_experience: Optional[float],
    experience_level: Optional[str],
    partial_credit_ceiling: float = EXPERIENCE_PARTIAL_CREDIT_CEILING,
    match_threshold: float = EXPERIENCE_MATCH_THRESHOLD,
) -> ExperienceMatch:
    candidate_level = level_from_years(years_of_experience)
    required_level = (experience_level or "").strip().lower() or DEFAULT_LEVEL

    candidate_ordinal = level_ordinal(candidate_level)
    required_ordinal = level_ordinal(required_level)

    if candidate_ordinal >= required_ordinal:
        score = FULL_CREDIT
    else:
        score = (candidate_ordinal / required_ordinal) * partial_credit_ceiling

    return ExperienceMatch(
        is_match=score >= match_threshold,
        candidate_level=candidate_level,
        required_level=required_level,
        score=score,
    )
