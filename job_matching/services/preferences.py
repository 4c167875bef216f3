"""
Preference Aligner
Compares the candidate's job-type and work-mode preferences with the posting.

An axis only counts when the candidate stated a preference for it; a missing
preference is never a mismatch. With no stated preference at all the score is
neutral.
"""

from typing import List, Optional

from job_matching.models.candidate import JobPreferences
from job_matching.models.config import (
    DEFAULT_NEUTRAL_PREFERENCE_SCORE,
    DEFAULT_PREFERENCE_AXIS_POINTS,
    DEFAULT_PREFERENCE_FLAG_THRESHOLD,
)
from job_matching.models.job import Job
from job_matching.models.match_result import PreferencesMatch


def _stated(preferences: List[str]) -> List[str]:
    return [p.strip().lower() for p in preferences if p and p.strip()]


def axis_matches(preferred: List[str], job_value: Optional[str]) -> bool:
    """True when the job's value contains any preferred value (case-insensitive)."""
    value = (job_value or "").lower()
    return any(p in value for p in preferred)


def align_preferences(
    preferences: Optional[JobPreferences],
    job: Job,
    neutral_score: float = DEFAULT_NEUTRAL_PREFERENCE_SCORE,
    axis_points: float = DEFAULT_PREFERENCE_AXIS_POINTS,
    flag_threshold: float = DEFAULT_PREFERENCE_FLAG_THRESHOLD,
    per_axis_flags: bool = False,
) -> PreferencesMatch:
    preferences = preferences or JobPreferences()
    axes = [
        (_stated(preferences.preferred_job_types), job.job_type),
        (_stated(preferences.preferred_work_modes), job.work_mode),
    ]

    points = 0.0
    checked = 0
    axis_flags: List[bool] = []
    for preferred, job_value in axes:
        if not preferred:
            axis_flags.append(True)
            continue
        checked += 1
        matched = axis_matches(preferred, job_value)
        axis_flags.append(matched)
        if matched:
            points += axis_points

    score = points / checked if checked else neutral_score

    if per_axis_flags:
        job_type_match, work_mode_match = axis_flags
    else:
        # Both flags follow the combined score
        job_type_match = work_mode_match = score >= flag_threshold

    return PreferencesMatch(
        job_type_match=job_type_match,
        work_mode_match=work_mode_match,
        score=score,
    )
