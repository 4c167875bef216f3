# models package
"""Data models for the job matching engine."""

from job_matching.models.skill import Skill
from job_matching.models.candidate import CandidateProfile, Education, JobPreferences
from job_matching.models.job import Job
from job_matching.models.match_result import (
    ExperienceMatch,
    JobMatchResult,
    MatchQuality,
    MissingSkill,
    PreferencesMatch,
    SkillImportance,
    SkillMatch,
    SkillsMatch,
)
from job_matching.models.config import MatchingConfig, MatchingConfigError

__all__ = [
    "Skill",
    "CandidateProfile",
    "Education",
    "JobPreferences",
    "Job",
    "ExperienceMatch",
    "JobMatchResult",
    "MatchQuality",
    "MissingSkill",
    "PreferencesMatch",
    "SkillImportance",
    "SkillMatch",
    "SkillsMatch",
    "MatchingConfig",
    "MatchingConfigError",
]
