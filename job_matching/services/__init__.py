# services package
"""Matching stages used by the MatchingAgent."""

from job_matching.services.skill_aliases import SkillAliasError, SkillAliasTable
from job_matching.services.skill_matcher import SkillMatcher
from job_matching.services.experience import compare_experience
from job_matching.services.preferences import align_preferences
from job_matching.services.explainer import build_reasons

__all__ = [
    "SkillAliasError",
    "SkillAliasTable",
    "SkillMatcher",
    "compare_experience",
    "align_preferences",
    "build_reasons",
]
