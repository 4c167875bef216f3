"""
Matching Agent
Computes the match between one candidate profile and one job posting.

Responsibilities:
- Normalises skills and partitions the job vocabulary (matched / missing)
- Compares experience level and job preferences
- Combines the three sub-scores with configurable weights
- Produces the reasons shown next to the score

The agent holds configuration only: match() is a pure function of its inputs,
so one instance can be shared across threads.
"""

import math
from typing import Any, Optional

from job_matching.models.candidate import CandidateProfile
from job_matching.models.config import MatchingConfig
from job_matching.models.job import Job
from job_matching.models.match_result import JobMatchResult
from job_matching.services.experience import compare_experience
from job_matching.services.explainer import build_reasons
from job_matching.services.logging_utils import format_limited, log_section, print_with_prefix
from job_matching.services.preferences import align_preferences
from job_matching.services.skill_aliases import SkillAliasTable
from job_matching.services.skill_matcher import MATCH_MODE_ALIAS, SkillMatcher
from job_matching.services.skill_normalizer import candidate_skills, job_skill_vocabulary


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class MatchingAgent:
    """
    Agent that scores a candidate against a job posting.

    MATCHING LOGIC:
    1. Skill vocabulary (explicit skills, else title/department keywords)
    2. Skill matching (substring or alias mode)
    3. Experience level comparison
    4. Preference alignment (job type, work mode)
    5. Weighted aggregate + reasons
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        alias_table: Optional[SkillAliasTable] = None,
        verbose: bool = False,
    ):
        self.config = config or MatchingConfig()
        self.verbose = verbose

        # Load the alias table up front so match() never touches the filesystem
        if self.config.skill_match_mode == MATCH_MODE_ALIAS and alias_table is None:
            alias_table = SkillAliasTable.from_csv(self.config.alias_csv_path, verbose=verbose)

        self.skill_matcher = SkillMatcher(
            mode=self.config.skill_match_mode,
            alias_table=alias_table,
            neutral_rate=self.config.neutral_skill_rate,
        )

    def match(self, candidate: Any, job: Any) -> JobMatchResult:
        """Compute the match between candidate and job (models or plain mappings)."""
        candidate = CandidateProfile.from_any(candidate)
        job = Job.from_any(job)
        config = self.config

        self._log(f"Matching: candidate vs {job.job_title or job.job_id or 'Job'}")

        # ═══════════════════════════════════════════════════════════════
        # STEP 1: Skills
        # ═══════════════════════════════════════════════════════════════
        log_section(self._log, "Step 1: Skills", width=60, char="-")
        vocabulary = job_skill_vocabulary(job)
        skills = self.skill_matcher.match(candidate_skills(candidate), vocabulary)
        self._log(
            f"   -> Matched: {len(skills.matched)}/{len(vocabulary)} ({skills.match_rate:.0f}%)"
        )
        if skills.missing:
            self._log(f"   -> Missing: {format_limited(skills.missing, 5)}")

        # ═══════════════════════════════════════════════════════════════
        # STEP 2: Experience
        # ═══════════════════════════════════════════════════════════════
        log_section(self._log, "Step 2: Experience", width=60, char="-")
        experience = compare_experience(
            candidate.years_of_experience,
            job.experience_level,
            partial_credit_ceiling=config.experience_partial_credit_ceiling,
            match_threshold=config.experience_match_threshold,
        )
        self._log(
            f"   -> {experience.candidate_level} vs {experience.required_level} -> {experience.score:.1f}%"
        )

        # ═══════════════════════════════════════════════════════════════
        # STEP 3: Preferences
        # ═══════════════════════════════════════════════════════════════
        log_section(self._log, "Step 3: Preferences", width=60, char="-")
        preferences = align_preferences(
            candidate.job_preferences,
            job,
            neutral_score=config.neutral_preference_score,
            axis_points=config.preference_axis_points,
            flag_threshold=config.preference_flag_threshold,
            per_axis_flags=config.per_axis_preference_flags,
        )
        self._log(f"   -> {preferences.score:.0f}%")

        # ═══════════════════════════════════════════════════════════════
        # STEP 4: Aggregate
        # ═══════════════════════════════════════════════════════════════
        weighted = (
            skills.match_rate * config.skills_weight
            + experience.score * config.experience_weight
            + preferences.score * config.preferences_weight
        )
        match_percentage = min(100, max(0, round_half_up(weighted / config.total_weight)))
        self._log(f"FINAL SCORE: {match_percentage}/100")

        # ═══════════════════════════════════════════════════════════════
        # STEP 5: Reasons
        # ═══════════════════════════════════════════════════════════════
        reasons = build_reasons(
            skills, experience, shortfall_threshold=config.experience_match_threshold
        )

        return JobMatchResult(
            match_percentage=match_percentage,
            skills_match=skills,
            experience_match=experience,
            preferences_match=preferences,
            reasons=reasons,
        )

    def _log(self, message: str) -> None:
        print_with_prefix("[MatchingAgent]", message, enabled=self.verbose)


# ═══════════════════════════════════════════════════════════════════════════
# SIMPLE API
# ═══════════════════════════════════════════════════════════════════════════

def compute_match(
    candidate: Any,
    job: Any,
    config: Optional[MatchingConfig] = None,
) -> JobMatchResult:
    """
    Match one candidate against one job.

    Args:
        candidate: CandidateProfile or a mapping with the same keys
        job: Job or a mapping with the same keys
        config: Optional overrides (weights, thresholds, skill match mode)

    Returns:
        JobMatchResult; never raises for missing or malformed fields
    """
    return MatchingAgent(config=config).match(candidate, job)
