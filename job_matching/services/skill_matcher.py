"""
Skill Matcher
Partitions the job skill vocabulary into matched and missing skills.

Modes:
- substring (default): a job skill is matched when it contains, or is contained
  in, some candidate skill. Crude ("java" matches "javascript") but it is the
  behaviour existing scores were computed with.
- alias: exact name, then same canonical name in the alias table, then
  whole-token containment ("react" vs "react native"). Reports match quality.
"""

import re
from typing import List, Optional, Set

from job_matching.models.config import DEFAULT_NEUTRAL_SKILL_RATE
from job_matching.models.match_result import MatchQuality, MissingSkill, SkillMatch, SkillsMatch
from job_matching.services.skill_aliases import SkillAliasTable

MATCH_MODE_SUBSTRING = "substring"
MATCH_MODE_ALIAS = "alias"

# Keeps "c++", "c#", "node.js" as single tokens
_TOKEN_RE = re.compile(r"[a-z0-9+#.]+")


def _tokens(skill: str) -> Set[str]:
    return {t.strip(".") for t in _TOKEN_RE.findall(skill) if t.strip(".")}


class SkillMatcher:
    """Matches a normalised job vocabulary against normalised candidate skills."""

    def __init__(
        self,
        mode: str = MATCH_MODE_SUBSTRING,
        alias_table: Optional[SkillAliasTable] = None,
        neutral_rate: float = DEFAULT_NEUTRAL_SKILL_RATE,
    ):
        if mode not in (MATCH_MODE_SUBSTRING, MATCH_MODE_ALIAS):
            raise ValueError(f"Unknown skill match mode: {mode!r}")
        self.mode = mode
        self.neutral_rate = neutral_rate
        self._alias_table = alias_table

    @property
    def alias_table(self) -> SkillAliasTable:
        if self._alias_table is None:
            self._alias_table = SkillAliasTable.from_csv()
        return self._alias_table

    def match(self, candidate_skills: List[str], job_skills: List[str]) -> SkillsMatch:
        matched: List[str] = []
        missing: List[str] = []
        matched_details: List[SkillMatch] = []
        missing_details: List[MissingSkill] = []

        for job_skill in job_skills:
            quality = self._match_one(job_skill, candidate_skills)
            if quality is None:
                missing.append(job_skill)
                missing_details.append(MissingSkill(skill=job_skill))
            else:
                matched.append(job_skill)
                matched_details.append(SkillMatch(skill=job_skill, match_quality=quality))

        if job_skills:
            match_rate = len(matched) / len(job_skills) * 100
        else:
            # No requirement: neither penalise nor reward
            match_rate = self.neutral_rate

        return SkillsMatch(
            matched=matched,
            missing=missing,
            match_rate=match_rate,
            matched_details=matched_details,
            missing_details=missing_details,
        )

    def _match_one(self, job_skill: str, candidate_skills: List[str]) -> Optional[MatchQuality]:
        if self.mode == MATCH_MODE_SUBSTRING:
            if any(job_skill in c or c in job_skill for c in candidate_skills):
                return MatchQuality.EXACT
            return None
        return self._alias_match(job_skill, candidate_skills)

    def _alias_match(self, job_skill: str, candidate_skills: List[str]) -> Optional[MatchQuality]:
        if job_skill in candidate_skills:
            return MatchQuality.EXACT

        canonical = self.alias_table.canonical(job_skill)
        if any(self.alias_table.canonical(c) == canonical for c in candidate_skills):
            return MatchQuality.SIMILAR

        job_tokens = _tokens(job_skill)
        if not job_tokens:
            return None
        for c in candidate_skills:
            cand_tokens = _tokens(c)
            if cand_tokens and (job_tokens <= cand_tokens or cand_tokens <= job_tokens):
                return MatchQuality.PARTIAL
        return None

