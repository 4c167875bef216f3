from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MatchQuality(str, Enum):
    EXACT = "exact"
    SIMILAR = "similar"
    PARTIAL = "partial"


class SkillImportance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class _ResultModel(BaseModel):
    # Dumped with by_alias=True for UI consumers (camelCase keys)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillMatch(_ResultModel):
    skill: str
    match_quality: MatchQuality = MatchQuality.EXACT


class MissingSkill(_ResultModel):
    skill: str
    importance: SkillImportance = SkillImportance.MEDIUM


class SkillsMatch(_ResultModel):
    matched: List[str] = []
    missing: List[str] = []
    match_rate: float = 0.0                 # 0-100
    matched_details: List[SkillMatch] = []
    missing_details: List[MissingSkill] = []


class ExperienceMatch(_ResultModel):
    is_match: bool
    candidate_level: str
    required_level: str
    score: float                            # 0-100


class PreferencesMatch(_ResultModel):
    job_type_match: bool
    work_mode_match: bool
    score: float                            # 0-100


class JobMatchResult(_ResultModel):
    """Outcome of matching one candidate against one job posting."""
    match_percentage: int                   # 0-100
    skills_match: SkillsMatch
    experience_match: ExperienceMatch
    preferences_match: PreferencesMatch
    reasons: List[str] = []

    def to_payload(self) -> dict:
        """camelCase dict as rendered by the job list UI."""
        return self.model_dump(mode="json", by_alias=True)
