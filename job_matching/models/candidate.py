from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from job_matching.models.coercion import (
    coerce_record_list,
    coerce_text,
    coerce_text_list,
    coerce_years,
)
from job_matching.models.skill import Skill


class JobPreferences(BaseModel):
    """What the candidate is looking for."""
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    preferred_job_types: List[str] = []     # e.g. "Full-time", "Contract"
    preferred_work_modes: List[str] = []    # e.g. "Remote", "Hybrid"
    preferred_locations: List[str] = []     # informational only

    @field_validator("preferred_job_types", "preferred_work_modes", "preferred_locations", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> List[str]:
        return coerce_text_list(value)


class Education(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    institution: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_degree(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"degree": data}
        return data

    @field_validator("degree", "field_of_study", "institution", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)


class CandidateProfile(BaseModel):
    """Candidate profile as supplied by the profile service. Every field is optional."""
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    skills: List[Skill] = []
    years_of_experience: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("years_of_experience", "yearsOfExperience", "experience_years"),
    )
    job_preferences: Optional[JobPreferences] = None
    education: List[Education] = []

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> List[Skill]:
        skills = []
        for item in coerce_record_list(value):
            if not isinstance(item, (Skill, str, dict)):
                continue
            skill = item if isinstance(item, Skill) else Skill.model_validate(item)
            if skill.name.strip():
                skills.append(skill)
        return skills

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _coerce_years(cls, value: Any) -> Optional[float]:
        return coerce_years(value)

    @field_validator("job_preferences", mode="before")
    @classmethod
    def _coerce_preferences(cls, value: Any) -> Any:
        if isinstance(value, (dict, JobPreferences)):
            return value
        return None

    @field_validator("education", mode="before")
    @classmethod
    def _coerce_education(cls, value: Any) -> List[Any]:
        return [e for e in coerce_record_list(value) if isinstance(e, (Education, str, dict))]

    @classmethod
    def from_any(cls, data: Any) -> "CandidateProfile":
        """Build a profile from a model, a mapping or None."""
        if isinstance(data, cls):
            return data
        if isinstance(data, dict):
            return cls.model_validate(data)
        return cls()
