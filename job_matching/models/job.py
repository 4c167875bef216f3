from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from job_matching.models.coercion import coerce_text, coerce_text_list


class Job(BaseModel):
    """Job posting as supplied by the job service."""
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    job_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("job_id", "jobId", "id"))
    job_title: Optional[str] = None
    department: Optional[str] = None
    required_skills: List[str] = []
    preferred_skills: List[str] = []
    experience_level: Optional[str] = None      # free text, e.g. "Senior", "mid"
    job_type: Optional[str] = None              # e.g. "Full-time"
    work_mode: Optional[str] = None             # e.g. "Remote", "On-site"
    education_requirements: Optional[str] = None

    @field_validator("required_skills", "preferred_skills", mode="before")
    @classmethod
    def _coerce_skill_lists(cls, value: Any) -> List[str]:
        return coerce_text_list(value)

    @field_validator(
        "job_id",
        "job_title",
        "department",
        "experience_level",
        "job_type",
        "work_mode",
        "education_requirements",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @classmethod
    def from_any(cls, data: Any) -> "Job":
        """Build a posting from a model, a mapping or None."""
        if isinstance(data, cls):
            return data
        if isinstance(data, dict):
            return cls.model_validate(data)
        return cls()
