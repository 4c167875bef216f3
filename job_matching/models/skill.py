from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from job_matching.models.coercion import coerce_text


class Skill(BaseModel):
    """Skill declared on a candidate profile."""
    model_config = ConfigDict(extra="ignore")

    name: str
    level: Optional[str] = None         # e.g. "beginner", "expert"; not used for scoring

    @model_validator(mode="before")
    @classmethod
    def _accept_loose_shapes(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        if isinstance(data, dict):
            return {
                "name": coerce_text(data.get("name") or data.get("skill_name") or data.get("skillName")) or "",
                "level": data.get("level") or data.get("skill_level") or data.get("skillLevel"),
            }
        return data

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Optional[str]:
        return coerce_text(value)
