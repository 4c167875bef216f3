"""
Matching configuration.

Every tunable number of the engine lives here with its default, so a caller can
override one (e.g. the skills weight) without touching the scoring code and
without changing behaviour when nothing is overridden.
"""

import os
from pathlib import Path
from typing import Callable, Dict, Literal, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

SKILL_MATCH_MODES = ("substring", "alias")

DEFAULT_SKILLS_WEIGHT = 50.0
DEFAULT_EXPERIENCE_WEIGHT = 30.0
DEFAULT_PREFERENCES_WEIGHT = 20.0

DEFAULT_NEUTRAL_SKILL_RATE = 50.0
DEFAULT_NEUTRAL_PREFERENCE_SCORE = 50.0
DEFAULT_PREFERENCE_AXIS_POINTS = 50.0
DEFAULT_PREFERENCE_FLAG_THRESHOLD = 25.0

EXPERIENCE_PARTIAL_CREDIT_CEILING = 70.0
EXPERIENCE_MATCH_THRESHOLD = 70.0


class MatchingConfigError(ValueError):
    """An environment variable holds a value that cannot be used."""
    pass


def _parse_bool(raw: str) -> bool:
    value = raw.lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError("expected a boolean (true/false)")


def _parse_mode(raw: str) -> str:
    mode = raw.lower()
    if mode not in SKILL_MATCH_MODES:
        raise ValueError(f"expected one of {', '.join(SKILL_MATCH_MODES)}")
    return mode


# env var -> (field, parser)
_ENV_FIELDS: Dict[str, Tuple[str, Callable[[str], object]]] = {
    "JOB_MATCH_SKILLS_WEIGHT": ("skills_weight", float),
    "JOB_MATCH_EXPERIENCE_WEIGHT": ("experience_weight", float),
    "JOB_MATCH_PREFERENCES_WEIGHT": ("preferences_weight", float),
    "JOB_MATCH_NEUTRAL_SKILL_RATE": ("neutral_skill_rate", float),
    "JOB_MATCH_NEUTRAL_PREFERENCE_SCORE": ("neutral_preference_score", float),
    "JOB_MATCH_PARTIAL_CREDIT_CEILING": ("experience_partial_credit_ceiling", float),
    "JOB_MATCH_SKILL_MODE": ("skill_match_mode", _parse_mode),
    "JOB_MATCH_ALIAS_CSV": ("alias_csv_path", str),
    "JOB_MATCH_PER_AXIS_FLAGS": ("per_axis_preference_flags", _parse_bool),
    "JOB_MATCH_MAX_WORKERS": ("max_workers", int),
}


class MatchingConfig(BaseModel):
    """Weights, neutral defaults and thresholds used by the MatchingAgent."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Aggregation weights (normalised by their sum)
    skills_weight: float = Field(default=DEFAULT_SKILLS_WEIGHT, ge=0)
    experience_weight: float = Field(default=DEFAULT_EXPERIENCE_WEIGHT, ge=0)
    preferences_weight: float = Field(default=DEFAULT_PREFERENCES_WEIGHT, ge=0)

    # Neutral values used when there is nothing to compare
    neutral_skill_rate: float = Field(default=DEFAULT_NEUTRAL_SKILL_RATE, ge=0, le=100)
    neutral_preference_score: float = Field(default=DEFAULT_NEUTRAL_PREFERENCE_SCORE, ge=0, le=100)

    preference_axis_points: float = Field(default=DEFAULT_PREFERENCE_AXIS_POINTS, ge=0, le=100)
    preference_flag_threshold: float = Field(default=DEFAULT_PREFERENCE_FLAG_THRESHOLD, ge=0, le=100)
    per_axis_preference_flags: bool = False

    experience_partial_credit_ceiling: float = Field(default=EXPERIENCE_PARTIAL_CREDIT_CEILING, ge=0, le=100)
    experience_match_threshold: float = Field(default=EXPERIENCE_MATCH_THRESHOLD, ge=0, le=100)

    skill_match_mode: Literal["substring", "alias"] = "substring"
    alias_csv_path: Optional[str] = None     # None = packaged table

    max_workers: Optional[int] = Field(default=None, ge=1)

    @property
    def total_weight(self) -> float:
        return (self.skills_weight + self.experience_weight + self.preferences_weight) or 1.0

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "MatchingConfig":
        """
        Build a config from JOB_MATCH_* environment variables.

        A .env file (default: ./.env) is loaded first; variables already set in
        the environment win. Keyword overrides win over both.
        """
        load_dotenv(dotenv_path=env_file or Path.cwd() / ".env")

        values: Dict[str, object] = {}
        for var, (field, parser) in _ENV_FIELDS.items():
            raw = os.getenv(var)
            if raw is None or not raw.strip():
                continue
            try:
                values[field] = parser(raw.strip())
            except ValueError as e:
                raise MatchingConfigError(f"Invalid {var}={raw!r}: {e}") from e

        values.update(overrides)
        return cls(**values)
