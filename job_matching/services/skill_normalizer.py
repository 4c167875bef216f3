"""
Skill Normalizer
Builds the two skill lists the matcher compares.

Responsibilities:
- Lower-case, trim and de-duplicate candidate skills and job skills
- Derive a fallback vocabulary from job title/department tokens when the
  posting lists no skills, so such postings are not always scored neutrally
"""

import re
from typing import Iterable, List, Optional

from job_matching.models.candidate import CandidateProfile
from job_matching.models.job import Job

_KEYWORD_SPLIT_RE = re.compile(r"[\s,]+")
MIN_KEYWORD_LENGTH = 3


def normalize_skill(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def unique_skills(names: Iterable[Optional[str]]) -> List[str]:
    """Normalised, blank-free, first-occurrence-ordered skill list."""
    skills: List[str] = []
    seen = set()
    for name in names:
        skill = normalize_skill(name)
        if not skill or skill in seen:
            continue
        seen.add(skill)
        skills.append(skill)
    return skills


def extract_keywords(*texts: Optional[str]) -> List[str]:
    """Tokens of title-like texts, split on whitespace/commas, longer than 2 chars."""
    tokens: List[str] = []
    for text in texts:
        if not text:
            continue
        tokens.extend(
            token for token in _KEYWORD_SPLIT_RE.split(text.lower())
            if len(token) >= MIN_KEYWORD_LENGTH
        )
    return unique_skills(tokens)


def candidate_skills(candidate: CandidateProfile) -> List[str]:
    return unique_skills(skill.name for skill in candidate.skills)


def job_skill_vocabulary(job: Job) -> List[str]:
    """
    Skills the job asks for: required then preferred.
    Falls back to job title + department keywords when both lists are empty.
    """
    explicit = unique_skills([*job.required_skills, *job.preferred_skills])
    if explicit:
        return explicit
    return extract_keywords(job.job_title, job.department)
