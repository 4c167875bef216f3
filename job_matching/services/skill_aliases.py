"""
Skill Alias Table
Maps alternative skill names to one canonical name ("js" -> "javascript",
"k8s" -> "kubernetes") so the alias match mode can compare skills that are
spelled differently.

CSV format (one row per canonical skill):
    skill_id,name,category,aliases
    custom:tech/kubernetes,kubernetes,devops,"k8s,kube"
"""

from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from job_matching.services.logging_utils import print_with_prefix

DEFAULT_ALIAS_CSV = Path(__file__).resolve().parent.parent / "data" / "skill_aliases.csv"

_REQUIRED_COLUMNS = {"name", "aliases"}


class SkillAliasError(Exception):
    """The alias table cannot be loaded."""
    pass


class SkillAliasTable:
    """Lowercase alias/name -> canonical lowercase name."""

    def __init__(self, lookup: Optional[Dict[str, str]] = None):
        self._lookup: Dict[str, str] = {
            alias.strip().lower(): name.strip().lower()
            for alias, name in (lookup or {}).items()
            if alias and alias.strip() and name and name.strip()
        }

    @classmethod
    def from_csv(
        cls,
        csv_path: Optional[Union[str, Path]] = None,
        verbose: bool = False,
    ) -> "SkillAliasTable":
        """Load the table from CSV (default: the packaged table)."""
        path = Path(csv_path) if csv_path else DEFAULT_ALIAS_CSV
        if not path.is_file():
            raise SkillAliasError(f"Alias table not found: {path}")

        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise SkillAliasError(f"Cannot read alias table {path}: {e}") from e

        missing = _REQUIRED_COLUMNS - set(df.columns)
        if missing:
            raise SkillAliasError(
                f"Alias table {path} is missing columns: {', '.join(sorted(missing))}"
            )

        lookup: Dict[str, str] = {}
        for _, row in df.iterrows():
            name = row["name"].strip().lower()
            if not name:
                continue
            lookup[name] = name
            for alias in row["aliases"].split(","):
                alias = alias.strip().lower()
                # A canonical name always maps to itself
                if alias and alias not in lookup:
                    lookup[alias] = name

        print_with_prefix(
            "[SkillAliasTable]",
            f"{len(df)} skills, {len(lookup)} lookup entries ({path.name})",
            enabled=verbose,
        )
        return cls(lookup)

    def canonical(self, skill: str) -> str:
        """Canonical name for a normalised skill, or the skill itself when unknown."""
        if skill in self._lookup:
            return self._lookup[skill]

        # "aws (ec2, s3)" -> "aws"
        if "(" in skill:
            base = skill.split("(")[0].strip()
            if base in self._lookup:
                return self._lookup[base]

        return skill

    def __contains__(self, skill: str) -> bool:
        return skill in self._lookup

    def __len__(self) -> int:
        return len(self._lookup)
