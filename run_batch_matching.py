import argparse
import csv
import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from dotenv import load_dotenv

load_dotenv()

from job_matching.agents.matching_agent import MatchingAgent
from job_matching.models.config import MatchingConfig
from job_matching.models.job import Job
from job_matching.orchestrator import MatchingOrchestrator

FIELDNAMES = [
    "run_id",
    "timestamp_utc",
    "job_file",
    "job_index",
    "job_id",
    "job_title",
    "skill_match_mode",
    "match_percentage",
    "skills_match_rate",
    "experience_score",
    "experience_is_match",
    "candidate_level",
    "required_level",
    "preferences_score",
    "job_type_match",
    "work_mode_match",
    "matched_count",
    "missing_count",
    "matched_skills_json",
    "missing_skills_json",
    "reasons_json",
    "error",
]

SCORE_BUCKETS = [0, 20, 40, 60, 80, 100]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _json_dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8", errors="replace"))


def _iter_job_files(directory: Path) -> List[Path]:
    return sorted(p.resolve() for p in directory.glob("*.json"))


def _load_jobs(path: Path) -> List[Tuple[int, Job]]:
    """A job file holds one posting or a list of postings."""
    data = _read_json(path)
    records = data if isinstance(data, list) else [data]
    return [(i, Job.from_any(record)) for i, record in enumerate(records)]


def _empty_row(run_id: str, job_file: str, mode: str) -> Dict[str, Any]:
    row: Dict[str, Any] = {name: "" for name in FIELDNAMES}
    row.update({
        "run_id": run_id,
        "timestamp_utc": _utc_now_iso(),
        "job_file": job_file,
        "skill_match_mode": mode,
    })
    return row


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Matches one candidate profile against every job posting in a directory "
            "and writes a CSV of scores plus a stats summary."
        )
    )
    parser.add_argument("--candidate", required=True, help="Candidate profile JSON file.")
    parser.add_argument("--jobs-dir", default="data/jobs", help="Directory of job posting JSON files.")
    parser.add_argument("--out", default="data/results/batch_matches.csv", help="Output CSV path.")
    parser.add_argument("--limit", type=int, default=0, help="If > 0, stop after this many jobs.")
    parser.add_argument("--max-workers", type=int, default=None, help="Thread pool size.")
    parser.add_argument("--skill-mode", choices=["substring", "alias"], default=None, help="Skill match mode (default: config).")
    parser.add_argument("--alias-csv", default=None, help="Alias table CSV for --skill-mode alias.")
    parser.add_argument("--verbose", action="store_true", help="Print per-job matching logs.")

    args = parser.parse_args(argv)

    candidate_path = Path(args.candidate).resolve()
    jobs_dir = Path(args.jobs_dir).resolve()
    out_path = Path(args.out).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if not candidate_path.is_file():
        raise SystemExit(f"Candidate file not found: {candidate_path}")
    job_paths = _iter_job_files(jobs_dir) if jobs_dir.is_dir() else []
    if not job_paths:
        raise SystemExit(f"No job files found in: {jobs_dir}")

    overrides: Dict[str, Any] = {}
    if args.skill_mode:
        overrides["skill_match_mode"] = args.skill_mode
    if args.alias_csv:
        overrides["alias_csv_path"] = args.alias_csv
    if args.max_workers:
        overrides["max_workers"] = args.max_workers
    config = MatchingConfig.from_env(**overrides)

    try:
        candidate = _read_json(candidate_path)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Cannot read candidate file {candidate_path}: {e}")
    orchestrator = MatchingOrchestrator(
        config=config,
        matching_agent=MatchingAgent(config=config, verbose=args.verbose),
        verbose=args.verbose,
    )

    # ═══════════════════════════════════════════════════════════════
    # Load postings; unreadable files become error rows
    # ═══════════════════════════════════════════════════════════════
    rows: List[Dict[str, Any]] = []
    jobs: List[Job] = []
    job_rows: List[Dict[str, Any]] = []
    batch_id = int(time.time())

    for job_path in job_paths:
        if args.limit and len(jobs) >= args.limit:
            break
        try:
            loaded = _load_jobs(job_path)
        except (OSError, ValueError) as e:
            row = _empty_row(f"{job_path.stem}__{batch_id}", job_path.name, config.skill_match_mode)
            row["error"] = f"{type(e).__name__}: {e}"
            rows.append(row)
            continue

        for index, job in loaded:
            if args.limit and len(jobs) >= args.limit:
                break
            row = _empty_row(f"{job_path.stem}_{index}__{batch_id}", job_path.name, config.skill_match_mode)
            row["job_index"] = index
            row["job_id"] = job.job_id or ""
            row["job_title"] = job.job_title or ""
            jobs.append(job)
            job_rows.append(row)
            rows.append(row)

    # ═══════════════════════════════════════════════════════════════
    # Match
    # ═══════════════════════════════════════════════════════════════
    batch = orchestrator.run(candidate, jobs)

    for row, entry in zip(job_rows, batch.entries):
        match = entry.result
        row["match_percentage"] = match.match_percentage
        row["skills_match_rate"] = round(match.skills_match.match_rate, 2)
        row["experience_score"] = round(match.experience_match.score, 2)
        row["experience_is_match"] = match.experience_match.is_match
        row["candidate_level"] = match.experience_match.candidate_level
        row["required_level"] = match.experience_match.required_level
        row["preferences_score"] = round(match.preferences_match.score, 2)
        row["job_type_match"] = match.preferences_match.job_type_match
        row["work_mode_match"] = match.preferences_match.work_mode_match
        row["matched_count"] = len(match.skills_match.matched)
        row["missing_count"] = len(match.skills_match.missing)
        row["matched_skills_json"] = _json_dumps(match.skills_match.matched)
        row["missing_skills_json"] = _json_dumps(match.skills_match.missing)
        row["reasons_json"] = _json_dumps(match.reasons)

    with out_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)

    for row in rows:
        label = row["job_title"] or row["job_file"]
        if row["error"]:
            print(f"  ERROR {label}: {row['error']}")
        else:
            print(f"  OK {label} -> {row['match_percentage']}%")

    stats_path = out_path.parent / f"{out_path.stem}_stats.csv"
    _generate_stats(out_path, stats_path, batch.missing_skill_frequency())
    return 0


# ═══════════════════════════════════════════════════════════════════════
# STATS GENERATION
# ═══════════════════════════════════════════════════════════════════════

def _generate_stats(
    csv_path: Path,
    stats_path: Path,
    missing_frequency: List[Tuple[str, int]],
    top_missing: int = 10,
) -> None:
    """Writes a section/metric/value summary of the batch results."""
    df = pd.read_csv(csv_path, keep_default_na=False)
    ok = df[df["error"] == ""]
    scores = pd.to_numeric(ok["match_percentage"], errors="coerce").dropna().to_numpy(dtype=float)

    stats: List[Dict[str, str]] = []

    def _add(section: str, metric: str, value: Any) -> None:
        stats.append({"section": section, "metric": metric, "value": str(value)})

    _add("overview", "total_rows", len(df))
    _add("overview", "ok_rows", len(ok))
    _add("overview", "error_rows", len(df) - len(ok))

    if scores.size:
        _add("score", "mean", f"{scores.mean():.2f}")
        _add("score", "median", f"{np.median(scores):.2f}")
        _add("score", "std_dev", f"{scores.std(ddof=1) if scores.size > 1 else 0.0:.2f}")
        _add("score", "min", f"{scores.min():.0f}")
        _add("score", "max", f"{scores.max():.0f}")

        counts, edges = np.histogram(scores, bins=SCORE_BUCKETS)
        for count, low, high in zip(counts, edges[:-1], edges[1:]):
            _add("score_distribution", f"bucket_{low:.0f}-{high:.0f}", int(count))

        for column in ("skills_match_rate", "experience_score", "preferences_score"):
            values = pd.to_numeric(ok[column], errors="coerce").dropna()
            _add("score_breakdown", f"{column}_mean", f"{values.mean():.2f}")

    for skill, count in missing_frequency[:top_missing]:
        _add("missing_skills", skill, count)

    pd.DataFrame(stats, columns=["section", "metric", "value"]).to_csv(stats_path, index=False)

    print("\n" + "=" * 70)
    print("  SUMMARY - Batch Matching Results")
    print("=" * 70)
    print(f"  Rows: {len(df)} ({len(ok)} OK, {len(df) - len(ok)} errors)")
    if scores.size:
        print(f"  Score: mean={scores.mean():.1f}  median={np.median(scores):.1f}  "
              f"min={scores.min():.0f}  max={scores.max():.0f}")
    print(f"  Output CSV: {csv_path}")
    print(f"  Stats CSV:  {stats_path}")
    print("=" * 70)


if __name__ == "__main__":
    raise SystemExit(main())
