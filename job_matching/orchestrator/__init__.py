# orchestrator package
"""Batch matching of one candidate against many jobs."""

from job_matching.orchestrator.matching_orchestrator import (
    BatchMatchResult,
    JobMatchEntry,
    MatchingOrchestrator,
    match_candidate_to_jobs,
)

__all__ = [
    "BatchMatchResult",
    "JobMatchEntry",
    "MatchingOrchestrator",
    "match_candidate_to_jobs",
]
