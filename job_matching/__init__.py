"""Candidate/job matching engine."""

from job_matching.agents.matching_agent import MatchingAgent, compute_match
from job_matching.models import CandidateProfile, Job, JobMatchResult, MatchingConfig
from job_matching.orchestrator import MatchingOrchestrator, match_candidate_to_jobs

__version__ = "0.1.0"

__all__ = [
    "CandidateProfile",
    "Job",
    "JobMatchResult",
    "MatchingAgent",
    "MatchingConfig",
    "MatchingOrchestrator",
    "compute_match",
    "match_candidate_to_jobs",
]
