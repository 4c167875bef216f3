# agents package
"""Matching engine entry points."""

from job_matching.agents.matching_agent import MatchingAgent, compute_match

__all__ = [
    "MatchingAgent",
    "compute_match",
]
