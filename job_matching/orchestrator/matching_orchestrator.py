"""
Matching Orchestrator
Evaluates one candidate against many job postings.

Responsibilities:
- Runs the MatchingAgent once per job on a thread pool (each call is
  independent, nothing is shared but read-only config)
- Keeps results in input order; ordering by score is left to the caller
- Summarises missing skills across the batch for downstream recommendations
"""

import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from job_matching.agents.matching_agent import MatchingAgent
from job_matching.models.candidate import CandidateProfile
from job_matching.models.config import MatchingConfig
from job_matching.models.job import Job
from job_matching.models.match_result import JobMatchResult
from job_matching.services.logging_utils import log_section, print_with_prefix


@dataclass
class JobMatchEntry:
    """One job of the batch with its match."""
    index: int
    job: Job
    result: JobMatchResult


@dataclass
class BatchMatchResult:
    """Result of a batch run, entries in the order the jobs were given."""
    candidate: CandidateProfile
    entries: List[JobMatchEntry] = field(default_factory=list)
    elapsed_ms: int = 0

    @property
    def results(self) -> List[JobMatchResult]:
        return [entry.result for entry in self.entries]

    def missing_skill_frequency(self) -> List[Tuple[str, int]]:
        """(skill, number of jobs missing it), most frequent first."""
        counts: Counter = Counter()
        for entry in self.entries:
            counts.update(entry.result.skills_match.missing)
        return counts.most_common()


class MatchingOrchestrator:
    """
    Runs the MatchingAgent over a list of jobs.

    FLOW:
    1. Coerce candidate and jobs into models
    2. Match every job (thread pool when there is more than one)
    3. Return a BatchMatchResult in input order
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        matching_agent: Optional[MatchingAgent] = None,
        max_workers: Optional[int] = None,
        verbose: bool = False,
    ):
        if matching_agent is not None:
            if config is not None and config != matching_agent.config:
                raise ValueError("config differs from the config of matching_agent")
            config = matching_agent.config
        self.config = config or MatchingConfig()
        self.max_workers = max_workers or self.config.max_workers
        self.verbose = verbose

        self._matching_agent = matching_agent

    @property
    def matching_agent(self) -> MatchingAgent:
        if self._matching_agent is None:
            self._matching_agent = MatchingAgent(config=self.config, verbose=self.verbose)
        return self._matching_agent

    def run(self, candidate: Any, jobs: Iterable[Any]) -> BatchMatchResult:
        """
        Match the candidate against every job.

        Args:
            candidate: CandidateProfile or mapping
            jobs: Job models or mappings

        Returns:
            BatchMatchResult with one entry per job, same order as `jobs`
        """
        candidate = CandidateProfile.from_any(candidate)
        job_list = [Job.from_any(job) for job in jobs]
        agent = self.matching_agent

        log_section(self._log, f"MATCHING ORCHESTRATOR: {len(job_list)} jobs", width=70, char="=")
        started = time.perf_counter()

        if len(job_list) <= 1 or self.max_workers == 1:
            results = [agent.match(candidate, job) for job in job_list]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(lambda job: agent.match(candidate, job), job_list))

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        self._log(f"   -> {len(results)} matches in {elapsed_ms} ms")

        return BatchMatchResult(
            candidate=candidate,
            entries=[
                JobMatchEntry(index=i, job=job, result=result)
                for i, (job, result) in enumerate(zip(job_list, results))
            ],
            elapsed_ms=elapsed_ms,
        )

    def _log(self, message: str) -> None:
        """Conditional logging."""
        print_with_prefix("[Orchestrator]", message, enabled=self.verbose)


# ═══════════════════════════════════════════════════════════════════════════
# SIMPLE API
# ═══════════════════════════════════════════════════════════════════════════

def match_candidate_to_jobs(
    candidate: Any,
    jobs: Iterable[Any],
    config: Optional[MatchingConfig] = None,
    max_workers: Optional[int] = None,
    verbose: bool = False,
) -> BatchMatchResult:
    """
    Simple API for batch matching.

    Args:
        candidate: CandidateProfile or mapping
        jobs: Job models or mappings
        config: Optional MatchingConfig
        max_workers: Thread pool size (None = executor default)
        verbose: If True, print progress

    Returns:
        BatchMatchResult in input order
    """
    orchestrator = MatchingOrchestrator(config=config, max_workers=max_workers, verbose=verbose)
    return orchestrator.run(candidate, jobs)
