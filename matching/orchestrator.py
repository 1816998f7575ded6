#!/usr/bin/env python3
"""
Matching Orchestrator - Batch scoring in both search directions.

- Candidates for a job: skip already-applied candidates, score the rest,
  rank with the candidate-search threshold.
- Jobs for a candidate: the symmetric search with the job-recommendation
  threshold.

Data fetching belongs to an InputProvider; the orchestrator itself keeps no
state between calls. A failure while scoring one pair degrades that pair to
a zero-score result and the batch carries on.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Set, Tuple
import logging

from matching.config_loader import ResultPolicy
from matching.exceptions import CandidateNotFoundError, InvalidInputError, JobNotFoundError
from matching.models import Candidate, Job
from matching.scorer.models import MatchResult
from matching.scorer.ranking import rank
from matching.scorer.service import ScoringService, failed_result

logger = logging.getLogger(__name__)


class InputProvider(Protocol):
    """Read-only source of jobs, candidates and applications."""

    def get_job(self, job_id: Any) -> Optional[Job]:
        ...

    def get_candidate(self, candidate_id: Any) -> Optional[Candidate]:
        ...

    def list_jobs(self) -> List[Job]:
        ...

    def list_candidates(self) -> List[Candidate]:
        ...

    def applied_candidate_ids(self, job_id: Any) -> Set[Any]:
        ...

    def applied_job_ids(self, candidate_id: Any) -> Set[Any]:
        ...


class InMemoryProvider:
    """InputProvider over plain lists; applications are (candidate_id, job_id) pairs."""

    def __init__(
        self,
        jobs: Iterable[Job] = (),
        candidates: Iterable[Candidate] = (),
        applications: Iterable[Tuple[Any, Any]] = ()
    ):
        self._jobs: Dict[Any, Job] = {j.id: j for j in jobs}
        self._candidates: Dict[Any, Candidate] = {c.id: c for c in candidates}
        self._applications = list(applications)

    def get_job(self, job_id: Any) -> Optional[Job]:
        return self._jobs.get(job_id)

    def get_candidate(self, candidate_id: Any) -> Optional[Candidate]:
        return self._candidates.get(candidate_id)

    def list_jobs(self) -> List[Job]:
        return list(self._jobs.values())

    def list_candidates(self) -> List[Candidate]:
        return list(self._candidates.values())

    def applied_candidate_ids(self, job_id: Any) -> Set[Any]:
        return {c for c, j in self._applications if j == job_id}

    def applied_job_ids(self, candidate_id: Any) -> Set[Any]:
        return {j for c, j in self._applications if c == candidate_id}


class MatchingOrchestrator:
    """
    Batch orchestrator over a ScoringService.

    Args:
        scoring_service: Scores a single candidate/job pair
        policy: Thresholds and default limit for ranked results
        max_workers: None or 1 scores sequentially; >1 fans out over a thread pool
    """

    def __init__(
        self,
        scoring_service: ScoringService,
        policy: Optional[ResultPolicy] = None,
        max_workers: Optional[int] = None
    ):
        self.scoring_service = scoring_service
        self.policy = policy or ResultPolicy()
        self.max_workers = max_workers

    # ------------------------------------------------------------------
    # Pair scoring
    # ------------------------------------------------------------------

    def _score_pair(self, candidate: Candidate, job: Job) -> MatchResult:
        try:
            return self.scoring_service.score(candidate, job)
        except Exception as e:
            logger.error(f"Failed to score candidate {candidate.id} for job {job.id}: {e}")
            return failed_result(candidate.id, job.id, e)

    def _score_pairs(self, pairs: Sequence[Tuple[Candidate, Job]]) -> List[MatchResult]:
        """Score pairs, returning results in input order."""
        if not self.max_workers or self.max_workers <= 1 or len(pairs) <= 1:
            return [self._score_pair(c, j) for c, j in pairs]

        results: List[Optional[MatchResult]] = [None] * len(pairs)
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {
                pool.submit(self._score_pair, candidate, job): index
                for index, (candidate, job) in enumerate(pairs)
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        return results

    def _limit(self, limit: Optional[int]) -> int:
        return self.policy.default_limit if limit is None else limit

    # ------------------------------------------------------------------
    # Searches over in-memory inputs
    # ------------------------------------------------------------------

    def find_candidates_for_job(
        self,
        job: Job,
        candidates: Iterable[Optional[Candidate]],
        already_applied_ids: Iterable[Any] = (),
        limit: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Rank candidates for a job, best first.

        Candidates that already applied are skipped, as are None entries.
        Only results above candidate_min_score are returned.

        Raises:
            InvalidInputError: job is missing
        """
        if job is None:
            raise InvalidInputError("Job is required")

        excluded = set(already_applied_ids or ())
        eligible = []
        for candidate in candidates:
            if candidate is None:
                logger.warning(f"Skipping missing candidate for job {job.id}")
                continue
            if candidate.id in excluded:
                continue
            eligible.append(candidate)

        logger.info(f"Scoring {len(eligible)} candidates for job {job.id} ({len(excluded)} excluded)")
        results = self._score_pairs([(c, job) for c in eligible])
        ranked = rank(results, self.policy.candidate_min_score, self._limit(limit))
        logger.info(f"Job {job.id}: {len(ranked)} candidates above {self.policy.candidate_min_score}")
        return ranked

    def find_jobs_for_candidate(
        self,
        candidate: Candidate,
        jobs: Iterable[Optional[Job]],
        limit: Optional[int] = None,
        already_applied_job_ids: Iterable[Any] = ()
    ) -> List[MatchResult]:
        """
        Rank jobs for a candidate, best first, above job_min_score.

        Raises:
            InvalidInputError: candidate is missing
        """
        if candidate is None:
            raise InvalidInputError("Candidate is required")

        excluded = set(already_applied_job_ids or ())
        eligible = []
        for job in jobs:
            if job is None:
                logger.warning(f"Skipping missing job for candidate {candidate.id}")
                continue
            if job.id in excluded:
                continue
            eligible.append(job)

        logger.info(f"Scoring {len(eligible)} jobs for candidate {candidate.id}")
        results = [
            r.with_subject(candidate.id, r.job_id)
            for r in self._score_pairs([(candidate, j) for j in eligible])
        ]
        ranked = rank(results, self.policy.job_min_score, self._limit(limit))
        logger.info(f"Candidate {candidate.id}: {len(ranked)} jobs above {self.policy.job_min_score}")
        return ranked

    # ------------------------------------------------------------------
    # Provider-backed searches
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_job(provider: InputProvider, job_id: Any) -> Job:
        job = provider.get_job(job_id)
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")
        return job

    @staticmethod
    def _resolve_candidate(provider: InputProvider, candidate_id: Any) -> Candidate:
        candidate = provider.get_candidate(candidate_id)
        if candidate is None:
            raise CandidateNotFoundError(f"Candidate {candidate_id} not found")
        return candidate

    def candidates_for_job_id(
        self,
        provider: InputProvider,
        job_id: Any,
        limit: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Rank every listed candidate for a stored job.

        Raises:
            JobNotFoundError: job_id does not resolve
        """
        job = self._resolve_job(provider, job_id)
        return self.find_candidates_for_job(
            job,
            provider.list_candidates(),
            provider.applied_candidate_ids(job_id),
            limit,
        )

    def jobs_for_candidate_id(
        self,
        provider: InputProvider,
        candidate_id: Any,
        limit: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Recommend listed jobs for a stored candidate.

        Raises:
            CandidateNotFoundError: candidate_id does not resolve
        """
        candidate = self._resolve_candidate(provider, candidate_id)
        return self.find_jobs_for_candidate(
            candidate,
            provider.list_jobs(),
            limit,
            provider.applied_job_ids(candidate_id),
        )

    def score_candidates_by_id(
        self,
        provider: InputProvider,
        job_id: Any,
        candidate_ids: Iterable[Any],
        limit: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Rank a given set of candidate ids for a stored job.

        Ids that do not resolve are logged and skipped; the rest are scored.

        Raises:
            JobNotFoundError: job_id does not resolve
        """
        job = self._resolve_job(provider, job_id)

        candidates = []
        for candidate_id in candidate_ids:
            try:
                candidates.append(self._resolve_candidate(provider, candidate_id))
            except CandidateNotFoundError as e:
                logger.warning(f"Skipping candidate: {e}")

        return self.find_candidates_for_job(
            job,
            candidates,
            provider.applied_candidate_ids(job_id),
            limit,
        )
