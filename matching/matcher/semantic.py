#!/usr/bin/env python3
"""
Semantic Scorer - Optional AI rating of job/candidate compatibility.

A semantic scorer is any callable (job_description, candidate_profile) -> float
in [0, 1]. Two implementations are provided on top of an LLMProvider: one asks
the model for a rating, the other compares embeddings. Whatever the scorer,
compute_semantic_score never raises; failures resolve to a neutral 0.5.
"""

import math
import re
from typing import Callable, Optional
import logging

import numpy as np

from matching.exceptions import ExternalScorerUnavailableError
from matching.llm.interfaces import LLMProvider
from matching.llm.system_prompts import SEMANTIC_MATCH_SYSTEM_PROMPT, SEMANTIC_MATCH_USER_TEMPLATE
from matching.models import Candidate, Job
from matching.utils import NEUTRAL_SCORE

logger = logging.getLogger(__name__)

SemanticScorer = Callable[[str, str], float]

_NUMBER_PATTERN = re.compile(r'-?\d*\.?\d+')


def build_candidate_profile(candidate: Candidate) -> str:
    """Render a candidate as the plain-text profile sent to the scorer."""
    lines = [f"Name: {candidate.first_name or ''} {candidate.last_name or ''}".rstrip()]

    if candidate.bio:
        lines.append(f"Summary: {candidate.bio}")

    if candidate.skills:
        lines.append("Skills: " + ", ".join(s.name for s in candidate.skills))

    if candidate.experiences:
        lines.append("Experience:")
        for exp in candidate.experiences:
            lines.append(f"- {exp.position} at {exp.company}")
            if exp.description:
                lines.append(f"  {exp.description}")

    return "\n".join(lines) + "\n"


def job_text(job: Job) -> str:
    return job.description or job.title or ""


def parse_score(content: Optional[str]) -> float:
    """
    Read the first number out of a model reply.

    Raises:
        ExternalScorerUnavailableError: no number, or a value outside [0, 1]
    """
    match = _NUMBER_PATTERN.search(content or "")
    if not match:
        raise ExternalScorerUnavailableError(f"No score in response: {content!r}")
    value = float(match.group(0))
    if not 0.0 <= value <= 1.0:
        raise ExternalScorerUnavailableError(f"Score out of range: {value}")
    return value


class LLMSemanticScorer:
    """Asks the LLM to rate compatibility on a 0.0-1.0 scale."""

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    def __call__(self, job_description: str, candidate_profile: str) -> float:
        prompt = SEMANTIC_MATCH_USER_TEMPLATE.format(
            job_description=job_description,
            candidate_profile=candidate_profile,
        )
        content = self.llm.generate_text(prompt, system_prompt=SEMANTIC_MATCH_SYSTEM_PROMPT)
        return parse_score(content)


class EmbeddingSemanticScorer:
    """Cosine similarity of the job and profile embeddings, clipped to [0, 1]."""

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    def __call__(self, job_description: str, candidate_profile: str) -> float:
        job_vec = np.asarray(self.llm.generate_embedding(job_description), dtype=float)
        profile_vec = np.asarray(self.llm.generate_embedding(candidate_profile), dtype=float)

        if job_vec.shape != profile_vec.shape or job_vec.size == 0:
            raise ExternalScorerUnavailableError(
                f"Embedding shapes do not match: {job_vec.shape} vs {profile_vec.shape}"
            )

        norm = np.linalg.norm(job_vec) * np.linalg.norm(profile_vec)
        if norm == 0:
            raise ExternalScorerUnavailableError("Zero-length embedding")

        return float(np.clip(np.dot(job_vec, profile_vec) / norm, 0.0, 1.0))


def compute_semantic_score(scorer: SemanticScorer, job_description: str, candidate_profile: str) -> float:
    """
    Run the scorer, falling back to exactly 0.5 on any failure.

    Errors, timeouts, non-numeric and out-of-range results are logged as
    warnings and never propagate.
    """
    try:
        value = float(scorer(job_description, candidate_profile))
    except Exception as e:
        logger.warning(f"Semantic scorer unavailable, using neutral score: {e}")
        return NEUTRAL_SCORE

    if math.isnan(value) or not 0.0 <= value <= 1.0:
        logger.warning(f"Semantic scorer returned invalid value {value}, using neutral score")
        return NEUTRAL_SCORE
    return value
