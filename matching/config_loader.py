import yaml
import os
from typing import Optional, Literal, Dict
from pydantic import BaseModel, Field

from matching.exceptions import InvalidInputError

# Minimum total scores for the two ranked searches. These come from two
# separate call sites and are kept distinct on purpose.
CANDIDATE_SEARCH_MIN_SCORE = 0.3
JOB_RECOMMENDATION_MIN_SCORE = 0.4


class ScoreWeights(BaseModel):
    """
    Factor weights for the composite score.

    Weights should sum to 1.0; normalized() rescales them when they do not.
    Set ai_semantic to None to drop the semantic factor entirely.
    """
    skills: float = Field(default=0.35, ge=0.0)
    experience: float = Field(default=0.25, ge=0.0)
    education: float = Field(default=0.15, ge=0.0)
    location: float = Field(default=0.10, ge=0.0)  # location / cultural fit
    ai_semantic: Optional[float] = Field(default=0.15, ge=0.0)

    def as_dict(self) -> Dict[str, float]:
        weights = {
            'skills': self.skills,
            'experience': self.experience,
            'education': self.education,
            'location': self.location,
        }
        if self.ai_semantic is not None:
            weights['ai_semantic'] = self.ai_semantic
        return weights

    def total(self) -> float:
        return sum(self.as_dict().values())

    def normalized(self) -> "ScoreWeights":
        total = self.total()
        if total <= 0:
            raise InvalidInputError("Score weights must not all be zero")
        if abs(total - 1.0) < 1e-9:
            return self
        scaled = {k: v / total for k, v in self.as_dict().items()}
        scaled.setdefault('ai_semantic', None)
        return ScoreWeights(**scaled)

    def without_semantic(self) -> "ScoreWeights":
        """Drop ai_semantic and spread its weight proportionally over the rest."""
        return ScoreWeights(
            skills=self.skills,
            experience=self.experience,
            education=self.education,
            location=self.location,
            ai_semantic=None,
        ).normalized()


class ResultPolicy(BaseModel):
    """Post-scoring filtering and truncation policy."""
    candidate_min_score: float = CANDIDATE_SEARCH_MIN_SCORE
    job_min_score: float = JOB_RECOMMENDATION_MIN_SCORE
    default_limit: int = Field(default=10, ge=0)


class LlmConfig(BaseModel):
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    embedding_model: str = "text-embedding-3-small"
    embedding_dimensions: int = 1024
    temperature: float = 0.0
    request_timeout_seconds: float = 30.0
    max_attempts: int = Field(default=3, ge=1)


class SemanticConfig(BaseModel):
    """
    AI semantic factor.

    When disabled, the ai_semantic weight is redistributed across the other
    factors. When enabled, scorer failures fall back to a neutral 0.5.
    """
    enabled: bool = False
    mode: Literal["llm", "embedding"] = "llm"


class MatchingConfig(BaseModel):
    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)
    semantic: SemanticConfig = Field(default_factory=SemanticConfig)
    # None or 1 scores sequentially; >1 fans pairs out over a thread pool
    max_workers: Optional[int] = Field(default=None, ge=1)


class DatabaseConfig(BaseModel):
    url: str


class AppConfig(BaseModel):
    database: Optional[DatabaseConfig] = None
    llm: LlmConfig = Field(default_factory=LlmConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data['database'] = {'url': env_db_url}

    # Allow env var overrides for the LLM endpoint
    env_llm_base_url = os.environ.get("LLM_BASE_URL")
    if env_llm_base_url:
        if not data.get('llm'):
            data['llm'] = {}
        data['llm']['base_url'] = env_llm_base_url

    env_llm_api_key = os.environ.get("LLM_API_KEY")
    if env_llm_api_key:
        if not data.get('llm'):
            data['llm'] = {}
        data['llm']['api_key'] = env_llm_api_key

    return AppConfig(**data)
