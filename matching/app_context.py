from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import sessionmaker

from database.database import create_session_factory
from matching.config_loader import AppConfig, LlmConfig, SemanticConfig
from matching.llm.openai_service import OpenAIService
from matching.matcher.semantic import EmbeddingSemanticScorer, LLMSemanticScorer, SemanticScorer
from matching.orchestrator import MatchingOrchestrator
from matching.scorer.service import ScoringService


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    DB access, when configured, should be obtained via
    profile_uow(ctx.session_factory) per request; the context itself holds
    no session.
    """
    config: AppConfig
    scoring_service: ScoringService
    orchestrator: MatchingOrchestrator
    ai_service: Optional[OpenAIService] = None
    session_factory: Optional[sessionmaker] = None

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        matching_config = config.matching

        # AI Service (only when the semantic factor is enabled)
        ai_service = None
        semantic_scorer = None
        if matching_config.semantic.enabled:
            ai_service = cls._build_ai_service(config.llm)
            semantic_scorer = cls._build_semantic_scorer(matching_config.semantic, ai_service)

        scoring_service = ScoringService(
            weights=matching_config.weights,
            semantic_scorer=semantic_scorer
        )

        orchestrator = MatchingOrchestrator(
            scoring_service,
            policy=matching_config.result_policy,
            max_workers=matching_config.max_workers
        )

        # Database (optional - pass to profile_uow(session_factory))
        session_factory = None
        if config.database:
            session_factory = create_session_factory(config.database.url)

        return cls(
            config=config,
            scoring_service=scoring_service,
            orchestrator=orchestrator,
            ai_service=ai_service,
            session_factory=session_factory
        )

    @staticmethod
    def _build_ai_service(llm_config: LlmConfig) -> OpenAIService:
        """Build OpenAI service from LLM configuration."""
        model_config = {
            'model': llm_config.model,
            'embedding_model': llm_config.embedding_model,
            'embedding_dimensions': llm_config.embedding_dimensions,
            'temperature': llm_config.temperature,
        }

        return OpenAIService(
            base_url=llm_config.base_url,
            api_key=llm_config.api_key,
            model_config=model_config,
            timeout=llm_config.request_timeout_seconds,
            max_attempts=llm_config.max_attempts
        )

    @staticmethod
    def _build_semantic_scorer(semantic_config: SemanticConfig, ai_service: OpenAIService) -> SemanticScorer:
        if semantic_config.mode == "embedding":
            return EmbeddingSemanticScorer(ai_service)
        return LLMSemanticScorer(ai_service)
