"""
Unit tests for AppContext wiring.
"""
from database.repositories import ProfileRepository
from database.uow import profile_uow
from matching.app_context import AppContext
from matching.config_loader import AppConfig, DatabaseConfig, LlmConfig, MatchingConfig, SemanticConfig
from matching.llm.openai_service import OpenAIService
from matching.matcher.semantic import EmbeddingSemanticScorer, LLMSemanticScorer


class TestAppContext:

    def test_default_config_has_no_ai(self):
        ctx = AppContext.build(AppConfig())

        assert ctx.ai_service is None
        assert ctx.scoring_service.semantic_scorer is None
        assert ctx.orchestrator.scoring_service is ctx.scoring_service
        assert ctx.orchestrator.policy.candidate_min_score == 0.3
        assert ctx.session_factory is None

    def test_database_config_builds_session_factory(self):
        ctx = AppContext.build(AppConfig(database=DatabaseConfig(url="sqlite://")))

        assert ctx.session_factory is not None
        with profile_uow(ctx.session_factory) as repo:
            assert isinstance(repo, ProfileRepository)

    def test_semantic_llm_mode(self):
        config = AppConfig(
            llm=LlmConfig(api_key="test", model="qwen3:14b", request_timeout_seconds=5),
            matching=MatchingConfig(semantic=SemanticConfig(enabled=True), max_workers=2),
        )
        ctx = AppContext.build(config)

        assert isinstance(ctx.ai_service, OpenAIService)
        assert ctx.ai_service.model == "qwen3:14b"
        assert isinstance(ctx.scoring_service.semantic_scorer, LLMSemanticScorer)
        assert ctx.scoring_service.semantic_enabled
        assert ctx.orchestrator.max_workers == 2

    def test_semantic_embedding_mode(self):
        config = AppConfig(
            llm=LlmConfig(api_key="test"),
            matching=MatchingConfig(semantic=SemanticConfig(enabled=True, mode="embedding")),
        )
        ctx = AppContext.build(config)

        assert isinstance(ctx.scoring_service.semantic_scorer, EmbeddingSemanticScorer)
