"""LLM Module - LLM services and interfaces."""
from matching.llm.interfaces import LLMProvider
from matching.llm.openai_service import OpenAIService

__all__ = ['LLMProvider', 'OpenAIService']
