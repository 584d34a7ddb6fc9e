"""LLM providers — OpenAI, Anthropic, Ollama."""

from callqa.llm.base import PROFILE_PARAMS, SUMMARY_PARAMS, GenerationParams, LLMProvider
from callqa.llm.factory import (
    available_providers,
    get_llm_provider,
    profile_params,
    provider_from_settings,
    summary_params,
)

__all__ = [
    "PROFILE_PARAMS",
    "SUMMARY_PARAMS",
    "GenerationParams",
    "LLMProvider",
    "available_providers",
    "get_llm_provider",
    "profile_params",
    "provider_from_settings",
    "summary_params",
]
