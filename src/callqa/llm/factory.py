"""LLM provider factory and settings-derived generation budgets."""

from __future__ import annotations

import importlib
import logging

from callqa.config import LLMSettings
from callqa.llm.base import GenerationParams, LLMProvider

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Provider registry: (provider_key, module_path, class_name)
# ---------------------------------------------------------------------------

_PROVIDER_REGISTRY: list[tuple[str, str, str]] = [
    ("openai", "callqa.llm.openai_provider", "OpenAILLMProvider"),
    ("anthropic", "callqa.llm.anthropic_provider", "AnthropicLLMProvider"),
    ("ollama", "callqa.llm.ollama_provider", "OllamaLLMProvider"),
]

# Keyed by (provider, model)
_provider_cache: dict[tuple[str, str | None], LLMProvider] = {}


def get_llm_provider(provider: str = "openai", model: str | None = None) -> LLMProvider:
    """Get a provider instance, reused per (provider, model).

    ``model=None`` keeps the provider's own default model.
    """
    key = (provider.lower(), model)
    if key in _provider_cache:
        return _provider_cache[key]

    entry = next((e for e in _PROVIDER_REGISTRY if e[0] == key[0]), None)
    if entry is None:
        raise ValueError(f"Unknown LLM provider '{provider}'. Available: {available_providers()}")

    _, module_path, cls_name = entry
    cls = getattr(importlib.import_module(module_path), cls_name)
    instance = cls(model=model) if model else cls()
    _provider_cache[key] = instance
    logger.debug("Created LLM provider %s (%s)", cls_name, getattr(instance, "model", "default"))
    return instance


def provider_from_settings(settings: LLMSettings, provider: str | None = None) -> LLMProvider:
    """The configured provider, or ``provider`` with its own default model.

    ``settings.model`` names a model of ``settings.provider``, so it is only
    applied when no other provider is requested.
    """
    if provider and provider.lower() != settings.provider.lower():
        return get_llm_provider(provider)
    return get_llm_provider(settings.provider, model=settings.model)


def summary_params(settings: LLMSettings) -> GenerationParams:
    return GenerationParams(temperature=settings.temperature, max_tokens=settings.max_tokens)


def profile_params(settings: LLMSettings) -> GenerationParams:
    return GenerationParams(temperature=settings.profile_temperature, max_tokens=settings.profile_max_tokens)


def available_providers() -> list[str]:
    """Return names of registered LLM providers."""
    return [k for k, _, _ in _PROVIDER_REGISTRY]


def clear_cache() -> None:
    """Clear the provider cache (for testing)."""
    _provider_cache.clear()
