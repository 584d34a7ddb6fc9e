"""Anthropic Messages API provider.

Requires the ``anthropic`` extra and ``ANTHROPIC_API_KEY``. The system
prompt travels as the top-level ``system`` argument rather than a message.
"""

from __future__ import annotations

import logging
from typing import Any

from callqa.llm.base import GenerationParams, LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class AnthropicLLMProvider(LLMProvider):
    def __init__(self, model: str = DEFAULT_MODEL, api_key: str | None = None):
        try:
            import anthropic
        except ImportError as exc:
            raise ImportError(
                "anthropic package required: pip install earnings-call-qa[anthropic]"
            ) from exc

        self.model = model
        self._client: Any = anthropic.Anthropic(api_key=api_key)

    def generate(
        self,
        prompt: str,
        system: str | None = None,
        params: GenerationParams | None = None,
    ) -> str:
        params = params or self.default_params
        request: dict[str, Any] = {
            "model": self.model,
            "max_tokens": params.max_tokens,
            "temperature": params.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            request["system"] = system

        response = self._client.messages.create(**request)
        if response.stop_reason == "max_tokens":
            logger.warning("%s output truncated at %d tokens", self.model, params.max_tokens)
        # Bullets and profile sections may arrive split across text blocks
        return "".join(block.text for block in response.content if getattr(block, "type", "") == "text")
