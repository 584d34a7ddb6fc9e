"""OpenAI chat-completions provider, the backend the summaries were written against.

Requires the ``openai`` extra and ``OPENAI_API_KEY``. ``base_url`` points
it at any OpenAI-compatible server instead.
"""

from __future__ import annotations

import logging
from typing import Any

from callqa.llm.base import GenerationParams, LLMProvider, chat_messages

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class OpenAILLMProvider(LLMProvider):
    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        base_url: str | None = None,
    ):
        try:
            import openai
        except ImportError as exc:
            raise ImportError(
                "openai package required: pip install earnings-call-qa[openai]"
            ) from exc

        self.model = model
        client_kwargs = {k: v for k, v in (("api_key", api_key), ("base_url", base_url)) if v}
        self._client: Any = openai.OpenAI(**client_kwargs)

    def generate(
        self,
        prompt: str,
        system: str | None = None,
        params: GenerationParams | None = None,
    ) -> str:
        params = params or self.default_params
        response = self._client.chat.completions.create(
            model=self.model,
            messages=chat_messages(prompt, system),
            max_completion_tokens=params.max_tokens,
            temperature=params.temperature,
        )
        choice = response.choices[0]
        if choice.finish_reason == "length":
            logger.warning("%s output truncated at %d tokens", self.model, params.max_tokens)
        return choice.message.content or ""
