"""Ollama provider for running summaries and profiles against a local model."""

from __future__ import annotations

import logging

import httpx

from callqa.llm.base import GenerationParams, LLMProvider, chat_messages

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3.1:8b"
DEFAULT_BASE_URL = "http://localhost:11434"


class OllamaLLMProvider(LLMProvider):
    """Non-streaming calls to Ollama's ``/api/chat`` endpoint."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 300.0,
        client: httpx.Client | None = None,
    ):
        self.model = model
        self._client = client or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)

    def generate(
        self,
        prompt: str,
        system: str | None = None,
        params: GenerationParams | None = None,
    ) -> str:
        params = params or self.default_params
        resp = self._client.post("/api/chat", json={
            "model": self.model,
            "messages": chat_messages(prompt, system),
            "stream": False,
            "options": {"temperature": params.temperature, "num_predict": params.max_tokens},
        })
        resp.raise_for_status()

        data = resp.json()
        if data.get("done_reason") == "length":
            logger.warning("%s output truncated at %d tokens", self.model, params.max_tokens)
        return data.get("message", {}).get("content", "")
