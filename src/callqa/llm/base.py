"""LLM provider interface and per-task generation budgets.

Question-bank summaries are short bullet lists; analyst profiles are a
one-page write-up. Each caller passes the budget for its task, and every
provider maps it onto its own API's sampling arguments.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationParams:
    """Sampling temperature and output-token ceiling for one kind of request."""

    temperature: float
    max_tokens: int


SUMMARY_PARAMS = GenerationParams(temperature=0.3, max_tokens=400)
PROFILE_PARAMS = GenerationParams(temperature=0.7, max_tokens=1500)


def chat_messages(prompt: str, system: str | None = None) -> list[dict[str, str]]:
    """Role/content message list, system prompt first when given."""
    messages = [{"role": "system", "content": system}] if system else []
    messages.append({"role": "user", "content": prompt})
    return messages


class LLMProvider(ABC):
    """Interface for text generation used by summaries and analyst profiles."""

    default_params: GenerationParams = SUMMARY_PARAMS

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system: str | None = None,
        params: GenerationParams | None = None,
    ) -> str:
        """Generate a response from the LLM.

        Args:
            prompt: The user prompt.
            system: Optional system prompt.
            params: Budget for this request; ``default_params`` when omitted.

        Returns:
            Generated text response. Output cut off at ``max_tokens`` is
            returned as-is and logged.
        """

    @classmethod
    def provider_name(cls) -> str:
        """Return human-readable provider name."""
        return cls.__name__
