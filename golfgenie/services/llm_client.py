"""
LLM Client - Chat access for the planner and the concierge.
Talks to any OpenAI-compatible endpoint (OpenAI, Mistral, OpenRouter,
Ollama); the "mock" provider keeps everything offline.
"""
import json
import logging
import re
from typing import Iterator, Optional

from openai import AsyncOpenAI

from ..config import Settings, get_llm_config, settings as default_settings

logger = logging.getLogger(__name__)

_CODE_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


class LLMClient:
    """Async chat client shared by the trip planner and the concierge."""

    def __init__(self, config: Optional[Settings] = None):
        config = config or default_settings
        provider = get_llm_config(config)
        self.provider = config.llm_provider
        self.temperature = provider["temperature"]
        self.max_tokens = provider["max_tokens"]

        if self.provider == "mock":
            from .mock_llm import MockLLMClient
            self._mock = MockLLMClient()
            self.client = None
            self.model = self._mock.model
        else:
            self._mock = None
            # Ollama ignores the key but the SDK insists on one
            self.client = AsyncOpenAI(
                api_key=provider["api_key"] or "unset",
                base_url=provider["base_url"]
            )
            self.model = provider["model"]
        logger.info(f"LLM client ready: provider={self.provider} model={self.model}")

    @property
    def is_mock(self) -> bool:
        """True when replies come from the offline concierge."""
        return self._mock is not None

    async def _complete(self, request: dict) -> str:
        response = await self.client.chat.completions.create(**request)
        return response.choices[0].message.content or ""

    async def chat(
        self,
        messages: list[dict],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False
    ) -> str:
        """
        Run one chat completion.

        Args:
            messages: Conversation as role/content dicts
            temperature: Per-call override of the configured temperature
            max_tokens: Per-call override of the configured token limit
            json_mode: Ask the provider for a JSON object reply

        Returns:
            The reply text ("" if the provider sent none)
        """
        if self.is_mock:
            return await self._mock.chat(messages, temperature, max_tokens, json_mode)

        request = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": max_tokens or self.max_tokens,
        }
        if not json_mode:
            return await self._complete(request)

        # Ollama and some OpenRouter models reject response_format
        try:
            return await self._complete({**request, "response_format": {"type": "json_object"}})
        except Exception as e:
            logger.warning(f"{self.provider} rejected JSON mode ({e}); retrying as plain chat")
            return await self._complete(request)

    async def chat_json(
        self,
        messages: list[dict],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> dict:
        """Run a JSON-mode completion and return the decoded object ({} if none)."""
        reply = await self.chat(messages, temperature, max_tokens, json_mode=True)
        return parse_json_response(reply)


def _json_candidates(text: str) -> Iterator[str]:
    yield text
    block = _CODE_BLOCK.search(text)
    if block:
        yield block.group(1).strip()
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        yield text[start:end + 1]


def parse_json_response(text: str) -> dict:
    """
    Decode the JSON object in a model reply.

    Tries the whole reply, then a fenced code block, then the outermost
    braces. Anything that is not a JSON object yields an empty dict.
    """
    for candidate in _json_candidates((text or "").strip()):
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed
    return {}


# Global LLM client instance
llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get or create the global LLM client."""
    global llm_client
    if llm_client is None:
        llm_client = LLMClient()
    return llm_client
