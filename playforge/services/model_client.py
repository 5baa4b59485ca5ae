"""Thin async wrapper around the OpenAI Responses API."""

import logging
import time
from typing import Any, List

import httpx
from openai import AsyncOpenAI

from playforge.config import Settings
from playforge.models.conversation import Conversation

logger = logging.getLogger(__name__)


class ModelClient:
    """Submit a conversation to the configured model and return its reply text.

    A single request is made per call.  Transport and API errors
    (``openai.OpenAIError``, ``httpx.HTTPError``) propagate unchanged.
    """

    def __init__(self, client: AsyncOpenAI, model: str) -> None:
        self._client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "ModelClient":
        client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=httpx.Timeout(settings.openai_timeout, connect=10.0),
            max_retries=0,
        )
        return cls(client, settings.model)

    async def get_output_text(self, conversation: Conversation) -> str:
        started_at = time.perf_counter()
        logger.info("Model call start (%s)", self.model)
        response = await self._client.responses.create(
            model=self.model,
            input=conversation.to_input(),
        )
        duration_ms = int((time.perf_counter() - started_at) * 1000)
        logger.info("Model call end (%s) in %d ms", self.model, duration_ms)
        return assemble_output_text(response)


def assemble_output_text(response: Any) -> str:
    """Return the reply text of a Responses API result.

    Uses the ``output_text`` convenience field when it is non-empty, otherwise
    joins every ``output_text`` content part of every output item with
    newlines, in order.  Accepts SDK objects as well as plain dicts.
    """
    output_text = _field(response, "output_text")
    if output_text:
        return output_text

    parts: List[str] = []
    for item in _field(response, "output") or []:
        for content in _field(item, "content") or []:
            if _field(content, "type") != "output_text":
                continue
            text = _part_text(content)
            if text:
                parts.append(text)
    return "\n".join(parts)


def _part_text(content: Any) -> str:
    """Text of a content part; some payloads nest it as ``{"value": ...}``."""
    text = _field(content, "text")
    if isinstance(text, str):
        return text
    value = _field(text, "value")
    return value if isinstance(value, str) else ""


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)

