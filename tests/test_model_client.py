"""Tests for the Responses API wrapper and reply-text assembly."""

import asyncio
import logging
import re
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from playforge.config import Settings
from playforge.models.conversation import Conversation, ImagePart, Message, TextPart
from playforge.services.model_client import ModelClient, assemble_output_text


def _conversation() -> Conversation:
    return Conversation(
        messages=[
            Message(role="system", content=[TextPart(text="sys")]),
            Message(
                role="user",
                content=[TextPart(text="make a game"), ImagePart(image_url="data:image/png;base64,AAAA")],
            ),
        ]
    )


def _fake_openai(**create_kwargs) -> MagicMock:
    client = MagicMock()
    client.responses.create = AsyncMock(**create_kwargs)
    return client


class TestGetOutputText:
    def test_sends_model_and_serialised_conversation(self):
        fake = _fake_openai(return_value=SimpleNamespace(output_text="hello", output=[]))
        model_client = ModelClient(fake, "gpt-test")

        result = asyncio.run(model_client.get_output_text(_conversation()))

        assert result == "hello"
        fake.responses.create.assert_awaited_once()
        kwargs = fake.responses.create.await_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["input"] == [
            {"role": "system", "content": [{"type": "input_text", "text": "sys"}]},
            {
                "role": "user",
                "content": [
                    {"type": "input_text", "text": "make a game"},
                    {"type": "input_image", "image_url": "data:image/png;base64,AAAA", "detail": "auto"},
                ],
            },
        ]

    def test_logs_model_and_duration(self, caplog):
        fake = _fake_openai(return_value=SimpleNamespace(output_text="hello", output=[]))
        with caplog.at_level(logging.INFO, logger="playforge.services.model_client"):
            asyncio.run(ModelClient(fake, "gpt-test").get_output_text(_conversation()))
        messages = [r.getMessage() for r in caplog.records]
        assert "Model call start (gpt-test)" in messages
        assert any(re.match(r"Model call end \(gpt-test\) in \d+ ms$", m) for m in messages)

    def test_upstream_errors_propagate(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/responses")
        fake = _fake_openai(side_effect=openai.APIConnectionError(request=request))
        model_client = ModelClient(fake, "gpt-test")

        with pytest.raises(openai.APIConnectionError):
            asyncio.run(model_client.get_output_text(_conversation()))
        assert fake.responses.create.await_count == 1

    def test_from_settings(self):
        settings = Settings(openai_api_key="sk-test", model="gpt-custom", openai_timeout=12.5)
        model_client = ModelClient.from_settings(settings)
        assert model_client.model == "gpt-custom"
        assert isinstance(model_client._client, openai.AsyncOpenAI)
        assert model_client._client.max_retries == 0


class TestAssembleOutputText:
    def test_prefers_output_text(self):
        response = SimpleNamespace(
            output_text="direct",
            output=[SimpleNamespace(content=[SimpleNamespace(type="output_text", text="ignored")])],
        )
        assert assemble_output_text(response) == "direct"

    def test_falls_back_to_output_items(self):
        response = SimpleNamespace(
            output_text="",
            output=[
                SimpleNamespace(type="reasoning", content=None),
                SimpleNamespace(
                    content=[
                        SimpleNamespace(type="output_text", text="first"),
                        SimpleNamespace(type="refusal", refusal="no"),
                        SimpleNamespace(type="output_text", text="second"),
                    ]
                ),
                SimpleNamespace(content=[SimpleNamespace(type="output_text", text="third")]),
            ],
        )
        assert assemble_output_text(response) == "first\nsecond\nthird"

    def test_accepts_dicts_and_nested_values(self):
        response = {
            "output": [
                {"content": [{"type": "output_text", "text": {"value": "a"}}]},
                {"content": [{"type": "output_text", "text": "b"}]},
            ]
        }
        assert assemble_output_text(response) == "a\nb"

    def test_missing_output_gives_empty_string(self):
        assert assemble_output_text(SimpleNamespace()) == ""
        assert assemble_output_text({"output_text": None, "output": []}) == ""
