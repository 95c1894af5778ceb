"""Tests for the backend session and request payloads."""

import pytest
from pydantic_ai import messages as ai_messages
from pydantic_ai.models.function import AgentInfo
from pydantic_ai.models.function import FunctionModel

from ore_geology.analysis.parts import AnalysisRequest
from ore_geology.analysis.parts import BinaryPart
from ore_geology.analysis.parts import TextPart
from ore_geology.analysis.session import GeminiSession
from ore_geology.analysis.session import create_session
from ore_geology.analysis.session import to_user_content
from ore_geology.config import AppConfig
from ore_geology.errors import BackendError
from ore_geology.errors import ConfigurationError


@pytest.fixture
def request_with_image():
    return AnalysisRequest(
        system_instruction="You are an economic geologist.",
        parts=(
            TextPart(content="Perform a full analysis."),
            BinaryPart.from_bytes(b"\x89PNG", "image/png"),
        ),
    )


def _user_prompt(messages):
    for message in messages:
        if isinstance(message, ai_messages.ModelRequest):
            for part in message.parts:
                if isinstance(part, ai_messages.UserPromptPart):
                    return part.content
    return None


class TestCreateSession:
    """Credential handling."""

    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)

        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            create_session(AppConfig())

    def test_blank_key_raises(self):
        config = AppConfig(environment={"GEMINI_API_KEY": "  ", "API_KEY": ""})
        with pytest.raises(ConfigurationError):
            create_session(config)

    def test_key_from_environment(self):
        config = AppConfig(
            extra_config={"temperature": 0.2},
            environment={"GEMINI_API_KEY": "test-key"},
        )
        session = create_session(config)
        assert isinstance(session, GeminiSession)
        assert session.temperature == 0.2


class TestGenerate:
    """Generation through a function model."""

    @pytest.mark.asyncio
    async def test_sends_parts_and_temperature(self, request_with_image):
        seen = {}

        def respond(messages: list[ai_messages.ModelMessage], info: AgentInfo):
            seen["prompt"] = _user_prompt(messages)
            seen["settings"] = info.model_settings
            return ai_messages.ModelResponse(parts=[ai_messages.TextPart("Epithermal Au.")])

        session = GeminiSession(FunctionModel(respond), temperature=0.4)
        text = await session.generate(request_with_image)

        assert text == "Epithermal Au."
        prompt = seen["prompt"]
        assert prompt[0] == "Perform a full analysis."
        assert isinstance(prompt[1], ai_messages.BinaryContent)
        assert prompt[1].data == b"\x89PNG"
        assert prompt[1].media_type == "image/png"
        assert seen["settings"]["temperature"] == 0.4

    @pytest.mark.asyncio
    async def test_empty_output_is_backend_error(self, request_with_image):
        def respond(messages, info):
            return ai_messages.ModelResponse(parts=[ai_messages.TextPart("   ")])

        with pytest.raises(BackendError):
            await GeminiSession(FunctionModel(respond), 0.4).generate(request_with_image)

    @pytest.mark.asyncio
    async def test_model_failure_is_backend_error(self, request_with_image):
        def respond(messages, info):
            raise RuntimeError("quota exceeded")

        with pytest.raises(BackendError, match="quota exceeded"):
            await GeminiSession(FunctionModel(respond), 0.4).generate(request_with_image)


class TestWireShape:
    """Request body layout."""

    def test_to_wire(self, request_with_image):
        body = request_with_image.to_wire("gemini-3-pro-preview", 0.4)

        assert body["model"] == "gemini-3-pro-preview"
        assert body["systemInstruction"] == "You are an economic geologist."
        assert body["temperature"] == 0.4
        assert body["contents"]["role"] == "user"
        text, binary = body["contents"]["parts"]
        assert text == {"text": "Perform a full analysis."}
        assert binary["inlineData"]["mimeType"] == "image/png"
        assert binary["inlineData"]["data"] == "iVBORw=="

    def test_prompt_must_come_first(self):
        with pytest.raises(ValueError):
            AnalysisRequest(
                system_instruction="x",
                parts=(BinaryPart.from_bytes(b"x", "image/png"),),
            )

    def test_to_user_content(self):
        assert to_user_content(TextPart(content="hi")) == "hi"
        content = to_user_content(BinaryPart.from_bytes(b"abc", "application/pdf"))
        assert content.data == b"abc"
        assert content.media_type == "application/pdf"
