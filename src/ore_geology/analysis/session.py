"""Per-submission backend session.

A session is created for every submission and dropped afterwards, so no
client state outlives a request.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from pydantic_ai import Agent
from pydantic_ai import messages as ai_messages
from pydantic_ai.models import Model

from ore_geology.analysis.parts import AnalysisRequest
from ore_geology.analysis.parts import BinaryPart
from ore_geology.analysis.parts import Part
from ore_geology.analysis.parts import TextPart
from ore_geology.errors import BackendError
from ore_geology.errors import ConfigurationError

if typing.TYPE_CHECKING:
    from ore_geology.config import AppConfig

logger = logging.getLogger(__name__)


class AnalysisSession(typing.Protocol):
    """One remote generation call."""

    async def generate(self, request: AnalysisRequest) -> str: ...


SessionFactory = Callable[[], AnalysisSession]


def to_user_content(part: Part) -> str | ai_messages.BinaryContent:
    """Convert a request part into pydantic-ai user content."""
    match part:
        case TextPart(content=content):
            return content
        case BinaryPart():
            return ai_messages.BinaryContent(
                data=part.decoded(), media_type=part.mime_type
            )
        case _:
            typing.assert_never(part)


class GeminiSession:
    """Runs a request through a pydantic-ai agent at a fixed temperature."""

    def __init__(self, model: Model | str, temperature: float):
        self.model = model
        self.temperature = temperature

    async def generate(self, request: AnalysisRequest) -> str:
        """Send the request and return the generated text.

        Raises:
            BackendError: the call failed or produced no text.
        """
        agent = Agent(self.model, system_prompt=request.system_instruction)
        user_prompt = [to_user_content(part) for part in request.parts]
        try:
            result = await agent.run(
                user_prompt,
                model_settings={"temperature": self.temperature},
            )
        except Exception as e:
            logger.error(f"[SESSION] Backend call failed: {e}", exc_info=True)
            raise BackendError(str(e)) from e

        text = result.output
        if not text or not text.strip():
            logger.warning("[SESSION] Backend returned no text")
            raise BackendError("Backend returned no analysis text")
        return text


def _get_model(api_key: str, model_name: str) -> Model:
    """Create the Gemini model for one session."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=api_key)
    return GoogleModel(model_name, provider=provider)


def create_session(config: AppConfig) -> GeminiSession:
    """Build a fresh session from config.

    Raises:
        ConfigurationError: no backend credential is configured.
    """
    api_key = config.get_api_key()
    if not api_key:
        raise ConfigurationError(
            f"API key missing: set {config.api_key_env} in the environment"
        )
    logger.debug(f"[SESSION] New session for model {config.model_name}")
    return GeminiSession(_get_model(api_key, config.model_name), config.temperature)
