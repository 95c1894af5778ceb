"""
Factory for the Ore & Economic Geology room.

Pattern: Command Room
Purpose: Collect multi-scale observations and run AI deposit analysis

Flow diagram:

```mermaid
flowchart TB
    User[User Command] --> Parse[Keyword Parser]
    Parse --> Edit[Edit Inputs / Attachments]
    Parse --> Submit[Submit Analysis]

    subgraph Submission
        Assemble[Assemble Request] --> Encode[Encode Attachments]
        Encode --> Backend[Gemini Call]
    end

    Submit --> Submission
    Submission --> Result[Result / Failure]
```
"""

from __future__ import annotations

import dataclasses
import logging
import pathlib
import typing
from collections import abc

from pydantic_ai import messages as ai_messages
from pydantic_ai import run as ai_run
from pydantic_ai import tools as ai_tools

from ore_geology.analysis.context import GeologyContext
from ore_geology.analysis.handlers import HANDLERS
from ore_geology.analysis.handlers import handle_unknown
from ore_geology.analysis.parser import parse_command
from ore_geology.analysis.session import SessionFactory
from ore_geology.config import AppConfig
from ore_geology.config import load_config

# Configure logging with console output
logger = logging.getLogger("ore_geology")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

MessageHistory = typing.Sequence[ai_messages.ModelMessage]
NativeEvent = (
    ai_messages.AgentStreamEvent | ai_run.AgentRunResultEvent[typing.Any]
)


def _extract_prompt(message_history: MessageHistory | None) -> str:
    """Extract the user prompt from message history."""
    if not message_history:
        return ""
    last_msg = message_history[-1]
    if isinstance(last_msg, ai_messages.ModelRequest):
        for part in last_msg.parts:
            if isinstance(part, ai_messages.UserPromptPart):
                content = part.content
                return content if isinstance(content, str) else ""
    return ""


@dataclasses.dataclass
class GeologyAgent:
    """Agent that drives the geology room from keyword commands."""

    agent_config: AppConfig = dataclasses.field(default_factory=AppConfig)
    session_factory: SessionFactory | None = None

    output_type = None
    _context: GeologyContext | None = dataclasses.field(
        default=None, init=False, repr=False
    )

    @property
    def context(self) -> GeologyContext:
        """Room state, created on first use and kept for this agent."""
        if self._context is None:
            self._context = GeologyContext(self.agent_config, self.session_factory)
        return self._context

    async def handle(self, prompt: str) -> abc.AsyncIterator[NativeEvent]:
        """Dispatch one command to its handler."""
        cmd = parse_command(prompt)
        logger.debug(f"[ROOM] {cmd.command} {cmd.args}")
        command_handler = HANDLERS.get(cmd.command, handle_unknown)
        async for event in command_handler(self.context, cmd):
            yield event

    async def run_stream_events(
        self,
        output_type: typing.Any = None,
        message_history: MessageHistory | None = None,
        deferred_tool_results: typing.Any = None,
        deps: ai_tools.AgentDepsT = None,
        **kwargs: typing.Any,
    ) -> abc.AsyncIterator[NativeEvent]:
        """Stream the response to the latest user command."""
        user_prompt = _extract_prompt(message_history)

        response_parts = []
        async for event in self.handle(user_prompt):
            if isinstance(event, ai_messages.PartEndEvent):
                part = event.part
                if isinstance(part, ai_messages.TextPart):
                    response_parts.append(part.content)
            yield event

        yield ai_run.AgentRunResultEvent(result="".join(response_parts))


def create_geology_agent(
    agent_config: AppConfig | None = None,
    session_factory: SessionFactory | None = None,
    config_path: str | pathlib.Path | None = None,
) -> GeologyAgent:
    """Factory function to create the geology agent.

    An explicit ``agent_config`` wins over ``config_path``; with neither,
    defaults are used.
    """
    if agent_config is None and config_path is not None:
        agent_config = load_config(pathlib.Path(config_path))
        logger.info(f"[ROOM] Loaded config from {config_path}")
    return GeologyAgent(agent_config or AppConfig(), session_factory)
