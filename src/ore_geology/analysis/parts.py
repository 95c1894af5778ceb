"""Request parts and the assembled request."""

from __future__ import annotations

import base64
import typing

import pydantic


class TextPart(pydantic.BaseModel):
    """Literal text content."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: typing.Literal["text"] = "text"
    content: str

    def to_wire(self) -> dict:
        return {"text": self.content}


class BinaryPart(pydantic.BaseModel):
    """Base64-encoded bytes with their declared mime type."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: typing.Literal["binary"] = "binary"
    data: str = pydantic.Field(description="Base64-encoded file bytes")
    mime_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> BinaryPart:
        return cls(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)

    def decoded(self) -> bytes:
        return base64.b64decode(self.data)

    def to_wire(self) -> dict:
        return {"inlineData": {"data": self.data, "mimeType": self.mime_type}}


Part = typing.Annotated[
    TextPart | BinaryPart, pydantic.Field(discriminator="kind")
]


class AnalysisRequest(pydantic.BaseModel):
    """Backend-ready payload. ``parts[0]`` is always the prompt text."""

    model_config = pydantic.ConfigDict(frozen=True)

    system_instruction: str
    parts: tuple[Part, ...] = pydantic.Field(min_length=1)

    @pydantic.field_validator("parts")
    @classmethod
    def _prompt_first(cls, value: tuple[Part, ...]):
        if not isinstance(value[0], TextPart):
            raise ValueError("first part must be the prompt text")
        return value

    @property
    def prompt(self) -> str:
        return self.parts[0].content

    @property
    def attachment_parts(self) -> tuple[Part, ...]:
        return self.parts[1:]

    def to_wire(self, model: str, temperature: float) -> dict:
        """Request body in the backend's wire shape."""
        return {
            "model": model,
            "systemInstruction": self.system_instruction,
            "contents": {
                "role": "user",
                "parts": [part.to_wire() for part in self.parts],
            },
            "temperature": temperature,
        }
