"""File handles accepted as attachments."""

from __future__ import annotations

import asyncio
import mimetypes
import typing
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from ore_geology.errors import HandleRevokedError

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(name: str) -> str:
    """Guess a mime type from a file name; empty string when unknown."""
    mime_type, _ = mimetypes.guess_type(name)
    if mime_type:
        return mime_type
    # Not registered on every platform
    if name.lower().endswith(".md"):
        return "text/markdown"
    return ""


@typing.runtime_checkable
class FileHandle(typing.Protocol):
    """A raw file handle as handed over by the user."""

    @property
    def name(self) -> str: ...

    @property
    def mime_type(self) -> str: ...

    async def read_bytes(self) -> bytes: ...

    async def read_text(self) -> str: ...


@dataclass
class LocalFile:
    """A file on the local filesystem, read on a worker thread."""

    path: Path
    declared_type: str | None = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def mime_type(self) -> str:
        if self.declared_type is not None:
            return self.declared_type
        return guess_mime_type(self.path.name)

    async def read_bytes(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)

    async def read_text(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")


@dataclass
class UploadedFile:
    """In-memory file: uploads, camera captures, pasted images."""

    filename: str
    data: bytes
    declared_type: str = ""
    revoked: bool = field(default=False, init=False)

    @property
    def name(self) -> str:
        return self.filename

    @property
    def mime_type(self) -> str:
        return self.declared_type or guess_mime_type(self.filename)

    def revoke(self) -> None:
        """Invalidate the handle; later reads fail."""
        self.revoked = True

    async def read_bytes(self) -> bytes:
        if self.revoked:
            raise HandleRevokedError(f"Handle for '{self.filename}' was revoked")
        return self.data

    async def read_text(self) -> str:
        return (await self.read_bytes()).decode("utf-8")


def camera_capture(data: bytes, mime_type: str = "image/jpeg") -> UploadedFile:
    """Wrap a camera frame as an upload; treated exactly like an image file."""
    extension = mimetypes.guess_extension(mime_type) or ".jpg"
    return UploadedFile(f"capture{extension}", data, mime_type)
