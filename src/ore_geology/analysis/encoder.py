"""Turns attachment file handles into request parts."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ore_geology.analysis.files import DEFAULT_MIME_TYPE
from ore_geology.analysis.files import FileHandle
from ore_geology.analysis.parts import BinaryPart
from ore_geology.analysis.parts import Part
from ore_geology.analysis.parts import TextPart
from ore_geology.analysis.store import TEXT_EXTENSIONS
from ore_geology.errors import EncodingError

logger = logging.getLogger(__name__)


def is_text_file(file: FileHandle) -> bool:
    """Text when the mime type says so or the extension is text-like."""
    mime_type = (file.mime_type or "").lower()
    return mime_type.startswith("text/") or file.name.lower().endswith(TEXT_EXTENSIONS)


def text_marker(name: str) -> str:
    return f"[File Attachment: {name}]"


class AttachmentEncoder:
    """Reads attachments and encodes them as text or binary parts."""

    async def encode(self, file: FileHandle) -> Part:
        """Encode one file.

        Raises:
            EncodingError: the file could not be read or decoded.
        """
        try:
            if is_text_file(file):
                text = await file.read_text()
                return TextPart(content=f"\n{text_marker(file.name)}\n{text}\n")
            raw = await file.read_bytes()
        except UnicodeDecodeError as e:
            logger.warning(f"[ENCODE] {file.name} is not valid UTF-8: {e}")
            raise EncodingError(file.name, "unsupported text encoding") from e
        except OSError as e:
            logger.warning(f"[ENCODE] Failed to read {file.name}: {e}")
            raise EncodingError(file.name, str(e) or type(e).__name__) from e
        return BinaryPart.from_bytes(raw, file.mime_type or DEFAULT_MIME_TYPE)

    async def encode_all(self, files: Sequence[FileHandle]) -> list[Part]:
        """Encode concurrently and join on all of them.

        Result order follows ``files``, not completion order. When several
        files fail, the first one in order is reported.
        """
        results = await asyncio.gather(
            *(self.encode(f) for f in files), return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)
