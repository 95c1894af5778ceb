"""Shared fixtures."""

import asyncio

import pytest

from ore_geology.analysis.files import UploadedFile


class SlowFile(UploadedFile):
    """Upload whose reads finish after a delay."""

    def __init__(self, filename, data, declared_type="", delay=0.0):
        super().__init__(filename, data, declared_type)
        self.delay = delay

    async def read_bytes(self):
        await asyncio.sleep(self.delay)
        return await super().read_bytes()


@pytest.fixture
def slow_file():
    """Factory for uploads with a read delay."""

    def make(name, data=b"x", mime_type="", delay=0.0):
        return SlowFile(name, data, mime_type, delay)

    return make


@pytest.fixture
def png_bytes():
    """Smallest recognizable PNG header plus payload."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
