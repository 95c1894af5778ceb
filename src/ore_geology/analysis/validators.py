"""Validation for files offered as attachments."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ore_geology.analysis.files import FileHandle

# Mirrors the upload picker: images, PDF, CSV, JSON, plain text, Markdown
ACCEPTED_EXTENSIONS = frozenset({".pdf", ".csv", ".json", ".txt", ".md"})
ACCEPTED_MIME_TYPES = frozenset({
    "application/pdf",
    "text/csv",
    "application/json",
    "text/plain",
    "text/markdown",
})


def is_accepted(file: FileHandle) -> bool:
    """Whether a file falls inside the attachment acceptance surface."""
    mime_type = (file.mime_type or "").lower()
    if mime_type.startswith("image/") or mime_type in ACCEPTED_MIME_TYPES:
        return True
    return Path(file.name).suffix.lower() in ACCEPTED_EXTENSIONS


def partition_accepted(
    files: Iterable[FileHandle],
) -> tuple[list[FileHandle], list[FileHandle]]:
    """Split files into (accepted, rejected), keeping order."""
    accepted, rejected = [], []
    for file in files:
        (accepted if is_accepted(file) else rejected).append(file)
    return accepted, rejected


def validate_paths(
    paths: Iterable[str],
) -> tuple[list[Path], list[tuple[str, str]]]:
    """Resolve user-typed paths.

    Returns:
        Tuple of (existing_files, problems). Each problem is a
        ``(message_key, raw_path)`` pair for the locale tables.
    """
    found, errors = [], []
    for raw in paths:
        path = Path(raw).expanduser()
        if not path.exists():
            errors.append(("file_not_found", raw))
        elif not path.is_file():
            errors.append(("not_a_file", raw))
        else:
            found.append(path)
    return found, errors
