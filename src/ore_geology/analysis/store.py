"""Per-category input text and attachment store."""

from __future__ import annotations

import enum
import logging
import types
import uuid
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field

from ore_geology.analysis.files import FileHandle
from ore_geology.categories import CATEGORY_ORDER
from ore_geology.categories import Category

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".csv", ".json", ".md", ".txt")


class AttachmentKind(str, enum.Enum):
    IMAGE = "image"
    PDF = "pdf"
    TEXT = "text"
    OTHER = "other"


def classify(file: FileHandle) -> AttachmentKind:
    """Classify a file by declared mime type, then by extension."""
    mime_type = (file.mime_type or "").lower()
    name = file.name.lower()
    if mime_type.startswith("image/"):
        return AttachmentKind.IMAGE
    if mime_type == "application/pdf" or name.endswith(".pdf"):
        return AttachmentKind.PDF
    if mime_type.startswith("text/") or name.endswith(TEXT_EXTENSIONS):
        return AttachmentKind.TEXT
    return AttachmentKind.OTHER


@dataclass
class PreviewHandle:
    """Transient displayable reference to an image attachment."""

    ref: str
    file_name: str
    released: bool = False


class PreviewRegistry:
    """Allocates preview handles and tracks which are still live."""

    def __init__(self) -> None:
        self._live: dict[str, PreviewHandle] = {}

    def allocate(self, file: FileHandle) -> PreviewHandle:
        handle = PreviewHandle(ref=f"preview://{uuid.uuid4().hex}", file_name=file.name)
        self._live[handle.ref] = handle
        return handle

    def release(self, handle: PreviewHandle) -> None:
        """Release a handle. Releasing twice is an ownership bug."""
        if handle.released or handle.ref not in self._live:
            raise RuntimeError(f"Preview {handle.ref} already released")
        handle.released = True
        del self._live[handle.ref]

    @property
    def live_count(self) -> int:
        return len(self._live)


@dataclass
class Attachment:
    """A file attached to one category."""

    id: str
    file: FileHandle
    kind: AttachmentKind
    preview: PreviewHandle | None = None

    @property
    def name(self) -> str:
        return self.file.name


@dataclass(frozen=True)
class InputSnapshot:
    """Immutable view of the store taken at assembly time."""

    texts: Mapping[Category, str]
    attachments: Mapping[Category, tuple[Attachment, ...]]

    def ordered_attachments(self) -> list[Attachment]:
        """All attachments in category order, then insertion order."""
        return [att for c in CATEGORY_ORDER for att in self.attachments[c]]


@dataclass
class InputStore:
    """Holds free text and ordered attachments for every category."""

    previews: PreviewRegistry = field(default_factory=PreviewRegistry)
    _texts: dict[Category, str] = field(init=False)
    _attachments: dict[Category, list[Attachment]] = field(init=False)

    def __post_init__(self) -> None:
        self._texts = {c: "" for c in CATEGORY_ORDER}
        self._attachments = {c: [] for c in CATEGORY_ORDER}

    # --- Text ---

    def set_text(self, category: Category, value: str) -> None:
        self._texts[category] = value

    def get_text(self, category: Category) -> str:
        return self._texts[category]

    @property
    def texts(self) -> dict[Category, str]:
        return dict(self._texts)

    # --- Attachments ---

    def add_attachments(
        self, category: Category, files: Iterable[FileHandle]
    ) -> list[Attachment]:
        """Append files in order; images get a preview handle."""
        added = []
        for file in files:
            kind = classify(file)
            preview = self.previews.allocate(file) if kind is AttachmentKind.IMAGE else None
            added.append(Attachment(uuid.uuid4().hex, file, kind, preview))
        self._attachments[category].extend(added)
        logger.debug(f"[STORE] Added {len(added)} attachment(s) to {category.value}")
        return added

    def remove_attachment(self, category: Category, attachment_id: str) -> bool:
        """Remove by id and release its preview. Unknown ids are a no-op."""
        items = self._attachments[category]
        for index, att in enumerate(items):
            if att.id == attachment_id:
                del items[index]
                if att.preview is not None:
                    self.previews.release(att.preview)
                return True
        return False

    def attachments(self, category: Category) -> list[Attachment]:
        return list(self._attachments[category])

    def find_attachment(self, attachment_id: str) -> tuple[Category, Attachment] | None:
        for category in CATEGORY_ORDER:
            for att in self._attachments[category]:
                if att.id == attachment_id:
                    return category, att
        return None

    @property
    def attachment_count(self) -> int:
        return sum(len(items) for items in self._attachments.values())

    # --- Whole store ---

    def clear(self) -> None:
        """Release every preview, then reset text and attachments."""
        for items in self._attachments.values():
            for att in items:
                if att.preview is not None:
                    self.previews.release(att.preview)
        self.__post_init__()

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            texts=types.MappingProxyType(dict(self._texts)),
            attachments=types.MappingProxyType(
                {c: tuple(items) for c, items in self._attachments.items()}
            ),
        )
