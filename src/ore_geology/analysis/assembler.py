"""Builds the backend request from the stored inputs and a mode."""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass

from ore_geology.analysis.encoder import AttachmentEncoder
from ore_geology.analysis.parts import AnalysisRequest
from ore_geology.analysis.parts import TextPart
from ore_geology.analysis.store import InputSnapshot
from ore_geology.analysis.store import InputStore
from ore_geology.categories import CATEGORY_ORDER
from ore_geology.categories import Category

if typing.TYPE_CHECKING:
    from ore_geology.locales import LocaleProvider

logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = "N/A"
SUMMARY_HEADER = "--- INPUT DATA ---"


@dataclass(frozen=True)
class FullAnalysis:
    """Full multi-scale analysis."""


@dataclass(frozen=True)
class NamedModule:
    """A single named analysis module."""

    label: str


@dataclass(frozen=True)
class HeatmapScript:
    """Generate the geochemical heat-map script."""


AnalysisMode = FullAnalysis | NamedModule | HeatmapScript


FULL_ANALYSIS_PROMPT = """\
Perform a full Economic Geology Analysis based on the provided multi-scale data.
{summary}"""

NAMED_MODULE_PROMPT = """\
Run specific module analysis: {label}.
{summary}"""

HEATMAP_SCRIPT_PROMPT = """\
Generate a comprehensive Python script using pandas, numpy, and matplotlib/seaborn to create a geochemical heat map.

CRITICAL REQUIREMENT: The script must include clear, easily editable variables at the very top for FILE PATHS.

Structure the script code as follows:
1. CONFIGURATION SECTION (Top of script):
   - Define variable `DATA_FILE_PATH = "path/to/your/data.csv"` (Comment: User must replace this)
   - Define variable `OUTPUT_IMAGE_PATH = "path/to/your/output_heatmap.png"` (Comment: User must replace this)
   - Define variable `COORDINATE_COLS = ['X', 'Y']` (or similar placeholder)
   - Define variable `ELEMENT_COLS` based on the deposit type inferred from inputs.

2. LOGIC:
   - Load data from `DATA_FILE_PATH`.
   - Normalize element values (e.g., MinMaxScaler).
   - Weight elements based on the deposit model inferred from: {field} {geochemistry}
   - Calculate a Composite Heat Index.
   - Generate the visualization (e.g. Scatter or Interpolated Map).
   - Save the plot to `OUTPUT_IMAGE_PATH`.

3. INSTRUCTIONS:
   - Briefly explain how the user should change the paths.

Output ONLY the Python code and the instructions.
"""


def render_summary(texts: typing.Mapping[Category, str], locale: LocaleProvider) -> str:
    """One ``<label>: <text>`` line per category, in fixed order."""
    lines = ["", SUMMARY_HEADER]
    for category in CATEGORY_ORDER:
        value = texts.get(category, "") or EMPTY_PLACEHOLDER
        lines.append(f"{locale.label(category)}: {value}")
    return "\n".join(lines) + "\n"


def render_prompt(
    mode: AnalysisMode,
    texts: typing.Mapping[Category, str],
    locale: LocaleProvider,
) -> str:
    """Select and fill the prompt template for a mode."""
    match mode:
        case FullAnalysis():
            return FULL_ANALYSIS_PROMPT.format(summary=render_summary(texts, locale))
        case NamedModule(label=label):
            return NAMED_MODULE_PROMPT.format(
                label=label, summary=render_summary(texts, locale)
            )
        case HeatmapScript():
            return HEATMAP_SCRIPT_PROMPT.format(
                field=texts.get(Category.FIELD, ""),
                geochemistry=texts.get(Category.GEOCHEMISTRY, ""),
            )
        case _:
            typing.assert_never(mode)


class RequestAssembler:
    """Turns an input snapshot plus a mode into an ``AnalysisRequest``."""

    def __init__(
        self,
        store: InputStore,
        locale: LocaleProvider,
        encoder: AttachmentEncoder | None = None,
    ):
        self.store = store
        self.locale = locale
        self.encoder = encoder or AttachmentEncoder()

    async def build_request(self, mode: AnalysisMode) -> AnalysisRequest:
        """Assemble the request from a snapshot of the store.

        Raises:
            EncodingError: an attachment could not be read. No partial
                request is produced.
        """
        snapshot = self.store.snapshot()
        return await self.build_from_snapshot(snapshot, mode, self.locale)

    async def build_from_snapshot(
        self,
        snapshot: InputSnapshot,
        mode: AnalysisMode,
        locale: LocaleProvider,
    ) -> AnalysisRequest:
        """Prompt and instruction both come from ``locale``, bound before encoding."""
        prompt = render_prompt(mode, snapshot.texts, locale)
        attachments = snapshot.ordered_attachments()
        parts = await self.encoder.encode_all([att.file for att in attachments])
        logger.info(
            f"[ASSEMBLE] {type(mode).__name__}: prompt + {len(parts)} attachment part(s)"
        )
        return AnalysisRequest(
            system_instruction=locale.system_instruction,
            parts=(TextPart(content=prompt), *parts),
        )
