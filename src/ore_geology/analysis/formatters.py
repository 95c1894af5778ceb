"""Output formatting for the geology room."""

from __future__ import annotations

import typing

from ore_geology.analysis.assembler import HeatmapScript
from ore_geology.analysis.controller import Failure
from ore_geology.analysis.controller import Idle
from ore_geology.analysis.controller import Submitting
from ore_geology.analysis.controller import Success
from ore_geology.analysis.store import Attachment
from ore_geology.categories import CATEGORY_ORDER

if typing.TYPE_CHECKING:
    from ore_geology.analysis.context import GeologyContext
    from ore_geology.analysis.search import SearchResult
    from ore_geology.locales import LocaleProvider

KIND_ICONS = {
    "image": "🖼",
    "pdf": "📄",
    "text": "📝",
    "other": "📎",
}


def format_attachment(att: Attachment, locale: LocaleProvider) -> str:
    """One attachment line with its removable id."""
    icon = KIND_ICONS[att.kind.value]
    preview = f" ({locale.ui('preview')} `{att.preview.ref}`)" if att.preview else ""
    return f"  - {icon} {att.name} `{att.id}`{preview}\n"


def format_inputs(ctx: GeologyContext) -> str:
    """Format the data-entry surface: text and attachments per category."""
    locale = ctx.locale
    lines = [f"## {locale.ui('data_entry_heading')}\n\n"]
    for category in CATEGORY_ORDER:
        text = ctx.store.get_text(category)
        lines.append(f"### {locale.label(category)} (`{category.value}`)\n\n")
        if text:
            lines.append(f"{text}\n\n")
        else:
            lines.append(f"*{locale.placeholder(category)}*\n\n")
        attachments = ctx.store.attachments(category)
        if attachments:
            lines.append(f"**{locale.ui('attachments')}:**\n")
            lines.extend(format_attachment(att, locale) for att in attachments)
            lines.append("\n")
    return "".join(lines)


def format_added(
    attachments: list[Attachment], rejected: list[str], locale: LocaleProvider
) -> str:
    """Format the outcome of an attach command."""
    lines = []
    if attachments:
        lines.append(locale.message("attached", count=len(attachments)) + "\n")
        lines.extend(format_attachment(att, locale) for att in attachments)
    if rejected:
        lines.append(f"\n**{locale.ui('skipped')}:**\n")
        lines.extend(f"- {msg}\n" for msg in rejected)
    return "".join(lines) or f"{locale.ui('nothing_attached')}\n"


def format_search_results(result: SearchResult, locale: LocaleProvider) -> str:
    """Format grouped catalog matches."""
    if not result.has_matches:
        return f"*{locale.ui('no_results')}*\n"

    lines = []
    if result.data_input:
        lines.append(f"### {locale.ui('data_input_group')}\n\n")
        for item in result.data_input:
            lines.append(f"- **{item.label}** - `view inputs`\n")
        lines.append("\n")
    if result.modules:
        lines.append(f"### {locale.ui('modules')}\n\n")
        for item in result.modules:
            lines.append(f"- **{item.label}**: {item.description}\n")
        lines.append("\n")
    if result.tools:
        lines.append(f"### {locale.ui('tools')}\n\n")
        for item in result.tools:
            lines.append(f"- **{item.label}** - `view {item.view.value}`\n")
        lines.append("\n")
    return "".join(lines)


def format_state(ctx: GeologyContext) -> str:
    """Format the results surface for the current analysis state."""
    locale = ctx.locale
    state = ctx.controller.state
    if isinstance(ctx.controller.last_mode, HeatmapScript):
        heading = locale.ui("heatmap")
    else:
        heading = locale.ui("results")

    match state:
        case Idle():
            return f"## {heading}\n\n{locale.ui('no_analysis')}\n"
        case Submitting():
            return f"## {heading}\n\n{locale.ui('analyzing')}\n"
        case Success(text=text):
            return f"## {heading}\n\n{text}\n"
        case Failure(message=message):
            return format_error(message, locale)
        case _:
            typing.assert_never(state)


def format_error(message: str, locale: LocaleProvider) -> str:
    """Format error message."""
    return f"## {locale.ui('error_heading')}\n\n{message}\n"


def format_warning(message: str, locale: LocaleProvider) -> str:
    """Format warning message."""
    return f"## {locale.ui('warning_heading')}\n\n{message}\n"


def format_help(locale: LocaleProvider) -> str:
    """Format help message with all available commands."""
    lines = [f"## {locale.ui('title')}\n\n"]
    lines.append(f"*{locale.ui('subtitle')}*\n\n")
    lines.append(locale.help)
    return "".join(lines)


def format_heatmap_view(ctx: GeologyContext) -> str:
    """Format the heat-map tool: logic flow plus any generated script."""
    locale = ctx.locale
    lines = [f"## {locale.ui('heatmap')}\n\n", f"### {locale.ui('logic_flow')}\n\n"]
    for i, step in enumerate(locale.heatmap_steps, 1):
        lines.append(f"{i}. **{step.title}** - {step.detail}\n")
    lines.append(f"\n`heatmap` - {locale.ui('generate_script')}\n")
    if isinstance(ctx.controller.last_mode, HeatmapScript) and ctx.controller.result:
        lines.append(f"\n### {locale.ui('generated_logic')}\n\n{ctx.controller.result}\n")
    return "".join(lines)
