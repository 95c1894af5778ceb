"""Command handlers for the geology room."""

from __future__ import annotations

import shlex
import typing
from collections.abc import AsyncIterator
from collections.abc import Callable

from pydantic_ai import messages as ai_messages

from ore_geology.analysis import formatters
from ore_geology.analysis.assembler import FullAnalysis
from ore_geology.analysis.assembler import HeatmapScript
from ore_geology.analysis.assembler import NamedModule
from ore_geology.analysis.controller import View
from ore_geology.analysis.files import LocalFile
from ore_geology.analysis.parser import ParsedCommand
from ore_geology.analysis.search import find_module
from ore_geology.analysis.search import search
from ore_geology.analysis.validators import partition_accepted
from ore_geology.analysis.validators import validate_paths
from ore_geology.categories import Category
from ore_geology.locales import SUPPORTED_LOCALES

if typing.TYPE_CHECKING:
    from ore_geology.analysis.context import GeologyContext

NativeEvent = ai_messages.AgentStreamEvent

Handler = Callable[
    ["GeologyContext", ParsedCommand],
    AsyncIterator[NativeEvent],
]

HANDLERS: dict[str, Handler] = {}


def handler(name: str):
    """Decorator to register a command handler."""

    def decorator(fn: Handler) -> Handler:
        HANDLERS[name] = fn
        return fn

    return decorator


async def _yield_text(text: str):
    """Helper to yield a text response."""
    text_part = ai_messages.TextPart(text)
    yield ai_messages.PartStartEvent(index=0, part=text_part)
    yield ai_messages.PartEndEvent(index=0, part=text_part)


# --- Data Entry Handlers ---


@handler("show_inputs")
async def handle_show_inputs(ctx: GeologyContext, cmd: ParsedCommand):
    """Show the data-entry surface."""
    ctx.controller.set_view(View.INPUTS)
    async for event in _yield_text(formatters.format_inputs(ctx)):
        yield event


@handler("set_text")
async def handle_set_text(ctx: GeologyContext, cmd: ParsedCommand):
    """Replace the text of one category."""
    category = Category(cmd.args["category"])
    ctx.store.set_text(category, cmd.args["text"])
    text = ctx.locale.message("updated", label=ctx.locale.label(category))
    async for event in _yield_text(f"{text}\n"):
        yield event


@handler("attach")
async def handle_attach(ctx: GeologyContext, cmd: ParsedCommand):
    """Attach local files to a category."""
    locale = ctx.locale
    category = Category(cmd.args["category"])
    try:
        raw_paths = shlex.split(cmd.args["paths"])
    except ValueError as e:
        msg = locale.message("bad_paths", error=e)
        async for event in _yield_text(formatters.format_error(msg, locale)):
            yield event
        return

    paths, problems = validate_paths(raw_paths)
    accepted, rejected = partition_accepted(LocalFile(p) for p in paths)
    errors = [locale.message(key, name=raw) for key, raw in problems]
    errors.extend(locale.message("unsupported_file", name=f.name) for f in rejected)
    added = ctx.store.add_attachments(category, accepted)
    async for event in _yield_text(formatters.format_added(added, errors, locale)):
        yield event


@handler("remove_attachment")
async def handle_remove_attachment(ctx: GeologyContext, cmd: ParsedCommand):
    """Remove an attachment by id; the category is optional."""
    attachment_id = cmd.args["id"]
    if "category" in cmd.args:
        category = Category(cmd.args["category"])
    else:
        found = ctx.store.find_attachment(attachment_id)
        category = found[0] if found else None

    if category is not None and ctx.store.remove_attachment(category, attachment_id):
        text = f"{ctx.locale.ui('remove')}: `{attachment_id}`\n"
    else:
        text = formatters.format_warning(
            ctx.locale.message("no_attachment", id=attachment_id), ctx.locale
        )
    async for event in _yield_text(text):
        yield event


@handler("clear")
async def handle_clear(ctx: GeologyContext, cmd: ParsedCommand):
    """Clear all inputs and the last result."""
    ctx.store.clear()
    ctx.controller.reset()
    async for event in _yield_text(f"{ctx.locale.ui('clear')} ✓\n"):
        yield event


@handler("unknown_category")
async def handle_unknown_category(ctx: GeologyContext, cmd: ParsedCommand):
    """Report an unrecognized category name."""
    names = ", ".join(f"`{c.value}`" for c in Category)
    msg = ctx.locale.message("unknown_category", name=cmd.args["name"], names=names)
    async for event in _yield_text(formatters.format_error(msg, ctx.locale)):
        yield event


# --- Analysis Handlers ---


async def _submit(ctx: GeologyContext, mode):
    """Submit and render the outcome."""
    if not await ctx.controller.submit(mode):
        text = formatters.format_warning(ctx.locale.ui("analyzing"), ctx.locale)
    else:
        text = formatters.format_state(ctx)
    async for event in _yield_text(text):
        yield event


@handler("analyze")
async def handle_analyze(ctx: GeologyContext, cmd: ParsedCommand):
    """Run the full analysis."""
    async for event in _submit(ctx, FullAnalysis()):
        yield event


@handler("run_module")
async def handle_run_module(ctx: GeologyContext, cmd: ParsedCommand):
    """Run a single named module."""
    item = find_module(ctx.locale, cmd.args["module"])
    if item is None:
        msg = ctx.locale.message("no_module", key=cmd.args["module"])
        async for event in _yield_text(formatters.format_error(msg, ctx.locale)):
            yield event
        return
    async for event in _submit(ctx, NamedModule(item.label)):
        yield event


@handler("heatmap")
async def handle_heatmap(ctx: GeologyContext, cmd: ParsedCommand):
    """Generate the heat-map script."""
    async for event in _submit(ctx, HeatmapScript()):
        yield event


@handler("show_results")
async def handle_show_results(ctx: GeologyContext, cmd: ParsedCommand):
    """Show the current analysis state."""
    ctx.controller.set_view(View.RESULTS)
    async for event in _yield_text(formatters.format_state(ctx)):
        yield event


# --- Navigation Handlers ---


@handler("list_modules")
async def handle_list_modules(ctx: GeologyContext, cmd: ParsedCommand):
    """List the whole catalog."""
    result = search("", ctx.locale)
    async for event in _yield_text(formatters.format_search_results(result, ctx.locale)):
        yield event


@handler("search")
async def handle_search(ctx: GeologyContext, cmd: ParsedCommand):
    """Filter the catalog by a query."""
    result = search(cmd.args["query"], ctx.locale)
    async for event in _yield_text(formatters.format_search_results(result, ctx.locale)):
        yield event


@handler("set_view")
async def handle_set_view(ctx: GeologyContext, cmd: ParsedCommand):
    """Switch the active view and render it."""
    try:
        view = View(cmd.args["view"])
    except ValueError:
        names = ", ".join(f"`{v.value}`" for v in View)
        msg = ctx.locale.message("unknown_view", name=cmd.args["view"], names=names)
        async for event in _yield_text(formatters.format_error(msg, ctx.locale)):
            yield event
        return

    ctx.controller.set_view(view)
    if view is View.INPUTS:
        text = formatters.format_inputs(ctx)
    elif view is View.HEATMAP:
        text = formatters.format_heatmap_view(ctx)
    else:
        text = formatters.format_state(ctx)
    async for event in _yield_text(text):
        yield event


@handler("set_language")
async def handle_set_language(ctx: GeologyContext, cmd: ParsedCommand):
    """Switch the active locale."""
    code = cmd.args["code"]
    if code not in SUPPORTED_LOCALES:
        codes = ", ".join(f"`{c}`" for c in SUPPORTED_LOCALES)
        msg = ctx.locale.message("unsupported_language", code=code, codes=codes)
        async for event in _yield_text(formatters.format_error(msg, ctx.locale)):
            yield event
        return
    ctx.set_locale(code)
    async for event in _yield_text(f"{ctx.locale.name} ✓\n"):
        yield event


# --- Unknown/Fallback ---


@handler("help")
async def handle_help(ctx: GeologyContext, cmd: ParsedCommand):
    """Show the command reference."""
    async for event in _yield_text(formatters.format_help(ctx.locale)):
        yield event


@handler("unknown")
async def handle_unknown(ctx: GeologyContext, cmd: ParsedCommand):
    """Handle unknown commands."""
    async for event in _yield_text(formatters.format_help(ctx.locale)):
        yield event
