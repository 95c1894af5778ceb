"""Command parser for the geology room."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ore_geology.categories import resolve_category


@dataclass
class ParsedCommand:
    """Parsed command with extracted arguments."""

    command: str
    args: dict[str, str]
    raw: str


def parse_command(prompt: str) -> ParsedCommand:
    """Parse user prompt into command and arguments.

    Simple keyword-based parser - no LLM overhead.
    """
    prompt = prompt.strip()
    lower = prompt.lower()

    # Exact matches first
    if lower in ("help", "?"):
        return ParsedCommand("help", {}, prompt)

    if lower in ("inputs", "show", "show inputs"):
        return ParsedCommand("show_inputs", {}, prompt)

    if lower in ("clear", "clear all"):
        return ParsedCommand("clear", {}, prompt)

    if lower in ("analyze", "analyse", "run", "run full analysis"):
        return ParsedCommand("analyze", {}, prompt)

    if lower in ("heatmap", "heat map", "generate python script", "generate script"):
        return ParsedCommand("heatmap", {}, prompt)

    if lower in ("modules", "catalog", "list modules"):
        return ParsedCommand("list_modules", {}, prompt)

    if lower in ("results", "result", "status"):
        return ParsedCommand("show_results", {}, prompt)

    # Pattern matches - order matters (more specific first)

    # Set text: "set <category> <text>"; text kept verbatim
    if match := re.match(r"set\s+(\S+)(?:\s(.*))?$", prompt, re.IGNORECASE | re.DOTALL):
        category = resolve_category(match.group(1))
        if category is None:
            return ParsedCommand("unknown_category", {"name": match.group(1)}, prompt)
        return ParsedCommand(
            "set_text",
            {"category": category.value, "text": match.group(2) or ""},
            prompt,
        )

    # Attach files: "attach <category> <path> [<path> ...]"
    if match := re.match(r"attach\s+(\S+)\s+(.+)", prompt, re.IGNORECASE):
        category = resolve_category(match.group(1))
        if category is None:
            return ParsedCommand("unknown_category", {"name": match.group(1)}, prompt)
        return ParsedCommand(
            "attach",
            {"category": category.value, "paths": match.group(2).strip()},
            prompt,
        )

    # Remove attachment: "remove <category> <id>"
    if match := re.match(r"remove\s+(\S+)\s+(\S+)$", prompt, re.IGNORECASE):
        category = resolve_category(match.group(1))
        if category is None:
            return ParsedCommand("unknown_category", {"name": match.group(1)}, prompt)
        return ParsedCommand(
            "remove_attachment",
            {"category": category.value, "id": match.group(2)},
            prompt,
        )

    # Remove by id alone: "remove <id>"
    if match := re.match(r"remove\s+(\S+)$", prompt, re.IGNORECASE):
        return ParsedCommand("remove_attachment", {"id": match.group(1)}, prompt)

    # Single module: "module <number or label>"
    if match := re.match(r"module\s+(.+)", prompt, re.IGNORECASE):
        return ParsedCommand("run_module", {"module": match.group(1).strip()}, prompt)

    # Search catalog: "search <query>" or "find <query>"
    if match := re.match(r"(?:search|find)(?:\s+(.*))?$", prompt, re.IGNORECASE):
        return ParsedCommand("search", {"query": (match.group(1) or "").strip()}, prompt)

    # Locale: "language ur" / "lang en"
    if match := re.match(r"(?:language|lang)\s+(\S+)", lower):
        return ParsedCommand("set_language", {"code": match.group(1)}, prompt)

    # View switching: "view results"
    if match := re.match(r"(?:view|open)\s+(\S+)", lower):
        return ParsedCommand("set_view", {"view": match.group(1)}, prompt)

    return ParsedCommand("unknown", {"input": prompt}, prompt)
