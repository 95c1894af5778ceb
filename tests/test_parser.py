"""Tests for the keyword command parser."""

import pytest

from ore_geology.analysis.parser import parse_command


class TestExactCommands:
    @pytest.mark.parametrize(
        "prompt,command",
        [
            ("help", "help"),
            ("?", "help"),
            ("inputs", "show_inputs"),
            ("CLEAR", "clear"),
            ("analyze", "analyze"),
            ("Run Full Analysis", "analyze"),
            ("heatmap", "heatmap"),
            ("Generate Python Script", "heatmap"),
            ("modules", "list_modules"),
            ("results", "show_results"),
            ("  status  ", "show_results"),
            ("what is this", "unknown"),
        ],
    )
    def test_command(self, prompt, command):
        assert parse_command(prompt).command == command


class TestSetText:
    def test_text_kept_verbatim(self):
        cmd = parse_command("set field Andesite host,\n  quartz veins ")
        assert cmd.command == "set_text"
        assert cmd.args == {"category": "field", "text": "Andesite host,\n  quartz veins"}

    def test_alias(self):
        cmd = parse_command("set geochem Cu 0.8%")
        assert cmd.args["category"] == "geochemistry"

    def test_empty_text_clears(self):
        cmd = parse_command("set microscopy")
        assert cmd.command == "set_text"
        assert cmd.args["text"] == ""

    def test_unknown_category(self):
        cmd = parse_command("set mantle plume")
        assert cmd.command == "unknown_category"
        assert cmd.args == {"name": "mantle"}


class TestAttachAndRemove:
    def test_attach(self):
        cmd = parse_command('attach hand "/tmp/my sample.jpg" /tmp/b.png')
        assert cmd.command == "attach"
        assert cmd.args["category"] == "handSpecimen"
        assert cmd.args["paths"] == '"/tmp/my sample.jpg" /tmp/b.png'

    def test_remove(self):
        cmd = parse_command("remove remote abc123")
        assert cmd.command == "remove_attachment"
        assert cmd.args == {"category": "remoteSensing", "id": "abc123"}

    def test_remove_by_id_only(self):
        cmd = parse_command("remove abc123")
        assert cmd.command == "remove_attachment"
        assert cmd.args == {"id": "abc123"}


class TestNavigation:
    def test_module(self):
        cmd = parse_command("module 3")
        assert cmd.command == "run_module"
        assert cmd.args == {"module": "3"}

    def test_search(self):
        cmd = parse_command("search Ore")
        assert cmd.command == "search"
        assert cmd.args == {"query": "Ore"}

    def test_bare_search_is_empty_query(self):
        assert parse_command("find").args == {"query": ""}

    def test_language(self):
        cmd = parse_command("language UR")
        assert cmd.command == "set_language"
        assert cmd.args == {"code": "ur"}

    def test_view(self):
        cmd = parse_command("view heatmap")
        assert cmd.command == "set_view"
        assert cmd.args == {"view": "heatmap"}
