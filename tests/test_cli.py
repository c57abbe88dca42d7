"""Tests for the click entry point."""

import json

import pytest
from click.testing import CliRunner

from taskbot import cli
from taskbot.config import Config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(cli, "load_config", lambda: Config())


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "tasks.json"


def invoke(data_file, *args, input=None):
    runner = CliRunner()
    return runner.invoke(cli.main, ["--data-file", str(data_file), *args], input=input)


class TestRun:
    def test_adds_and_persists(self, data_file):
        result = invoke(data_file, "run", "todo", "read", "book")
        assert result.exit_code == 0
        assert "[T][ ] read book" in result.output

        records = json.loads(data_file.read_text())
        assert records == [{"type": "todo", "description": "read book", "done": False}]

    def test_failure_is_reported_not_raised(self, data_file):
        invoke(data_file, "run", "todo", "read", "book")
        result = invoke(data_file, "run", "mark", "5")
        assert result.exit_code == 0
        assert "no task with that number" in result.output

    def test_corrupt_file_warns_and_starts_empty(self, data_file):
        data_file.write_text("garbage")
        result = invoke(data_file, "run", "list")
        assert result.exit_code == 0
        assert "Your list is empty." in result.output

    def test_corrupt_file_is_backed_up_not_overwritten(self, data_file):
        original = '[{"type":"todo","description":"keep me","done":false},]'
        data_file.write_text(original)

        result = invoke(data_file, "run", "list")

        assert result.exit_code == 0
        backup = data_file.with_name(data_file.name + ".bak")
        assert backup.read_text() == original
        assert json.loads(data_file.read_text()) == []


class TestList:
    def test_plain(self, data_file):
        invoke(data_file, "run", "deadline", "submit", "report", "by", "2024-12-01", "1800")
        result = invoke(data_file, "list")
        assert result.exit_code == 0
        assert "1. [D][ ] submit report (by: Dec 01 2024 18:00)" in result.output

    def test_json(self, data_file):
        invoke(data_file, "run", "todo", "read", "book")
        result = invoke(data_file, "list", "--json")
        assert json.loads(result.output)[0]["description"] == "read book"

    def test_empty(self, data_file):
        result = invoke(data_file, "list")
        assert "No tasks." in result.output


class TestFind:
    def test_matches(self, data_file):
        invoke(data_file, "run", "todo", "read", "book")
        invoke(data_file, "run", "todo", "water", "plants")
        result = invoke(data_file, "find", "book")
        assert "read book" in result.output
        assert "plants" not in result.output


class TestChat:
    def test_session_until_bye(self, data_file):
        result = invoke(data_file, "chat", input="todo read book\n\nlist\nbye\n")
        assert result.exit_code == 0
        assert "Hello! I'm Xzzzbot" in result.output
        assert "Xzzzbot: Here are the tasks in your list:" in result.output
        assert "Bye. Hope to see you again soon!" in result.output
        assert "read book" in data_file.read_text()

    def test_default_command_is_chat(self, data_file):
        result = invoke(data_file, input="bye\n")
        assert result.exit_code == 0
        assert "Hello! I'm Xzzzbot" in result.output

    def test_bye_after_corrupt_load_keeps_backup(self, data_file):
        data_file.write_bytes(b"\xff\xfe not text")
        result = invoke(data_file, "chat", input="bye\n")
        assert result.exit_code == 0
        assert "couldn't load" in result.output
        assert data_file.with_name(data_file.name + ".bak").read_bytes() == b"\xff\xfe not text"

    def test_eof_saves(self, data_file):
        result = invoke(data_file, "chat", input="todo read book\n")
        assert result.exit_code == 0
        assert "read book" in data_file.read_text()
