# tests/unit/cork_io/test_generics.py
# Unit tests for JSON helpers & CLI error exit

import json

import pytest
import typer

from cork.core.exceptions import JSONParsingError
from cork.cork_io.console import configure_console, reset_console
from cork.cork_io.generics import (
    ensure_parent,
    exit_with_error,
    read_json_safe,
    write_json_safe,
)


class TestJsonHelpers:

    # * Verify parent dirs are created on write & content reads back
    def test_write_then_read(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "config.json"
        write_json_safe({"theme": "mint"}, path)
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "mint"}
        assert read_json_safe(path) == {"theme": "mint"}

    # * Verify malformed JSON reports a numbered snippet
    def test_invalid_json_snippet(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{\n  "theme": "mint",\n  "tick_interval": ,\n}', encoding="utf-8")
        with pytest.raises(JSONParsingError) as exc_info:
            read_json_safe(path)
        message = str(exc_info.value)
        assert ">>>   3:" in message
        assert "Invalid JSON" in message

    # * Verify non-object JSON is rejected
    def test_non_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(JSONParsingError, match="got list"):
            read_json_safe(path)

    def test_ensure_parent(self, tmp_path):
        target = tmp_path / "a" / "b" / "file.txt"
        ensure_parent(target)
        assert target.parent.is_dir()


class TestExitWithError:

    # * Verify message is printed & Typer exit raised w/ the code
    def test_exit(self):
        console = configure_console(width=80, record=True)
        try:
            with pytest.raises(typer.Exit) as exc_info:
                exit_with_error("Target time 09:00 has already passed", code=3)
            assert exc_info.value.exit_code == 3
            assert "Error: Target time 09:00 has already passed" in console.export_text()
        finally:
            reset_console()
