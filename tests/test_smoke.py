# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Smoke tests for the query range package.

These tests verify basic functionality to catch obvious breakages during refactoring.
Run with: python -m pytest tests/test_smoke.py -v
"""

import io
import sys

import pytest

HAYSTACK = "haystackneedlehaystackneedlehaystack"


class TestPackageImports:
    """Test the top-level re-exports."""

    def test_top_level_api(self):
        from query_range import (
            QueryRangeIterator,
            transform_query,
            transform_all,
            __version__,
        )

        assert __version__ == "0.1.0"
        assert list(QueryRangeIterator("needle", HAYSTACK)) == [(8, 14), (22, 28)]
        assert transform_query("needle", HAYSTACK, str.upper).count("NEEDLE") == 2
        assert transform_all("needle", HAYSTACK, str.upper, str.upper) == HAYSTACK.upper()


class TestConfig:
    """Test YAML settings loading."""

    def test_settings_loaded(self):
        from query_range.config import get_settings

        settings = get_settings()
        assert settings["logging_level"] == "WARNING"
        assert settings["encoding"] == "utf-8"
        assert settings["default_query_transform"] == "upper"
        assert settings["default_other_transform"] == "identity"

    def test_get_setting_default(self):
        from query_range.config import get_setting

        assert get_setting("does_not_exist", 42) == 42

    def test_missing_config_file(self):
        from query_range.config import load_yaml_config

        with pytest.raises(FileNotFoundError):
            load_yaml_config("missing.yaml")


class TestLogging:
    def test_invalid_logging_level(self):
        from query_range.utils import setup_logging

        with pytest.raises(ValueError):
            setup_logging("LOUD")


class TestCli:
    """Test the command line entry point end to end."""

    @pytest.fixture
    def haystack_file(self, tmp_path):
        path = tmp_path / "haystack.txt"
        path.write_text(HAYSTACK, encoding="utf-8")
        return str(path)

    def test_ranges(self, haystack_file, capsys):
        from query_range.cli import main

        assert main(["ranges", "needle", "--file", haystack_file]) == 0
        output = capsys.readouterr().out
        assert output.count("'needle'") == 2
        assert "22" in output and "28" in output

    def test_ranges_gaps(self, haystack_file, capsys):
        from query_range.cli import main

        main(["ranges", "needle", "--file", haystack_file, "--gaps"])
        output = capsys.readouterr().out
        assert output.count("'haystack'") == 3

    def test_transform_defaults(self, haystack_file, capsys):
        from query_range.cli import main

        main(["transform", "needle", "--file", haystack_file])
        assert capsys.readouterr().out == "haystackNEEDLEhaystackNEEDLEhaystack"

    def test_transform_two_pass(self, haystack_file, capsys):
        from query_range.cli import main

        main(
            [
                "transform",
                "needle",
                "--file",
                haystack_file,
                "--query-transform",
                "upper",
                "--other-transform",
                "title",
                "--two-pass",
            ]
        )
        assert capsys.readouterr().out == "HaystackNEEDLEHaystackNEEDLEHaystack"

    def test_unknown_transform_exits(self, haystack_file):
        from query_range.cli import main

        with pytest.raises(SystemExit) as excinfo:
            main(["transform", "needle", "--file", haystack_file, "--query-transform", "reverse"])
        assert excinfo.value.code == 2

    def test_read_content_from_stdin(self):
        from query_range.cli import read_content

        data = io.BytesIO(HAYSTACK.encode("utf-8"))
        assert read_content(None, "utf-8", stdin=data) == HAYSTACK

    def test_stdin_decoded_with_configured_encoding(self):
        """Test that non-ASCII stdin gives code point offsets, not byte offsets."""
        from query_range.cli import read_content
        from query_range.range import QueryRangeIterator

        data = io.BytesIO("café needle".encode("utf-8"))
        content = read_content(None, "utf-8", stdin=data)
        assert content == "café needle"
        assert list(QueryRangeIterator("needle", content)) == [(5, 11)]

    def test_ranges_from_stdin_ignore_locale_encoding(self, monkeypatch, capsys):
        """Test that the CLI reads stdin with the settings encoding, not the stream's."""
        from query_range.cli import format_ranges, main

        stdin = io.TextIOWrapper(io.BytesIO("café needle".encode("utf-8")), encoding="latin-1")
        monkeypatch.setattr(sys, "stdin", stdin)

        assert main(["ranges", "needle"]) == 0
        output = capsys.readouterr().out
        assert output == format_ranges("needle", "café needle") + "\n"
        assert "6 |" not in output
