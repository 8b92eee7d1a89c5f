# topmark:header:start
#
#   project      : ValueText
#   file         : test_cli_render.py
#   file_relpath : tests/cli/test_cli_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `render` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli

from valuetext.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_render_literals() -> None:
    result = run_cli(["render", "[1, 'a', None]", "True", "'word'"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["[1, 'a', <null>]", "<true>", "word"]


def test_render_verbose() -> None:
    result = run_cli(["render", "--verbose", "{'key': (1,)}"])
    assert_SUCCESS(result)
    assert result.output.strip() == "dict {key = tuple (1,)}"


def test_render_reads_stdin() -> None:
    result = run_cli(["render", "-"], input_text="1\n'x'\n\n{2, 1}\n")
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["1", "'x'", "{1, 2}"]


def test_render_rejects_non_literals() -> None:
    result = run_cli(["render", "open('x')"])
    assert_exit(result, ExitCode.DATA_ERROR)
    assert "Not a Python literal" in result.output


def test_render_requires_input() -> None:
    result = run_cli(["render"])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "Nothing to render" in result.output


def test_render_with_settings_file(tmp_path: Path) -> None:
    config = tmp_path / "valuetext.toml"
    config.write_text("max_depth = 1\n", encoding="utf-8")
    result = run_cli(["render", "--config", str(config), "[[1]]"])
    assert_SUCCESS(result)
    assert result.output.strip() == "[<truncated list>]"


def test_render_with_invalid_settings_file(tmp_path: Path) -> None:
    config = tmp_path / "valuetext.toml"
    config.write_text("max_depth = 'deep'\n", encoding="utf-8")
    result = run_cli(["render", "--config", str(config), "1"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "max_depth" in result.output


def test_render_with_verbose_logging() -> None:
    result = run_cli(["-vvv", "render", "[1, 2]"])
    assert_SUCCESS(result)
    assert "[1, 2]" in result.output.splitlines()
