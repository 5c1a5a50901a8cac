"""Tests for relkit.output.console module."""

from __future__ import annotations

import pytest

from relkit.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.DIM) == "dim"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("git fetch --tags origin", Style.DIM)
        assert console.outputs == [OutputRecord("git fetch --tags origin", Style.DIM)]

    def test_error_goes_to_stderr_with_hint(self) -> None:
        console = MockConsole()
        console.error("gh: missing", hint="Install GitHub CLI")

        assert console.has_error()
        assert console.outputs[0].stderr is True
        hint = OutputRecord("hint: Install GitHub CLI", Style.DIM, stderr=True)
        assert console.outputs[1] == hint
        assert console.stderr_text == "error: gh: missing\nhint: Install GitHub CLI"

    def test_error_without_hint(self) -> None:
        console = MockConsole()
        console.error("dirty")
        assert console.messages == ["error: dirty"]

    def test_progress_is_not_stderr(self) -> None:
        console = MockConsole()
        console.print("step")
        console.info("note")
        console.success("done")
        assert console.stderr_text == ""
        assert console.has_success()

    def test_find(self) -> None:
        console = MockConsole()
        console.print("latest tag is 0.2.0")
        console.print("other")
        assert [o.message for o in console.find("0.2.0")] == ["latest tag is 0.2.0"]

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.newline()


class TestRichConsole:
    def test_streams(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("progress [0.2.1]")
        console.error("boom", hint="retry")

        captured = capsys.readouterr()
        assert "progress [0.2.1]" in captured.out
        assert "boom" in captured.err
        assert "hint: retry" in captured.err
        assert "boom" not in captured.out

    def test_long_diagnostic_stays_on_one_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        path = "/tmp/" + "/".join(["very-long-directory-name"] * 12) + "/.env"
        hint = "HTTP 401: Bad credentials " + "x" * 150

        RichConsole().error(f"env file not found: {path}", hint=hint)

        lines = capsys.readouterr().err.splitlines()
        assert lines == [f"error: env file not found: {path}", f"hint: {hint}"]

    def test_long_progress_stays_on_one_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        message = "loaded 1 variable(s) from /tmp/" + "nested/" * 20 + ".env"

        RichConsole().print(message)

        assert capsys.readouterr().out.splitlines() == [message]
