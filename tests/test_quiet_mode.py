"""Tests for quiet mode suppressing non-error rich output."""

import io

from rich.console import Console

from llmarkup.core.errors import custom_theme
from llmarkup.quiet import disable_quiet_mode, enable_quiet_mode


def _console():
    buffer = io.StringIO()
    return Console(file=buffer, theme=custom_theme, force_terminal=False, width=200), buffer


def test_quiet_mode_suppresses_regular_output():
    console, buffer = _console()
    enable_quiet_mode()
    console.print("[green]Wrote a.ts[/green]")
    assert buffer.getvalue() == ""


def test_quiet_mode_lets_errors_through():
    console, buffer = _console()
    enable_quiet_mode()
    console.print("[red]Error: bad markup[/red]")
    console.print("plain message", style="error")
    output = buffer.getvalue()
    assert "Error: bad markup" in output
    assert "plain message" in output


def test_enable_twice_then_disable_restores_output():
    console, buffer = _console()
    enable_quiet_mode()
    enable_quiet_mode()
    console.print("hidden")
    disable_quiet_mode()
    console.print("visible")
    assert "hidden" not in buffer.getvalue()
    assert "visible" in buffer.getvalue()


def test_output_resumes_after_disable():
    console, buffer = _console()
    enable_quiet_mode()
    disable_quiet_mode()
    console.print("visible")
    assert "visible" in buffer.getvalue()
