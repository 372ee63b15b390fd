"""Tests for the output module."""

import io

from src.consoleio.output import QuietConsole, console, is_quiet, set_quiet


class TestQuietConsole:
    """Test QuietConsole functionality."""

    def test_default_not_quiet(self):
        """Console should not be quiet by default."""
        qc = QuietConsole()
        assert qc.quiet is False

    def test_set_quiet(self):
        """Test setting quiet mode."""
        qc = QuietConsole()
        qc.quiet = True
        assert qc.quiet is True
        qc.quiet = False
        assert qc.quiet is False

    def test_print_writes_plain_text(self):
        """Markup and emoji codes are printed as written."""
        buffer = io.StringIO()
        qc = QuietConsole(file=buffer)
        qc.print("[red]1) Option :smile:[/red]")
        assert buffer.getvalue() == "[red]1) Option :smile:[/red]\n"

    def test_long_lines_are_not_wrapped(self):
        """Text wider than the console stays on one line."""
        buffer = io.StringIO()
        qc = QuietConsole(file=buffer)
        text = "word " * 60
        qc.message(text.strip())
        assert buffer.getvalue() == text.strip() + "\n"

    def test_message_keeps_tabs(self):
        """Messages are written exactly as given."""
        buffer = io.StringIO()
        qc = QuietConsole(file=buffer)
        qc.message("1) a\tb")
        assert buffer.getvalue() == "1) a\tb\n"

    def test_print_suppressed_in_quiet_mode(self):
        """Print should be suppressed in quiet mode."""
        buffer = io.StringIO()
        qc = QuietConsole(file=buffer)
        qc.quiet = True
        qc.print("This should not appear")
        assert buffer.getvalue() == ""

    def test_message_and_error_always_print(self):
        """Messages and errors print even in quiet mode."""
        buffer = io.StringIO()
        qc = QuietConsole(file=buffer)
        qc.quiet = True
        qc.message("Prompt")
        qc.error("Failure")
        assert buffer.getvalue() == "Prompt\nFailure\n"


class TestGlobalQuiet:
    """Test global quiet mode functions."""

    def test_set_quiet_global(self):
        """Test global set_quiet function."""
        original = console.quiet
        try:
            set_quiet(True)
            assert is_quiet() is True
            set_quiet(False)
            assert is_quiet() is False
        finally:
            console.quiet = original

    def test_global_console_instance(self):
        """Test that global console is a QuietConsole instance."""
        assert isinstance(console, QuietConsole)
