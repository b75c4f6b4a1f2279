"""Tests for OutputStrategy verbosity contracts."""

import pytest

from lexci_cli.core.output import OutputStrategy, Verbosity


@pytest.mark.unit
class TestVerbosity:
    """Test Verbosity.from_flags."""

    @pytest.mark.parametrize(
        ("verbose", "verbose_debug", "expected"),
        [
            (False, False, Verbosity.NORMAL),
            (True, False, Verbosity.VERBOSE),
            (False, True, Verbosity.DEBUG),
            (True, True, Verbosity.DEBUG),
        ],
    )
    def test_from_flags(self, verbose, verbose_debug, expected):
        """Test flag combinations."""
        assert Verbosity.from_flags(verbose, verbose_debug) is expected


@pytest.mark.unit
class TestOutputStrategy:
    """Test what each verbosity level shows."""

    def test_command_echo(self, capsys):
        """Test commands are echoed set -x style."""
        OutputStrategy().command(["cargo", "test", "--release"], cwd="core")
        assert capsys.readouterr().out == "+ cargo test --release\n"

    def test_command_echo_verbose_shows_cwd(self, capsys):
        """Test -v appends the working directory."""
        OutputStrategy(Verbosity.VERBOSE).command(["cargo", "test"], cwd="core")
        assert capsys.readouterr().out == "+ cargo test  (core)\n"

    def test_error_goes_to_stderr(self, capsys):
        """Test errors are written to stderr."""
        OutputStrategy().error("broken")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "broken" in captured.err

    def test_info_hidden_at_normal(self, capsys):
        """Test info is suppressed without -v."""
        OutputStrategy().info("details")
        assert capsys.readouterr().out == ""

    def test_info_shown_at_verbose(self, capsys):
        """Test info appears with -v."""
        OutputStrategy(Verbosity.VERBOSE).info("details")
        assert capsys.readouterr().out == "details\n"

    def test_debug_only_at_debug(self, capsys):
        """Test debug appears only with -vvv."""
        OutputStrategy(Verbosity.VERBOSE).debug("trace")
        assert capsys.readouterr().out == ""

        OutputStrategy(Verbosity.DEBUG).debug("trace")
        assert "[DEBUG] trace" in capsys.readouterr().out

    def test_blank_lines_coalesce(self, capsys):
        """Test consecutive blank lines print once."""
        output = OutputStrategy()
        output.plain("")
        output.plain("")
        output.plain("x")

        assert capsys.readouterr().out == "\nx\n"
