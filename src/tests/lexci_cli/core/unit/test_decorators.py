"""Tests for the handle_exceptions decorator."""

import click
import pytest
from click.testing import CliRunner

from lexci_cli.core.decorators import handle_exceptions
from lexci_common.errors import CommandFailedError, LexciError


def make_command(exc):
    @click.command()
    @click.pass_context
    @handle_exceptions
    def command(ctx):
        raise exc

    return command


@pytest.mark.unit
class TestHandleExceptions:
    """Test exit code mapping at the CLI boundary."""

    def test_command_failure_keeps_exit_code(self):
        """Test a failed command exits with its own status."""
        exc = CommandFailedError(["cargo", "test"], 101, cwd="lexical-core")

        result = CliRunner().invoke(make_command(exc))

        assert result.exit_code == 101
        assert "cargo test" in result.output
        assert "lexical-core" in result.output

    def test_killed_command_exits_128_plus_signal(self):
        """Test a signal-killed command exits with the shell's status."""
        exc = CommandFailedError(["cargo", "build"], -9)

        result = CliRunner().invoke(make_command(exc))

        assert result.exit_code == 137
        assert "killed by signal 9" in result.output

    def test_lexci_error_exits_one(self):
        """Test other lexical-ci errors exit 1."""
        result = CliRunner().invoke(make_command(LexciError("bad settings")))

        assert result.exit_code == 1
        assert "bad settings" in result.output

    def test_unexpected_error_hint(self):
        """Test unexpected errors exit 1 with a hint."""
        result = CliRunner().invoke(make_command(KeyError("x")))

        assert result.exit_code == 1
        assert "Re-run with -vvv" in result.output

    def test_click_exit_passes_through(self):
        """Test explicit exits are not converted."""

        @click.command()
        @click.pass_context
        @handle_exceptions
        def command(ctx):
            ctx.exit(3)

        assert CliRunner().invoke(command).exit_code == 3
