"""Service layer for the lexical-ci CLI."""

from lexci_cli.services.command_executor import CommandExecutor

__all__ = ["CommandExecutor"]
