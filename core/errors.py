"""Probe error taxonomy."""

from __future__ import annotations

MISSING_COMMAND_MESSAGE = (
    "not enough arguments, the command for the app under test needs to be specifed"
)


class ProbeError(Exception):
    """Base class for terminal probe failures reported with exit code 1."""

    exit_code = 1

    @property
    def message(self) -> str:
        return str(self)


class MissingCommandError(ProbeError):
    """No command (or no required command argument) was supplied."""

    def __init__(self, message: str = MISSING_COMMAND_MESSAGE) -> None:
        super().__init__(message)


class UnknownCommandError(ProbeError):
    """The command is not listed in the runtime variant's registry."""

    def __init__(self, command: str) -> None:
        super().__init__(f"unknown test app command: {command}")
        self.command = command


class UnknownVariantError(ProbeError):
    """No runtime variant is registered under the requested name."""

    def __init__(self, variant: str) -> None:
        super().__init__(f"unknown runtime variant: {variant}")
        self.variant = variant
