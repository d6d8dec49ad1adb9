"""Runtime variant descriptor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from probes.command_registry import CommandRegistry


@dataclass(frozen=True)
class RuntimeVariant:
    """A closed command table plus the stream conventions of one runtime's test app."""

    name: str
    description: str
    build_registry: Callable[[], CommandRegistry]
    newline: bool
    missing_command_to_stderr: bool = True
    unknown_command_to_stderr: bool = True
    # The Node.js apps print the unknown-command line without "error: ".
    prefix_unknown_command: bool = True

    def registry(self) -> CommandRegistry:
        return self.build_registry()
