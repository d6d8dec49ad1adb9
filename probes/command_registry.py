"""Closed command-to-probe registry."""

from __future__ import annotations

from dataclasses import dataclass

from probes.base_probe import ProbeAction


@dataclass
class RegisteredCommand:
    """Metadata for command listing output."""

    name: str
    targets: str


class CommandRegistry:
    """Exact-match mapping from command names to probe actions."""

    def __init__(self) -> None:
        self._commands: dict[str, ProbeAction] = {}

    def register(self, name: str, action: ProbeAction) -> None:
        if not name:
            raise ValueError("Command name must not be empty.")
        if name in self._commands:
            raise ValueError(f"Command already registered: {name}")
        self._commands[name] = action

    def get(self, name: str) -> ProbeAction | None:
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def names(self) -> list[str]:
        return sorted(self._commands)

    def list_commands(self) -> list[RegisteredCommand]:
        return [
            RegisteredCommand(name=name, targets=action.describe())
            for name, action in sorted(self._commands.items())
        ]
