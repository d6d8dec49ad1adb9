"""Probe actions bound to commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from core.errors import MissingCommandError
from probes.formatter import format_result, join_fragments
from probes.markers import MarkerRegistry
from probes.state_probes import read_target
from probes.targets import ProbeTarget


class ProbeAction(ABC):
    """Base class for the action a command runs."""

    def execute(
        self,
        extra: str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        markers: MarkerRegistry | None = None,
    ) -> str:
        """Read every target once, in order, and render the joined line."""
        fragments = [
            format_result(target.name, read_target(target, environ=environ, markers=markers))
            for target in self.targets(extra)
        ]
        return join_fragments(fragments)

    @abstractmethod
    def targets(self, extra: str | None) -> Sequence[ProbeTarget]:
        """Targets to read, given the optional extra command argument."""

    def describe(self) -> str:
        """Human-readable target listing used by the catalog."""
        return "; ".join(target.describe() for target in self.targets("<NAME>"))


class FixedProbe(ProbeAction):
    """Reads a fixed sequence of targets; the extra argument is ignored."""

    def __init__(self, *targets: ProbeTarget) -> None:
        if not targets:
            raise ValueError("FixedProbe needs at least one target.")
        self._targets = tuple(targets)

    def targets(self, extra: str | None) -> Sequence[ProbeTarget]:
        _ = extra
        return self._targets


class ArgumentEnvProbe(ProbeAction):
    """Reads the environment variable named by the extra argument."""

    def __init__(self, command: str) -> None:
        self.command = command

    def targets(self, extra: str | None) -> Sequence[ProbeTarget]:
        if not extra:
            raise MissingCommandError(
                f"not enough arguments, the command {self.command} "
                "needs the name of an environment variable"
            )
        return (ProbeTarget.env(extra),)
