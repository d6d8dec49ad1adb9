"""Probe target models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TargetKind(str, Enum):
    """Kind of process state a probe reads."""

    ENVIRONMENT_VARIABLE = "environment_variable"
    GLOBAL_MARKER = "global_marker"


class ProbeTarget(BaseModel):
    """One piece of process state identified by kind and name."""

    model_config = ConfigDict(frozen=True)

    kind: TargetKind
    name: str

    @classmethod
    def env(cls, name: str) -> ProbeTarget:
        return cls(kind=TargetKind.ENVIRONMENT_VARIABLE, name=name)

    @classmethod
    def marker(cls, name: str) -> ProbeTarget:
        return cls(kind=TargetKind.GLOBAL_MARKER, name=name)

    def describe(self) -> str:
        prefix = "env" if self.kind is TargetKind.ENVIRONMENT_VARIABLE else "marker"
        return f"{prefix}:{self.name}"
