"""Read-only primitives observing process state."""

from __future__ import annotations

import os
from collections.abc import Mapping

from probes.markers import GLOBAL_MARKERS, MarkerRegistry
from probes.targets import ProbeTarget, TargetKind


def read_env_var(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the variable's value, or None when it is unset or empty."""
    source = os.environ if environ is None else environ
    return source.get(name) or None


def read_global_marker(name: str, markers: MarkerRegistry | None = None) -> str | None:
    """Return the marker's value, or None when the injector never set it."""
    return (markers or GLOBAL_MARKERS).get(name)


def read_target(
    target: ProbeTarget,
    *,
    environ: Mapping[str, str] | None = None,
    markers: MarkerRegistry | None = None,
) -> str | None:
    if target.kind is TargetKind.GLOBAL_MARKER:
        return read_global_marker(target.name, markers)
    return read_env_var(target.name, environ)
