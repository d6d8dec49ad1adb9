"""Process-global marker slots populated by an injector.

Only the markers catalogued here exist. An injector that runs before the
probe's entry point (for example a ``sitecustomize`` module placed on
``PYTHONPATH``) writes them with :func:`set_marker`; probes only read them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

NODEJS_AGENT_MARKER = "otel_injector_nodejs_no_op_agent_has_been_loaded"
JVM_AGENT_MARKER = "otel.injector.jvm.no_op_agent.has_been_loaded"
JVM_EXISTING_PROPERTY = "some-property"

KNOWN_MARKERS: dict[str, str] = {
    NODEJS_AGENT_MARKER: "Set by the Node.js no-op agent once it has been loaded.",
    JVM_AGENT_MARKER: "Set by the JVM no-op agent once it has been loaded.",
    JVM_EXISTING_PROPERTY: "Supplied before injection; must survive the agent being loaded.",
}

logger = logging.getLogger("probe.markers")


@dataclass
class MarkerSlot:
    """A named slot holding one marker value."""

    name: str
    description: str
    value: str | None = None


class MarkerRegistry:
    """Fixed set of marker slots; unknown names are rejected."""

    def __init__(self, catalogue: Mapping[str, str]) -> None:
        self._slots = {
            name: MarkerSlot(name=name, description=description)
            for name, description in catalogue.items()
        }

    def names(self) -> list[str]:
        return sorted(self._slots)

    def is_declared(self, name: str) -> bool:
        return name in self._slots

    def set(self, name: str, value: str) -> None:
        self._slot(name).value = str(value)
        logger.debug("Marker %s set", name)

    def get(self, name: str) -> str | None:
        # Empty and unset slots read the same.
        return self._slot(name).value or None

    def clear(self) -> None:
        for slot in self._slots.values():
            slot.value = None

    def _slot(self, name: str) -> MarkerSlot:
        try:
            return self._slots[name]
        except KeyError:
            raise KeyError(f"Undeclared global marker: {name}") from None


GLOBAL_MARKERS = MarkerRegistry(KNOWN_MARKERS)


def set_marker(name: str, value: str) -> None:
    """Injector-side writer for a catalogued marker."""
    GLOBAL_MARKERS.set(name, value)


def read_marker(name: str) -> str | None:
    """Probe-side reader for a catalogued marker."""
    return GLOBAL_MARKERS.get(name)


def clear_markers() -> None:
    GLOBAL_MARKERS.clear()
