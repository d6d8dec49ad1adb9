"""Command table of the JVM test app."""

from __future__ import annotations

from probes.base_probe import FixedProbe
from probes.command_registry import CommandRegistry
from probes.markers import JVM_AGENT_MARKER, JVM_EXISTING_PROPERTY
from probes.targets import ProbeTarget
from runtimes.variant import RuntimeVariant


def build_registry() -> CommandRegistry:
    agent_loaded = ProbeTarget.marker(JVM_AGENT_MARKER)
    registry = CommandRegistry()
    registry.register("verify-javaagent-has-been-injected", FixedProbe(agent_loaded))
    registry.register(
        "verify-javaagent-has-been-injected-and-existing-property-is-still-in-place",
        FixedProbe(agent_loaded, ProbeTarget.marker(JVM_EXISTING_PROPERTY)),
    )
    registry.register("custom-env-var", FixedProbe(ProbeTarget.env("CUSTOM_ENV_VAR")))
    return registry


# The JVM app reports an unknown command on stdout, a missing one on stderr.
JVM = RuntimeVariant(
    name="jvm",
    description="JVM test app verifying the no-op Java agent",
    build_registry=build_registry,
    newline=True,
    missing_command_to_stderr=True,
    unknown_command_to_stderr=False,
)
