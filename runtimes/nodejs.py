"""Command table of the Node.js injector test app."""

from __future__ import annotations

from probes.base_probe import ArgumentEnvProbe, FixedProbe
from probes.command_registry import CommandRegistry
from probes.markers import NODEJS_AGENT_MARKER
from probes.targets import ProbeTarget
from runtimes.variant import RuntimeVariant


def _register_env_commands(registry: CommandRegistry) -> None:
    node_options = ProbeTarget.env("NODE_OPTIONS")
    registry.register("non-existing", FixedProbe(ProbeTarget.env("DOES_NOT_EXIST")))
    registry.register("existing", FixedProbe(ProbeTarget.env("TEST_VAR")))
    registry.register("node-options", FixedProbe(node_options))
    registry.register("node-options-twice", FixedProbe(node_options, node_options))
    registry.register(
        "otel-resource-attributes", FixedProbe(ProbeTarget.env("OTEL_RESOURCE_ATTRIBUTES"))
    )
    registry.register("java-tool-options", FixedProbe(ProbeTarget.env("JAVA_TOOL_OPTIONS")))
    registry.register("dotnet-startup-hooks", FixedProbe(ProbeTarget.env("DOTNET_STARTUP_HOOKS")))


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    _register_env_commands(registry)
    registry.register(
        "verify-auto-instrumentation-agent-has-been-injected",
        FixedProbe(ProbeTarget.marker(NODEJS_AGENT_MARKER)),
    )
    registry.register("custom-env-var", ArgumentEnvProbe("custom-env-var"))
    return registry


def build_legacy_registry() -> CommandRegistry:
    """Older test app: no agent marker, and custom-env-var is not parameterized."""
    registry = CommandRegistry()
    _register_env_commands(registry)
    registry.register("custom-env-var", FixedProbe(ProbeTarget.env("CUSTOM_ENV_VAR")))
    return registry


NODEJS = RuntimeVariant(
    name="nodejs",
    description="Node.js injector integration-test app",
    build_registry=build_registry,
    newline=False,
    prefix_unknown_command=False,
)

NODEJS_LEGACY = RuntimeVariant(
    name="nodejs-legacy",
    description="Original Node.js test app without agent verification",
    build_registry=build_legacy_registry,
    newline=False,
    prefix_unknown_command=False,
)
