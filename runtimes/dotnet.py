"""Command table of the .NET test app."""

from __future__ import annotations

from probes.base_probe import ArgumentEnvProbe, FixedProbe
from probes.command_registry import CommandRegistry
from probes.targets import ProbeTarget
from runtimes.variant import RuntimeVariant

STARTUP_HOOK_MARKER_VAR = "otel_injector_dotnet_no_op_startup_hook_has_been_loaded"


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    # The startup hook signals through the environment, not a global marker.
    registry.register(
        "verify-startup-hook-has-been-injected",
        FixedProbe(ProbeTarget.env(STARTUP_HOOK_MARKER_VAR)),
    )
    registry.register("custom-env-var", ArgumentEnvProbe("custom-env-var"))
    return registry


DOTNET = RuntimeVariant(
    name="dotnet",
    description=".NET test app verifying the no-op startup hook",
    build_registry=build_registry,
    newline=True,
    missing_command_to_stderr=False,
    unknown_command_to_stderr=False,
)
