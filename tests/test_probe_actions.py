"""Formatter, probe action and command registry tests."""

from __future__ import annotations

import pytest

from core.errors import MissingCommandError
from probes.base_probe import ArgumentEnvProbe, FixedProbe
from probes.command_registry import CommandRegistry
from probes.formatter import format_result, join_fragments
from probes.markers import JVM_AGENT_MARKER, KNOWN_MARKERS, MarkerRegistry
from probes.targets import ProbeTarget


def test_format_result_renders_value_or_dash() -> None:
    assert format_result("TEST_VAR", "hello") == "TEST_VAR: hello"
    assert format_result("TEST_VAR", None) == "TEST_VAR: -"
    assert format_result("TEST_VAR", "") == "TEST_VAR: -"


def test_format_result_does_not_escape() -> None:
    assert format_result("A", "x; B: y") == "A: x; B: y"


def test_join_fragments_has_no_trailing_separator() -> None:
    assert join_fragments(["A: 1", "B: -"]) == "A: 1; B: -"
    assert join_fragments(["A: 1"]) == "A: 1"


def test_fixed_probe_reads_every_target_in_order() -> None:
    markers = MarkerRegistry(KNOWN_MARKERS)
    markers.set(JVM_AGENT_MARKER, "true")
    action = FixedProbe(
        ProbeTarget.env("NODE_OPTIONS"),
        ProbeTarget.marker(JVM_AGENT_MARKER),
        ProbeTarget.env("NODE_OPTIONS"),
    )
    line = action.execute(environ={"NODE_OPTIONS": "--foo"}, markers=markers)
    assert line == (
        "NODE_OPTIONS: --foo; otel.injector.jvm.no_op_agent.has_been_loaded: true; "
        "NODE_OPTIONS: --foo"
    )


def test_fixed_probe_requires_a_target() -> None:
    with pytest.raises(ValueError):
        FixedProbe()


def test_argument_env_probe_reads_named_variable() -> None:
    action = ArgumentEnvProbe("custom-env-var")
    assert action.execute("MY_VAR", environ={"MY_VAR": "42"}) == "MY_VAR: 42"
    assert action.execute("OTHER", environ={"MY_VAR": "42"}) == "OTHER: -"


def test_argument_env_probe_without_name_is_missing_argument() -> None:
    action = ArgumentEnvProbe("custom-env-var")
    with pytest.raises(MissingCommandError) as excinfo:
        action.execute(None, environ={})
    assert "custom-env-var" in excinfo.value.message
    assert excinfo.value.exit_code == 1


def test_registry_matches_exact_names_only() -> None:
    registry = CommandRegistry()
    action = FixedProbe(ProbeTarget.env("TEST_VAR"))
    registry.register("existing", action)

    assert registry.get("existing") is action
    assert registry.get("exist") is None
    assert registry.get("existing ") is None
    assert registry.get("EXISTING") is None
    assert "existing" in registry


def test_registry_refuses_to_overload_a_command() -> None:
    registry = CommandRegistry()
    registry.register("existing", FixedProbe(ProbeTarget.env("TEST_VAR")))
    with pytest.raises(ValueError):
        registry.register("existing", FixedProbe(ProbeTarget.env("OTHER")))
    with pytest.raises(ValueError):
        registry.register("", FixedProbe(ProbeTarget.env("OTHER")))


def test_registry_lists_commands_with_targets() -> None:
    registry = CommandRegistry()
    registry.register("b", ArgumentEnvProbe("b"))
    registry.register("a", FixedProbe(ProbeTarget.env("X"), ProbeTarget.marker(JVM_AGENT_MARKER)))
    listed = registry.list_commands()
    assert [command.name for command in listed] == ["a", "b"]
    assert listed[0].targets == f"env:X; marker:{JVM_AGENT_MARKER}"
    assert listed[1].targets == "env:<NAME>"
