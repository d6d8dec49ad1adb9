"""Command dispatch for one probe invocation.

One call walks argv through registry lookup, the probe reads and the
formatter, and returns everything the process should write together with its
exit code. Failures never raise out of :func:`dispatch`; they become an
outcome with exit code 1.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from core.errors import MissingCommandError, ProbeError, UnknownCommandError
from probes.markers import MarkerRegistry
from runtimes.variant import RuntimeVariant

logger = logging.getLogger("probe.dispatcher")


@dataclass
class ProbeOutcome:
    """Text destined for each stream, plus the process exit code."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


def dispatch(
    variant: RuntimeVariant,
    argv: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
    markers: MarkerRegistry | None = None,
) -> ProbeOutcome:
    """Run one probe command for ``variant``."""
    # A single snapshot serves every read of this invocation.
    snapshot = dict(os.environ if environ is None else environ)
    try:
        line = _run(variant, argv, snapshot, markers)
    except MissingCommandError as exc:
        logger.warning("%s: %s", variant.name, exc.message)
        return _failure(exc, to_stderr=variant.missing_command_to_stderr)
    except UnknownCommandError as exc:
        logger.warning("%s: %s", variant.name, exc.message)
        return _failure(
            exc,
            to_stderr=variant.unknown_command_to_stderr,
            prefix=variant.prefix_unknown_command,
        )

    terminator = "\n" if variant.newline else ""
    return ProbeOutcome(stdout=line + terminator, exit_code=0)


def _run(
    variant: RuntimeVariant,
    argv: Sequence[str],
    environ: Mapping[str, str],
    markers: MarkerRegistry | None,
) -> str:
    command = argv[0] if argv else None
    if not command:
        raise MissingCommandError()

    action = variant.registry().get(command)
    if action is None:
        raise UnknownCommandError(command)

    extra = argv[1] if len(argv) > 1 else None
    line = action.execute(extra, environ=environ, markers=markers)
    logger.info("%s: %s -> %s", variant.name, command, line)
    return line


def _failure(exc: ProbeError, *, to_stderr: bool, prefix: bool = True) -> ProbeOutcome:
    text = f"error: {exc.message}\n" if prefix else f"{exc.message}\n"
    if to_stderr:
        return ProbeOutcome(stderr=text, exit_code=exc.exit_code)
    return ProbeOutcome(stdout=text, exit_code=exc.exit_code)
