"""Typer command handlers."""

from __future__ import annotations

import logging
import os

import typer

from core.errors import UnknownVariantError
from core.logging_setup import configure_logging
from core.settings import ProbeSettings, load_settings
from probes.dispatcher import ProbeOutcome, dispatch
from runtimes.catalog import get_variant, list_variants

logger = logging.getLogger("probe.cli")


def _settings() -> ProbeSettings:
    settings = load_settings()
    configure_logging(settings.logging)
    return settings


def run_probe(variant_name: str | None, argv: list[str]) -> None:
    """Dispatch one probe command and exit with its code.

    ``variant_name`` of None selects the variant configured under ``runtime``.
    """
    settings = _settings()
    try:
        variant = get_variant(variant_name or settings.runtime)
    except UnknownVariantError as exc:
        typer.echo(f"error: {exc.message}", err=True)
        raise typer.Exit(code=exc.exit_code) from None
    logger.info("Probe %s started with argv=%s", variant.name, argv)
    outcome = dispatch(variant, argv, environ=os.environ)
    _write(outcome)
    raise typer.Exit(code=outcome.exit_code)


def show_catalog(variant_name: str | None) -> None:
    """List variants, or the commands of one variant."""
    _settings()
    if not variant_name:
        for variant in list_variants():
            typer.echo(f"{variant.name}: {variant.description}")
        return
    try:
        variant = get_variant(variant_name)
    except UnknownVariantError as exc:
        typer.echo(f"error: {exc.message}", err=True)
        raise typer.Exit(code=exc.exit_code) from None
    for command in variant.registry().list_commands():
        typer.echo(f"{command.name}: {command.targets}")


def _write(outcome: ProbeOutcome) -> None:
    # color=True keeps click from stripping escape sequences on a pipe.
    if outcome.stdout:
        typer.echo(outcome.stdout, nl=False, color=True)
    if outcome.stderr:
        typer.echo(outcome.stderr, nl=False, err=True, color=True)
