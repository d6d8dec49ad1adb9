"""CLI entrypoints for the probe applications."""

from __future__ import annotations

import sys

import typer

from ui.cli import commands

# Every argv must reach the dispatcher: no --help, unknown options pass through.
_PROBE_CONTEXT = {"ignore_unknown_options": True, "allow_extra_args": True}


def build_probe_app(
    variant_name: str | None = None,
    raw_argv: list[str] | None = None,
) -> typer.Typer:
    """Build a single-command probe app bound to a runtime variant.

    When ``raw_argv`` is given it is dispatched verbatim; click drops a
    literal ``--`` while parsing, and the probe must see it as a command.
    """
    app = typer.Typer(add_completion=False, help="Report injected process state.")

    @app.command(add_help_option=False, context_settings=_PROBE_CONTEXT)
    def probe(
        ctx: typer.Context,
        command: str | None = typer.Argument(None, help="Probe command"),
        extra: str | None = typer.Argument(None, help="Variable name for custom-env-var"),
    ) -> None:
        if raw_argv is not None:
            argv = list(raw_argv)
        else:
            argv = [arg for arg in (command, extra) if arg is not None] + list(ctx.args)
        commands.run_probe(variant_name, argv)

    return app


catalog_app = typer.Typer(add_completion=False, help="List runtime variants and their commands.")


@catalog_app.command()
def catalog(
    variant: str | None = typer.Argument(None, help="Runtime variant to list"),
) -> None:
    """Show probe commands."""
    commands.show_catalog(variant)


def _run_probe_app(variant_name: str | None) -> None:
    argv = sys.argv[1:]
    build_probe_app(variant_name, argv)(args=argv)


def main() -> None:
    """Console script entrypoint; variant from configuration."""
    _run_probe_app(None)


def nodejs_main() -> None:
    _run_probe_app("nodejs")


def nodejs_legacy_main() -> None:
    _run_probe_app("nodejs-legacy")


def jvm_main() -> None:
    _run_probe_app("jvm")


def dotnet_main() -> None:
    _run_probe_app("dotnet")


def catalog_main() -> None:
    catalog_app()


if __name__ == "__main__":
    main()
