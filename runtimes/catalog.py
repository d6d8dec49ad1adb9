"""Lookup of the runtime variants."""

from __future__ import annotations

from core.errors import UnknownVariantError
from runtimes.dotnet import DOTNET
from runtimes.jvm import JVM
from runtimes.nodejs import NODEJS, NODEJS_LEGACY
from runtimes.variant import RuntimeVariant

VARIANTS: dict[str, RuntimeVariant] = {
    variant.name: variant for variant in (NODEJS, NODEJS_LEGACY, JVM, DOTNET)
}


def get_variant(name: str) -> RuntimeVariant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise UnknownVariantError(name) from None


def list_variants() -> list[RuntimeVariant]:
    return [VARIANTS[name] for name in sorted(VARIANTS)]
