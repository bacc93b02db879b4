"""Generator lookup and the one-call entry point."""

from __future__ import annotations

from typing import Any

from ..config import HexConfig
from .adapter_gen import AdapterGenerator
from .base import BaseGenerator
from .models import GenerationResult, GeneratorOptions
from .port_gen import PortGenerator
from .service_gen import ServiceGenerator

GENERATORS: dict[str, type[BaseGenerator]] = {
    "port": PortGenerator,
    "adapter": AdapterGenerator,
    "service": ServiceGenerator,
}


def get_generator(
    kind: str,
    config: HexConfig | dict[str, Any] | None = None,
) -> BaseGenerator:
    """Instantiate the generator registered for *kind*.

    Raises:
        KeyError: If *kind* is not one of :data:`GENERATORS`.
    """
    try:
        generator_cls = GENERATORS[kind]
    except KeyError:
        known = ", ".join(sorted(GENERATORS))
        raise KeyError(f"Unknown generator kind {kind!r}; expected one of: {known}") from None
    return generator_cls(config)


async def generate(
    kind: str,
    options: GeneratorOptions | dict[str, Any],
    config: HexConfig | dict[str, Any] | None = None,
) -> GenerationResult:
    """Run the *kind* generator once.

    Args:
        kind: ``"port"``, ``"adapter"`` or ``"service"``.
        options: ``GeneratorOptions`` or a plain mapping of the same fields.
        config: Resolved config, a partial override mapping, or ``None``.
    """
    if not isinstance(options, GeneratorOptions):
        options = GeneratorOptions.model_validate(options)
    return await get_generator(kind, config).generate(options)
