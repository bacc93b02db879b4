"""Standalone service generation.

A standalone service is an injectable that optionally consumes an existing
port through ``@InjectPort``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..naming import NameVariations
from .base import BaseGenerator
from .models import GeneratorOptions


class ServiceGenerator(BaseGenerator):
    """Generates ``service`` and ``index``."""

    kind = "service"
    label = "service"
    roles = ("service", "index")

    def default_output_dir(self) -> str:
        return self.config.output.services_dir

    def kind_context(
        self,
        options: GeneratorOptions,
        names: NameVariations,
        paths: dict[str, Path],
    ) -> dict[str, Any]:
        return self.port_reference(options, paths["service"])
