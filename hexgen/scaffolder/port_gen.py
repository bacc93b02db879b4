"""Port (contract) generation.

A port is the token + interface pair that adapters implement, optionally
wrapped by a domain service and a domain module.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..naming import NameVariations
from .base import BaseGenerator
from .models import GeneratorOptions


class PortGenerator(BaseGenerator):
    """Generates ``token``, ``port``, ``service``?, ``module``? and ``index``."""

    kind = "port"
    label = "port"
    roles = ("token", "port", "service", "module", "index")

    def manifest(self, options: GeneratorOptions) -> list[str]:
        skipped = set()
        if not options.include_service:
            skipped.add("service")
        if not options.include_module:
            skipped.add("module")
        return [role for role in self.roles if role not in skipped]

    def default_output_dir(self) -> str:
        return self.config.output.ports_dir

    def kind_context(
        self,
        options: GeneratorOptions,
        names: NameVariations,
        paths: dict[str, Path],
    ) -> dict[str, Any]:
        return {"module_name": f"{names.pascal}Module"}
