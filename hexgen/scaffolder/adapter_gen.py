"""Adapter (provider) generation.

An adapter is a concrete implementation bundle for a port: the adapter
class registered with ``@Adapter``, the service that does the work, and
the adapter's option types.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..naming import NameVariations
from .base import BaseGenerator
from .models import GeneratorOptions


class AdapterGenerator(BaseGenerator):
    """Generates ``adapter``, ``service``, ``types`` and ``index``."""

    kind = "adapter"
    label = "adapter"
    roles = ("adapter", "service", "types", "index")

    def default_output_dir(self) -> str:
        return self.config.output.adapters_dir

    def kind_context(
        self,
        options: GeneratorOptions,
        names: NameVariations,
        paths: dict[str, Path],
    ) -> dict[str, Any]:
        class_name = f"{names.pascal}{self.config.naming.adapter_suffix}"
        context: dict[str, Any] = {
            "adapter_class_name": class_name,
            "config_options_name": f"{names.pascal}ConfigOptions",
            "adapter_config_name": f"{class_name}Config",
            # Without a port the adapter points at a token named after itself
            "port_token_name": self.token_name(names),
        }
        context.update(self.port_reference(options, paths["adapter"]))
        return context
