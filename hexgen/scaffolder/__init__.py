"""hexgen scaffolder -- generates port, adapter and service bundles.

Each generator renders a fixed manifest of Jinja2 templates against one
shared context, restyles the output and writes it with conflict detection.

Quick usage::

    from hexgen.scaffolder import GeneratorOptions, PortGenerator

    generator = PortGenerator({"naming": {"port_suffix": "CONTRACT"}})
    result = await generator.generate(GeneratorOptions(name="object-storage"))
    result.raise_for_status()
"""

from hexgen.scaffolder.adapter_gen import AdapterGenerator
from hexgen.scaffolder.base import BaseGenerator
from hexgen.scaffolder.generator import GENERATORS, generate, get_generator
from hexgen.scaffolder.models import (
    ArtifactSpec,
    GenerationContext,
    GenerationError,
    GenerationPhase,
    GenerationResult,
    GeneratorOptions,
    WriteResult,
)
from hexgen.scaffolder.port_gen import PortGenerator
from hexgen.scaffolder.scanner import PortInfo, find_port_by_name, scan_available_ports
from hexgen.scaffolder.service_gen import ServiceGenerator
from hexgen.scaffolder.style import apply_style
from hexgen.scaffolder.templates import (
    TemplateCompileError,
    TemplateNotFound,
    TemplateRenderError,
    TemplateRenderer,
)
from hexgen.scaffolder.writer import write_file, write_files

__all__ = [
    "AdapterGenerator",
    "ArtifactSpec",
    "BaseGenerator",
    "GENERATORS",
    "GenerationContext",
    "GenerationError",
    "GenerationPhase",
    "GenerationResult",
    "GeneratorOptions",
    "PortGenerator",
    "PortInfo",
    "ServiceGenerator",
    "TemplateCompileError",
    "TemplateNotFound",
    "TemplateRenderError",
    "TemplateRenderer",
    "WriteResult",
    "apply_style",
    "find_port_by_name",
    "generate",
    "get_generator",
    "scan_available_ports",
    "write_file",
    "write_files",
]
