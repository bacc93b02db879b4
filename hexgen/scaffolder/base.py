"""Shared orchestration for every generator kind.

A generator owns a fixed, ordered manifest of artifact roles.  One call to
:meth:`BaseGenerator.generate` walks

    CONFIGURING -> RENDERING -> WRITING -> DONE | FAILED

computing the name variations exactly once, building one
``GenerationContext`` for the whole batch, rendering and styling each
artifact, and handing the batch to the writer.  Template and configuration
errors raise before anything is written; write failures are collected into
the returned ``GenerationResult`` and never roll back sibling files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..config import HexConfig, resolve_config
from ..naming import NameVariations, file_name, name_variations
from ..paths import import_path
from .models import (
    ArtifactSpec,
    GenerationContext,
    GenerationPhase,
    GenerationResult,
    GeneratorOptions,
    WriteResult,
)
from .scanner import find_port_by_name
from .style import apply_style
from .templates import TemplateRenderer
from .writer import write_files

logger = logging.getLogger(__name__)

INDEX_ROLE = "index"
SOURCE_EXT = ".ts"


class BaseGenerator:
    """Base class for the port, adapter and service generators.

    Subclasses set :attr:`kind`, :attr:`roles` and :attr:`label`, and
    implement :meth:`default_output_dir` and :meth:`kind_context`.
    """

    kind: str = ""
    label: str = ""
    # Full manifest in write order; the index (manifest) file is always last.
    roles: tuple[str, ...] = ()

    def __init__(
        self,
        config: HexConfig | dict[str, Any] | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = resolve_config(config)
        self.renderer = renderer or TemplateRenderer(overrides=self.config.templates)

    # -- Public API --------------------------------------------------------

    async def generate(self, options: GeneratorOptions) -> GenerationResult:
        """Generate every artifact in this kind's manifest.

        Returns:
            A ``GenerationResult``; ``success`` is ``False`` when any file
            could not be written (conflict or I/O error).

        Raises:
            TemplateNotFound: If a template is missing.
            TemplateCompileError: If a template has invalid syntax.
        """
        logger.debug("%s %s: %s", self.kind, options.name, GenerationPhase.CONFIGURING.value)
        names = name_variations(options.name)
        artifact_dir = self.artifact_dir(options, names)
        base_name = artifact_dir.name
        roles = self.manifest(options)
        paths = {role: self.artifact_path(artifact_dir, base_name, role) for role in roles}
        context = self.build_context(options, names, paths)

        logger.debug("%s %s: %s", self.kind, options.name, GenerationPhase.RENDERING.value)
        artifacts = [
            ArtifactSpec(role=role, path=paths[role], content=self.render(role, context))
            for role in roles
        ]

        logger.debug("%s %s: %s", self.kind, options.name, GenerationPhase.WRITING.value)
        results = await write_files(artifacts, force=options.force, dry_run=options.dry_run)
        return self.summarize(names, results, dry_run=options.dry_run)

    # -- Layout ------------------------------------------------------------

    def manifest(self, options: GeneratorOptions) -> list[str]:
        """Roles generated for *options*, in write order."""
        return list(self.roles)

    def default_output_dir(self) -> str:
        raise NotImplementedError

    def output_dir(self, options: GeneratorOptions) -> Path:
        if options.output_path is not None:
            return options.project_root / options.output_path
        return options.project_root / self.default_output_dir()

    def artifact_dir(self, options: GeneratorOptions, names: NameVariations) -> Path:
        return self.output_dir(options) / file_name(names, self.config.naming.file_case)

    @staticmethod
    def artifact_path(artifact_dir: Path, base_name: str, role: str) -> Path:
        if role == INDEX_ROLE:
            return artifact_dir / f"{INDEX_ROLE}{SOURCE_EXT}"
        return artifact_dir / f"{base_name}.{role}{SOURCE_EXT}"

    # -- Context -----------------------------------------------------------

    def token_name(self, names: NameVariations) -> str:
        suffix = self.config.naming.port_suffix
        return f"{names.screaming_snake}_{suffix}" if suffix else names.screaming_snake

    def build_context(
        self,
        options: GeneratorOptions,
        names: NameVariations,
        paths: dict[str, Path],
    ) -> GenerationContext:
        """Assemble the single context shared by every artifact of the batch."""
        style = self.config.style
        index_path = paths.get(INDEX_ROLE)
        siblings = {
            role: import_path(index_path or path, path)
            for role, path in paths.items()
            if role != INDEX_ROLE
        }
        fields: dict[str, Any] = {
            **names.model_dump(),
            "file_name": file_name(names, self.config.naming.file_case),
            "file_case": self.config.naming.file_case,
            "port_suffix": self.config.naming.port_suffix,
            "adapter_suffix": self.config.naming.adapter_suffix,
            "indent": style.indent_unit,
            "quote": style.quote_char,
            "semi": ";" if style.semicolons else "",
            "token_name": self.token_name(names),
            "interface_name": f"{names.pascal}Port",
            "token_type_name": f"{names.pascal}Token",
            "service_name": f"{names.pascal}Service",
            "include_service": options.include_service,
            "include_module": options.include_module,
            "registration_type": options.registration_type,
            "technology": options.technology or "",
            "imports": siblings,
            "exports": list(siblings.values()),
        }
        fields.update(self.kind_context(options, names, paths))
        return GenerationContext(**fields)

    def kind_context(
        self,
        options: GeneratorOptions,
        names: NameVariations,
        paths: dict[str, Path],
    ) -> dict[str, Any]:
        """Extra context fields for this generator kind."""
        return {}

    def port_reference(self, options: GeneratorOptions, from_file: Path) -> dict[str, Any]:
        """Context fields describing the port referenced by ``options.port_name``.

        The port is looked up on disk first so the real token and interface
        names are used; otherwise they are derived from the port name and
        the configured suffix.  ``options.port_path`` and
        ``options.port_token_name`` override the computed values verbatim.
        """
        if not options.port_name:
            return {"has_port": False}

        port_names = name_variations(options.port_name)
        found = find_port_by_name(options.port_name, self.config, options.project_root)
        if found is not None:
            port_dir = found.port_path
            token = found.token_name
            interface = found.interface_name
        else:
            port_dir = (
                options.project_root
                / self.config.output.ports_dir
                / file_name(port_names, self.config.naming.file_case)
            )
            token = self.token_name(port_names)
            interface = f"{port_names.pascal}Port"

        return {
            "has_port": True,
            "port_kebab": port_names.kebab,
            "port_pascal": port_names.pascal,
            "port_camel": port_names.camel,
            "port_token_name": options.port_token_name or token,
            "port_interface_name": interface,
            "port_token_type_name": f"{port_names.pascal}Token",
            "port_import_path": options.port_path or import_path(from_file, port_dir),
        }

    # -- Rendering ---------------------------------------------------------

    def render(self, role: str, context: GenerationContext) -> str:
        content = self.renderer.render(f"{self.kind}/{role}", context)
        return apply_style(content, self.config.style)

    # -- Result ------------------------------------------------------------

    def summarize(
        self,
        names: NameVariations,
        results: list[WriteResult],
        *,
        dry_run: bool = False,
    ) -> GenerationResult:
        files = [r.path for r in results if r.success]
        failures = [r for r in results if not r.success]

        if failures:
            message = f"Failed to generate {len(failures)} file(s):\n" + "\n".join(
                f"  - {r.path}: {r.message}" for r in failures
            )
            logger.error(message)
            return GenerationResult(
                success=False,
                phase=GenerationPhase.FAILED,
                files=files,
                results=results,
                message=message,
            )

        if dry_run:
            message = f"Dry run: would generate {len(files)} {self.label} file(s) for {names.pascal}"
        else:
            message = f"Successfully generated {len(files)} {self.label} file(s) for {names.pascal}"
        return GenerationResult(
            success=True,
            phase=GenerationPhase.DONE,
            files=files,
            results=results,
            message=message,
        )
