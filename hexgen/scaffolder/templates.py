"""Jinja2 template rendering for artifact generation.

Provides the TemplateRenderer class which resolves template identifiers
such as ``"port/token"`` to ``.j2`` files under
``hexgen/scaffolder/templates/`` and renders them against a
:class:`~hexgen.scaffolder.models.GenerationContext`.  Identifiers listed in
the configured overrides are read from the caller's file instead; the
caller of :meth:`TemplateRenderer.render` cannot tell the difference.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import jinja2
from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..naming import to_camel, to_kebab, to_pascal, to_screaming_snake, to_snake
from .models import GenerationContext


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TemplateRenderError(Exception):
    """Base class for template failures; always names the template."""

    def __init__(self, template_id: str, message: str) -> None:
        super().__init__(message)
        self.template_id = template_id


class TemplateNotFound(TemplateRenderError):
    """No template text exists for the identifier."""

    def __init__(self, template_id: str, location: str | Path | None = None) -> None:
        where = f" (looked in {location})" if location else ""
        super().__init__(template_id, f"Template not found: {template_id}{where}")
        self.location = location


class TemplateCompileError(TemplateRenderError):
    """The template text is not valid Jinja2."""

    def __init__(self, template_id: str, reason: str, lineno: int | None = None) -> None:
        line = f" (line {lineno})" if lineno else ""
        super().__init__(
            template_id, f"Failed to compile template {template_id}{line}: {reason}"
        )
        self.reason = reason
        self.lineno = lineno


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders artifact templates by identifier.

    Templates are plain Jinja2 with the default ``Undefined``, so a variable
    missing from the context renders as an empty string.  Rendering has no
    side effects beyond reading template text.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        overrides: Mapping[str, str | Path] | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.overrides = {key: Path(value) for key, value in (overrides or {}).items()}
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["kebab_case"] = to_kebab
        self.env.filters["camel_case"] = to_camel
        self.env.filters["pascal_case"] = to_pascal
        self.env.filters["snake_case"] = to_snake
        self.env.filters["screaming_snake_case"] = to_screaming_snake

    # -- Rendering ---------------------------------------------------------

    def render(
        self,
        template_id: str,
        context: GenerationContext | Mapping[str, Any],
    ) -> str:
        """Render the template registered under *template_id*.

        Args:
            template_id: ``"<kind>/<role>"``, e.g. ``"adapter/types"``.
            context: A ``GenerationContext`` or a plain mapping.

        Raises:
            TemplateNotFound: If neither an override nor a bundled template
                exists for the identifier.
            TemplateCompileError: If the template has invalid syntax.
        """
        template = self._load(template_id)
        if isinstance(context, GenerationContext):
            context = context.model_dump()
        return template.render(**context)

    def render_string(
        self,
        template_string: str,
        context: GenerationContext | Mapping[str, Any],
        template_id: str = "<string>",
    ) -> str:
        """Render an inline template string with the provided context."""
        template = self._compile(template_id, template_string)
        if isinstance(context, GenerationContext):
            context = context.model_dump()
        return template.render(**context)

    def has_template(self, template_id: str) -> bool:
        if template_id in self.overrides:
            return self.overrides[template_id].is_file()
        return (self.template_dir / f"{template_id}{TEMPLATE_SUFFIX}").is_file()

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of bundled template identifiers under *prefix*."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()[: -len(TEMPLATE_SUFFIX)]
            for p in search_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )

    # -- Internal ----------------------------------------------------------

    def _load(self, template_id: str) -> jinja2.Template:
        override = self.overrides.get(template_id)
        if override is not None:
            if not override.is_file():
                raise TemplateNotFound(template_id, override)
            return self._compile(template_id, override.read_text(encoding="utf-8"))

        try:
            return self.env.get_template(f"{template_id}{TEMPLATE_SUFFIX}")
        except jinja2.TemplateNotFound as exc:
            raise TemplateNotFound(template_id, self.template_dir) from exc
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateCompileError(template_id, exc.message or str(exc), exc.lineno) from exc

    def _compile(self, template_id: str, source: str) -> jinja2.Template:
        try:
            return self.env.from_string(source)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateCompileError(template_id, exc.message or str(exc), exc.lineno) from exc
