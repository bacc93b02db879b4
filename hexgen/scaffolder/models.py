"""Data models shared by the generators.

Options come in, :class:`GenerationContext` flows into the templates,
:class:`ArtifactSpec` flows into the writer, and :class:`GenerationResult`
goes back to the caller.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ALNUM = re.compile(r"[A-Za-z0-9]")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class GeneratorOptions(BaseModel):
    """Per-invocation options collected from the user."""

    name: str = Field(..., min_length=1, description="Artifact name in any casing")
    output_path: Optional[Path] = Field(
        default=None,
        description="Parent directory for the artifact directory; defaults to the configured dir",
    )
    project_root: Path = Field(default_factory=Path.cwd)
    include_service: bool = Field(default=True)
    include_module: bool = Field(default=True)
    force: bool = Field(default=False, description="Overwrite existing files")
    dry_run: bool = Field(default=False, description="Report without writing")
    port_name: Optional[str] = Field(default=None, description="Port referenced by an adapter or service")
    port_path: Optional[str] = Field(default=None, description="Import specifier used verbatim for the port")
    port_token_name: Optional[str] = Field(default=None, description="Token name used verbatim for the port")
    registration_type: Literal["sync", "async"] = Field(default="sync")
    technology: Optional[str] = Field(default=None, description="Backing technology, e.g. 'AWS S3'")

    @field_validator("name", "port_name")
    @classmethod
    def _require_alphanumerics(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not _ALNUM.search(value):
            raise ValueError(f"name {value!r} contains no letters or digits")
        return value


# ---------------------------------------------------------------------------
# Template context
# ---------------------------------------------------------------------------


class GenerationContext(BaseModel):
    """Everything a template may reference.

    The schema is closed: a generator cannot pass a field the templates do
    not know about, and every required field must be present before
    rendering starts.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Name variations of the primary name
    original: str
    kebab: str
    camel: str
    pascal: str
    snake: str
    screaming_snake: str
    file_name: str

    # Configuration
    file_case: str
    port_suffix: str
    adapter_suffix: str
    indent: str
    quote: str
    semi: str
    core_import_path: str = "nest-hex"

    # Identifiers shared across the batch
    token_name: str
    interface_name: str
    token_type_name: str
    service_name: str
    module_name: str = ""
    adapter_class_name: str = ""
    config_options_name: str = ""
    adapter_config_name: str = ""

    # Generator options
    include_service: bool = True
    include_module: bool = True
    registration_type: str = "sync"
    technology: str = ""

    # Referenced port
    has_port: bool = False
    port_kebab: str = ""
    port_pascal: str = ""
    port_camel: str = ""
    port_token_name: str = ""
    port_interface_name: str = ""
    port_token_type_name: str = ""
    port_import_path: str = ""

    # Sibling artifacts: role -> import specifier, and the manifest entries
    imports: dict[str, str] = Field(default_factory=dict)
    exports: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class GenerationPhase(str, Enum):
    CONFIGURING = "configuring"
    RENDERING = "rendering"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


class ArtifactSpec(BaseModel):
    """One file a generator intends to write."""

    role: str
    path: Path
    content: str


class WriteResult(BaseModel):
    """Outcome of one attempted write."""

    path: Path
    existed: bool
    written: bool
    success: bool
    conflict: bool = False
    message: str = ""


class GenerationError(RuntimeError):
    """Raised by :meth:`GenerationResult.raise_for_status` on a failed batch."""

    def __init__(self, message: str, failures: list[WriteResult]) -> None:
        super().__init__(message)
        self.failures = failures

    @property
    def paths(self) -> list[Path]:
        return [failure.path for failure in self.failures]


class GenerationResult(BaseModel):
    """Aggregate outcome of one ``generate()`` call."""

    success: bool
    phase: GenerationPhase
    files: list[Path] = Field(
        default_factory=list,
        description="Paths written (or that would be written, in dry-run)",
    )
    results: list[WriteResult] = Field(default_factory=list)
    message: str = ""

    @property
    def failures(self) -> list[WriteResult]:
        return [r for r in self.results if not r.success]

    @property
    def conflicts(self) -> list[Path]:
        return [r.path for r in self.results if r.conflict]

    def raise_for_status(self) -> None:
        """Raise :class:`GenerationError` if any write failed."""
        if not self.success:
            raise GenerationError(self.message, self.failures)
