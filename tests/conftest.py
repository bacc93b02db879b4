"""Shared pytest fixtures for the hexgen test suite.

Provides reusable fixtures for:
- Temporary project roots
- Default and customised configurations
- Option builders for each generator kind
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from hexgen.config import DEFAULT_CONFIG, HexConfig, resolve_config
from hexgen.scaffolder.models import GenerationContext, GeneratorOptions


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project root (auto-cleanup)."""
    root = tmp_path / "project"
    root.mkdir()
    return root


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> HexConfig:
    return DEFAULT_CONFIG


@pytest.fixture
def make_config() -> Callable[..., HexConfig]:
    """Build a resolved config from keyword groups.

    ``make_config(naming={"file_case": "pascal"})``
    """

    def _make(**overrides: Any) -> HexConfig:
        return resolve_config(overrides)

    return _make


# ---------------------------------------------------------------------------
# Options & context
# ---------------------------------------------------------------------------

@pytest.fixture
def make_options(project_root: Path) -> Callable[..., GeneratorOptions]:
    """Build ``GeneratorOptions`` rooted in the temporary project."""

    def _make(name: str, **kwargs: Any) -> GeneratorOptions:
        return GeneratorOptions(name=name, project_root=project_root, **kwargs)

    return _make


@pytest.fixture
def sample_context() -> GenerationContext:
    """A fully populated context for the ``object-storage`` port."""
    return GenerationContext(
        original="object-storage",
        kebab="object-storage",
        camel="objectStorage",
        pascal="ObjectStorage",
        snake="object_storage",
        screaming_snake="OBJECT_STORAGE",
        file_name="object-storage",
        file_case="kebab",
        port_suffix="PORT",
        adapter_suffix="Adapter",
        indent="\t",
        quote="'",
        semi=";",
        token_name="OBJECT_STORAGE_PORT",
        interface_name="ObjectStoragePort",
        token_type_name="ObjectStorageToken",
        service_name="ObjectStorageService",
        module_name="ObjectStorageModule",
        imports={
            "token": "./object-storage.token",
            "port": "./object-storage.port",
            "service": "./object-storage.service",
            "module": "./object-storage.module",
        },
        exports=[
            "./object-storage.token",
            "./object-storage.port",
            "./object-storage.service",
            "./object-storage.module",
        ],
    )
