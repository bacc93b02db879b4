"""Tests for the adapter generator (hexgen.scaffolder.adapter_gen).

Covers:
- Adapter, service, types and index files
- Port references: derived, discovered on disk, and explicit overrides
- Relative import paths across configured directories
- File-name casing
"""

from __future__ import annotations

from pathlib import Path

import pytest

from hexgen.scaffolder.adapter_gen import AdapterGenerator
from hexgen.scaffolder.port_gen import PortGenerator

pytestmark = pytest.mark.unit


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


@pytest.fixture
def adapter_dir(project_root: Path) -> Path:
    return project_root / "src" / "adapters" / "s3-storage"


class TestAdapterFiles:
    async def test_generates_four_files(self, make_options, adapter_dir):
        result = await AdapterGenerator().generate(make_options("s3-storage"))
        assert result.success
        assert result.files == [
            adapter_dir / "s3-storage.adapter.ts",
            adapter_dir / "s3-storage.service.ts",
            adapter_dir / "s3-storage.types.ts",
            adapter_dir / "index.ts",
        ]

    async def test_adapter_class(self, make_options, adapter_dir):
        await AdapterGenerator().generate(make_options("s3-storage"))
        content = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "import { Adapter, AdapterBase } from 'nest-hex';" in content
        assert "@Adapter<S3StorageAdapterConfig>({" in content
        assert "export class S3StorageAdapter extends AdapterBase<S3StorageConfigOptions> {}" in content
        assert "implementation: S3StorageService," in content
        assert "import { S3StorageService } from './s3-storage.service';" in content
        assert "export default S3StorageAdapter;" in content

    async def test_without_port_uses_own_token(self, make_options, adapter_dir):
        await AdapterGenerator().generate(make_options("s3-storage"))
        content = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "portToken: S3_STORAGE_PORT," in content
        types = _read(adapter_dir / "s3-storage.types.ts")
        assert "export type S3StorageAdapterConfig = AdapterConfig<symbol, unknown>;" in types

    async def test_service_without_port(self, make_options, adapter_dir):
        await AdapterGenerator().generate(make_options("s3-storage", technology="AWS S3"))
        content = _read(adapter_dir / "s3-storage.service.ts")
        assert "import { Injectable } from '@nestjs/common';" in content
        assert "@Injectable()" in content
        assert "export class S3StorageService {" in content
        assert "Backed by AWS S3." in content

    async def test_index(self, make_options, adapter_dir):
        await AdapterGenerator().generate(make_options("s3-storage"))
        assert _read(adapter_dir / "index.ts").splitlines() == [
            "export * from './s3-storage.adapter';",
            "export * from './s3-storage.service';",
            "export * from './s3-storage.types';",
        ]

    async def test_adapter_suffix(self, make_config, make_options, adapter_dir):
        config = make_config(naming={"adapter_suffix": "Provider"})
        await AdapterGenerator(config).generate(make_options("s3-storage"))
        content = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "export class S3StorageProvider extends AdapterBase" in content
        assert "@Adapter<S3StorageProviderConfig>" in content

    async def test_pascal_file_case(self, make_config, make_options, project_root):
        config = make_config(naming={"file_case": "pascal"})
        result = await AdapterGenerator(config).generate(make_options("s3-storage"))
        base = project_root / "src" / "adapters" / "S3Storage"
        assert [p.name for p in result.files] == [
            "S3Storage.adapter.ts",
            "S3Storage.service.ts",
            "S3Storage.types.ts",
            "index.ts",
        ]
        assert result.files[0].parent == base


class TestAdapterPortReference:
    async def test_derived_reference(self, make_options, adapter_dir):
        await AdapterGenerator().generate(make_options("s3-storage", port_name="object-storage"))
        adapter = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "import { OBJECT_STORAGE_PORT } from '../../ports/object-storage';" in adapter
        assert "portToken: OBJECT_STORAGE_PORT," in adapter

    async def test_service_implements_port(self, make_options, adapter_dir):
        await AdapterGenerator().generate(make_options("s3-storage", port_name="object-storage"))
        service = _read(adapter_dir / "s3-storage.service.ts")
        assert "export class S3StorageService implements ObjectStoragePort {" in service
        assert "import type { ObjectStoragePort } from '../../ports/object-storage';" in service

    async def test_types_reference_port(self, make_options, adapter_dir):
        await AdapterGenerator().generate(make_options("s3-storage", port_name="object-storage"))
        types = _read(adapter_dir / "s3-storage.types.ts")
        assert "import type { AdapterConfig } from 'nest-hex';" in types
        assert "export type ObjectStorageToken = typeof OBJECT_STORAGE_PORT;" in types
        assert (
            "export type S3StorageAdapterConfig = AdapterConfig<ObjectStorageToken, ObjectStoragePort>;"
            in types
        )
        assert "export interface S3StorageConfigOptions {" in types

    async def test_discovered_port_token(self, make_config, make_options, adapter_dir):
        contract = make_config(naming={"port_suffix": "CONTRACT"})
        await PortGenerator(contract).generate(make_options("object-storage"))

        await AdapterGenerator().generate(make_options("s3-storage", port_name="object-storage"))
        adapter = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "portToken: OBJECT_STORAGE_CONTRACT," in adapter
        assert "OBJECT_STORAGE_PORT" not in adapter

    async def test_discovered_port_in_pascal_directory(self, make_config, make_options, adapter_dir):
        pascal = make_config(naming={"file_case": "pascal"})
        await PortGenerator(pascal).generate(make_options("object-storage"))

        await AdapterGenerator().generate(make_options("s3-storage", port_name="object-storage"))
        adapter = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "from '../../ports/ObjectStorage';" in adapter

    async def test_explicit_port_path(self, make_options, adapter_dir):
        await AdapterGenerator().generate(
            make_options(
                "s3-storage",
                port_name="object-storage",
                port_path="@/domain/ports/object-storage",
            )
        )
        adapter = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "from '@/domain/ports/object-storage';" in adapter

    async def test_explicit_token_name(self, make_options, adapter_dir):
        await AdapterGenerator().generate(
            make_options(
                "s3-storage",
                port_name="object-storage",
                port_token_name="STORAGE_SERVICE_TOKEN",
            )
        )
        adapter = _read(adapter_dir / "s3-storage.adapter.ts")
        assert "portToken: STORAGE_SERVICE_TOKEN," in adapter
        assert "import { STORAGE_SERVICE_TOKEN } from '../../ports/object-storage';" in adapter

    async def test_reference_across_configured_dirs(self, make_config, make_options, project_root):
        config = make_config(output={"ports_dir": "src/domain/ports", "adapters_dir": "infra/adapters"})
        result = await AdapterGenerator(config).generate(
            make_options("s3-storage", port_name="object-storage")
        )
        adapter = _read(result.files[0])
        assert "from '../../../src/domain/ports/object-storage';" in adapter
        assert "\\" not in adapter

    async def test_adapter_deep_output(self, make_options, tmp_path):
        deep = tmp_path / "deep" / "nested" / "adapters"
        result = await AdapterGenerator().generate(make_options("s3-storage", output_path=deep))
        assert result.success
        assert (deep / "s3-storage" / "s3-storage.adapter.ts").is_file()
