"""Unit tests for console helpers (hexgen.utils)."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from hexgen import utils
from hexgen.scaffolder.models import GenerationPhase, GenerationResult, WriteResult
from hexgen.utils import configure_logging, describe_write, print_generation_result

pytestmark = pytest.mark.unit


def _write(**kwargs) -> WriteResult:
    defaults = {"path": Path("a.ts"), "existed": False, "written": True, "success": True}
    defaults.update(kwargs)
    return WriteResult(**defaults)


class TestDescribeWrite:
    def test_created(self):
        assert describe_write(_write()) == "created"

    def test_overwritten(self):
        assert describe_write(_write(existed=True)) == "overwritten"

    def test_dry_run(self):
        assert describe_write(_write(written=False)) == "dry run"

    def test_conflict(self):
        assert describe_write(_write(existed=True, written=False, success=False, conflict=True)) == "conflict"

    def test_failed(self):
        assert describe_write(_write(written=False, success=False)) == "failed"


class TestPrintGenerationResult:
    def test_lists_every_file(self):
        console = Console(record=True, width=200)
        result = GenerationResult(
            success=False,
            phase=GenerationPhase.FAILED,
            files=[Path("a.ts")],
            results=[
                _write(path=Path("a.ts")),
                _write(path=Path("b.ts"), existed=True, written=False, success=False, conflict=True),
            ],
            message="Failed to generate 1 file(s)",
        )
        with patch.object(utils, "console", console):
            print_generation_result(result)
        output = console.export_text()
        assert "a.ts" in output
        assert "b.ts" in output
        assert "conflict" in output
        assert "Failed to generate 1 file(s)" in output


class TestConfigureLogging:
    def test_levels(self):
        configure_logging(verbose=True)
        assert logging.getLogger("hexgen").level == logging.DEBUG
        configure_logging()
        logger = logging.getLogger("hexgen")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        logger.handlers.clear()
        logger.propagate = True
