"""Shared pytest fixtures for end-to-end tests."""

import importlib.util
import json
from pathlib import Path
from types import ModuleType
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def sample_dataset() -> dict[str, Any]:
    """Dataset shipped with the examples."""
    path = ROOT / "examples" / "data" / "sample_dataset.json"
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def report_cli() -> ModuleType:
    """The run_sales_report script loaded as a module."""
    path = ROOT / "scripts" / "run_sales_report.py"
    spec = importlib.util.spec_from_file_location("run_sales_report", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
