"""Pytest configuration shared by all tests.

The sheet tests write real ODS files; ``ods_path`` points them at a per-test
temporary directory so no test ever touches the configured workbook.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def ods_path(tmp_path: Path) -> Path:
    return tmp_path / "bills.ods"
