"""Shared fixtures for collation tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from zh_collation.strokes.repository import StrokeTable

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def mini_table() -> StrokeTable:
    """Eight-entry table: 一 二 正 信 草(9/10) 張 參 肆; 龍 is deliberately absent."""

    return StrokeTable(FIXTURES_DIR / "mini_strokes.txt")
