"""Unit tests for the stroke table repository."""

from __future__ import annotations

from pathlib import Path

import pytest

from zh_collation.models import ChineseVariant
from zh_collation.strokes.repository import StrokeTable, default_stroke_table


def test_lookup_returns_variant_specific_counts(mini_table: StrokeTable) -> None:
    assert mini_table.lookup("草", ChineseVariant.SIMPLIFIED) == 9
    assert mini_table.lookup("草", ChineseVariant.TRADITIONAL) == 10
    assert mini_table.lookup("草") == 10
    assert mini_table.lookup("正", ChineseVariant.SIMPLIFIED) == 5


def test_lookup_returns_none_for_absent_characters(mini_table: StrokeTable) -> None:
    assert mini_table.lookup("龍") is None
    assert mini_table.lookup("a") is None
    assert "龍" not in mini_table
    assert "參" in mini_table


def test_table_size_and_max_strokes(mini_table: StrokeTable) -> None:
    assert len(mini_table) == 8
    assert mini_table.max_strokes == 13


def test_empty_table_has_zero_max_strokes(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n", encoding="utf-8")

    assert StrokeTable(path).max_strokes == 0


def test_missing_file_raises_on_first_access(tmp_path: Path) -> None:
    table = StrokeTable(tmp_path / "missing.txt")

    with pytest.raises(FileNotFoundError, match="Stroke data file not found"):
        table.lookup("一")


def test_default_stroke_table_is_shared_and_covers_documented_characters() -> None:
    table = default_stroke_table()

    assert table is default_stroke_table()
    assert [table.lookup(ch) for ch in ("一", "二", "正", "參", "肆")] == [1, 2, 5, 11, 13]


def test_entries_by_character_is_read_only(mini_table: StrokeTable) -> None:
    with pytest.raises(TypeError):
        mini_table.entries_by_character["龍"] = mini_table.entries_by_character["一"]

    assert "龍" not in mini_table


def test_default_stroke_table_covers_common_surnames() -> None:
    table = default_stroke_table()
    surnames = "王李张刘陈杨黄赵吴周徐孙马朱胡郭何高林罗郑梁谢宋唐韩冯曹彭曾肖董袁潘蒋蔡余杜叶程苏魏吕沈"
    traditional = "張劉陳楊黃趙孫馬郭羅鄭謝韓馮蔣葉蘇呂"

    assert [ch for ch in surnames + traditional if ch not in table] == []
    assert len(table) > 20000


def test_default_stroke_table_keeps_dual_counts_for_simplified_forms() -> None:
    table = default_stroke_table()

    assert table.lookup("这", ChineseVariant.SIMPLIFIED) == 7
    assert table.lookup("这", ChineseVariant.TRADITIONAL) == 8
    assert table.lookup("蔡") == 15
    assert table.lookup("變") == 23
