"""Unit tests for CLI argument handling and summary output."""

from __future__ import annotations

from pathlib import Path

import pytest

from zh_collation.cli import build_arg_parser, collect_class_counts, main, options_from_args
from zh_collation.models import ChineseVariant, DigitCaseOrder, NumeralMode, Options
from zh_collation.strokes.repository import default_stroke_table


def test_options_from_args_defaults_match_library_defaults() -> None:
    args = build_arg_parser().parse_args(["input.txt"])

    assert options_from_args(args) == Options()


def test_options_from_args_maps_every_flag() -> None:
    args = build_arg_parser().parse_args(
        ["input.txt", "--uppercase-first", "--numerals", "definition", "--variant", "simplified"]
    )

    assert options_from_args(args) == Options(
        digit_case_order=DigitCaseOrder.UPPERCASE_FIRST,
        numeral_mode=NumeralMode.DEFINITION,
        variant=ChineseVariant.SIMPLIFIED,
    )


def test_collect_class_counts_counts_first_characters() -> None:
    counts = collect_class_counts(
        ["", "1樓", "一樓", "壹號", "正門", "abc", "二"], Options(), default_stroke_table()
    )

    assert counts == {
        "empty": 1,
        "arabic_digit": 1,
        "digit_lowercase_style": 2,
        "digit_uppercase_style": 1,
        "chinese_character": 1,
        "other": 1,
    }


def test_main_writes_sorted_lines_to_stdout(
    tmp_path: Path, capsysbinary: pytest.CaptureFixture[bytes]
) -> None:
    path = tmp_path / "in.txt"
    path.write_text("肆\n1\n一\n2\n二\n參\n正\n", encoding="utf-8")

    assert main([str(path), "--uppercase-first"]) == 0

    out = capsysbinary.readouterr().out.decode("utf-8")
    assert out.splitlines() == ["1", "2", "參", "肆", "一", "二", "正"]


def test_main_summary_goes_to_stderr(
    tmp_path: Path, capsysbinary: pytest.CaptureFixture[bytes]
) -> None:
    path = tmp_path / "in.txt"
    path.write_text("正\n1\n", encoding="utf-8")
    output = tmp_path / "out.txt"

    main([str(path), "--output", str(output), "--summary"])

    err = capsysbinary.readouterr().err.decode("utf-8")
    assert "class" in err
    assert "arabic_digit" in err
    assert "chinese_character" in err
    assert output.read_text(encoding="utf-8") == "1\n正\n"


def test_main_exits_on_missing_input(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Input not found"):
        main([str(tmp_path / "missing.txt")])


def test_main_exits_on_missing_stroke_data(tmp_path: Path) -> None:
    path = tmp_path / "in.txt"
    path.write_text("一\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="Stroke data not found"):
        main([str(path), "--strokes", str(tmp_path / "missing.txt")])


def test_main_exits_on_invalid_encoding(tmp_path: Path) -> None:
    path = tmp_path / "in.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")

    with pytest.raises(SystemExit, match="Invalid UTF-8 input in 1 items"):
        main([str(path)])


def test_log_level_is_case_insensitive() -> None:
    args = build_arg_parser().parse_args(["input.txt", "--log-level", "debug"])

    assert args.log_level == "DEBUG"


def test_unknown_log_level_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["input.txt", "--log-level", "verbose"])

    assert exc_info.value.code == 2
    assert "--log-level" in capsys.readouterr().err
