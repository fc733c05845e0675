"""Regenerate the bundled stroke table from the Unicode Unihan database.

Run from the project root with the package installed:

    python scripts/generate_stroke_table.py
"""

from __future__ import annotations

import argparse
import shutil
import zipfile
from pathlib import Path
from urllib.request import urlretrieve

from zh_collation.models import ChineseVariant
from zh_collation.strokes.parser import format_stroke_line, parse_stroke_lines
from zh_collation.strokes.repository import BUNDLED_STROKES_PATH, StrokeTable

UNIHAN_ZIP_URL = "https://www.unicode.org/Public/UCD/latest/ucd/Unihan.zip"
WORK_DIR = Path("data") / "unihan"

HEADER = """\
# Unihan kTotalStrokes table bundled with zh-collation.
#
# Format: code point, property name, stroke count(s), tab separated. When two
# counts are listed the first is preferred for zh-Hans and the second for zh-Hant.
#
# Regenerate the full table from the Unicode Character Database with:
#   python scripts/generate_stroke_table.py
#
"""


def _ensure_unihan_zip(zip_path: Path) -> None:
    zip_path.parent.mkdir(parents=True, exist_ok=True)
    if zip_path.exists():
        print(f"[skip] Unihan zip already exists: {zip_path}")
        return
    print(f"[download] {UNIHAN_ZIP_URL}")
    urlretrieve(UNIHAN_ZIP_URL, zip_path)
    print(f"[ok] downloaded: {zip_path}")


def _extract_unihan_zip(zip_path: Path, extract_dir: Path) -> None:
    if extract_dir.exists():
        shutil.rmtree(extract_dir)
    extract_dir.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(zip_path, "r") as zf:
        zf.extractall(extract_dir)
    print(f"[ok] extracted to: {extract_dir}")


def _collect_stroke_lines(extract_dir: Path) -> list[str]:
    txt_files = sorted(extract_dir.glob("Unihan_*.txt"))
    if not txt_files:
        raise FileNotFoundError(f"No Unihan_*.txt files found under {extract_dir}")

    # kTotalStrokes has moved between Unihan_*.txt files across releases.
    entries = {}
    for txt_path in txt_files:
        with txt_path.open("r", encoding="utf-8") as handle:
            for entry in parse_stroke_lines(handle):
                entries[entry.character] = entry

    return [format_stroke_line(entries[ch]) for ch in sorted(entries, key=ord)]


def _write_table(lines: list[str], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        handle.write(HEADER)
        for line in lines:
            handle.write(line)
            handle.write("\n")
    print(f"[ok] wrote stroke table: {output_path}")
    print(f"[summary] entries={len(lines)}")


def _print_small_self_test(output_path: Path) -> None:
    table = StrokeTable(output_path)
    print("[self-test] lookup common chars")
    for ch in ("一", "參", "肆", "正", "張", "陳", "蔡", "鄭", "這", "这"):
        strokes = table.lookup(ch, ChineseVariant.TRADITIONAL)
        if strokes is None:
            print(f"  {ch}: <missing> (please update Unihan data or verify char coverage)")
        else:
            print(f"  {ch}: {strokes}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--work-dir", type=Path, default=WORK_DIR)
    parser.add_argument("--output", type=Path, default=BUNDLED_STROKES_PATH)
    args = parser.parse_args()

    zip_path = args.work_dir / "Unihan.zip"
    extract_dir = args.work_dir / "extracted"
    _ensure_unihan_zip(zip_path)
    _extract_unihan_zip(zip_path, extract_dir)
    _write_table(_collect_stroke_lines(extract_dir), args.output)
    _print_small_self_test(args.output)


if __name__ == "__main__":
    main()
