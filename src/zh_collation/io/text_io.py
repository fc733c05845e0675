"""Line-oriented read/write helpers for the command-line front end."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

STDIO_PATH = Path("-")


def read_lines(input_path: Path) -> list[bytes]:
    """Read raw lines from a file, or from stdin when the path is ``-``.

    Lines are returned undecoded so encoding problems are reported by the
    sorter with their line index. Line terminators are stripped and a final
    trailing newline does not produce an empty line.

    Args:
        input_path: Source file path or ``-``.

    Returns:
        Raw line payloads in file order.
    """

    if input_path == STDIO_PATH:
        data = sys.stdin.buffer.read()
    else:
        data = input_path.read_bytes()
    return data.splitlines()


def write_lines(lines: Sequence[str], output_path: Path | None = None) -> None:
    """Write lines as UTF-8, one per line, to a file or to stdout.

    Args:
        lines: Text lines to serialize.
        output_path: Destination path; ``None`` or ``-`` writes to stdout.
    """

    payload = "".join(f"{line}\n" for line in lines).encode("utf-8")
    if output_path is None or output_path == STDIO_PATH:
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()
        return
    output_path.write_bytes(payload)
