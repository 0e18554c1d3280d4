from __future__ import annotations

from pathlib import Path


def write_text_file(path: Path, lines: list[str], newline: str = "\n") -> Path:
    """Write ``lines`` to ``path`` as UTF-8, one per line."""
    path.write_bytes(newline.join(lines).encode("utf-8"))
    return path
