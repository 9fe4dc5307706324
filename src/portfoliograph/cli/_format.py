"""Plain-text tables and JSON output for the CLI."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

MAX_LINES = 100

# Columns holding ids and counts are right-aligned
NUMERIC_COLUMNS = frozenset({"Id", "Contacts"})


def to_json(command: str, data: Any) -> str:
    """Serialize command output as ``{"command": ..., "data": ...}``."""
    return json.dumps({"command": command, "data": data}, indent=2, default=str)


def print_json(command: str, data: Any, output: str | None = None) -> None:
    """Print command output as JSON, or write it to ``output``."""
    text = to_json(command, data)
    if not output:
        print(text)
        return
    Path(output).write_text(text, encoding="utf-8")
    print(f"Wrote {command} output to {output}")


def truncate(text: str, max_chars: int = 60) -> str:
    return text if len(text) <= max_chars else text[: max_chars - 1] + "…"


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]], indent: int = 2) -> list[str]:
    """Lay out rows under a header rule, one string per line.

    Returns an empty list when there are no rows.
    """
    if not rows:
        return []

    widths = [max(len(h), *(len(row[i]) for row in rows)) for i, h in enumerate(headers)]

    def layout(cells: Sequence[str]) -> str:
        padded = [
            cell.rjust(width) if header in NUMERIC_COLUMNS else cell.ljust(width)
            for header, cell, width in zip(headers, cells, widths)
        ]
        return " " * indent + "  ".join(padded)

    header_line = " " * indent + "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    rule = " " * indent + "  ".join("─" * w for w in widths)
    return [header_line, rule, *(layout(row) for row in rows)]


def print_lines(lines: Sequence[str], limit: int = MAX_LINES) -> None:
    """Print up to ``limit`` lines, then a count of the rest."""
    if lines:
        print("\n".join(lines[:limit]))
    hidden = len(lines) - limit
    if hidden > 0:
        print(f"\n  # ... {hidden} more lines")
