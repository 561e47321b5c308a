"""Display and repr logic for FloatTable."""

from __future__ import annotations
import math
from typing import List


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5

# printf-style format for the diagnostic dump
VALUE_FORMAT = "%f"


# ============================================================
# Diagnostic dump (render)
# ============================================================

def _dump_header(rows: int, columns: int) -> str:
	return f"Table {rows}x{columns}"


def _dump_row(values) -> str:
	"""One bracketed, comma separated row in fixed point."""
	return "  [" + ", ".join(VALUE_FORMAT % v for v in values) + "]"


def _dump(rows: int, columns: int, row_values) -> str:
	"""Full dump text; row_values yields one sequence per row."""
	lines = [_dump_header(rows, columns)]
	lines.extend(_dump_row(values) for values in row_values)
	return "\n".join(lines) + "\n"


# ============================================================
# repr
# ============================================================

def _format_value(v: float) -> str:
	if math.isfinite(v) and v == int(v):
		return f"{v:.1f}"
	return f"{v:g}"


def _preview_indices(n: int, head: int) -> List[int | None]:
	"""Indices to show for n items; None marks the "..." gap."""
	if n > head * 2:
		return list(range(head)) + [None] + list(range(n - head, n))
	return list(range(n))


def _format_column(tbl, c, row_indices) -> List[str]:
	"""Header plus formatted cells of column c, right aligned."""
	if c is None:
		out = ["..."] + ["..." for _ in row_indices]
	else:
		out = [f".c{c}"]
		for r in row_indices:
			out.append("..." if r is None else _format_value(tbl._store.read(r, c)))
	width = max(len(s) for s in out)
	return [s.rjust(width) for s in out]


def _footer(tbl) -> str:
	return f"# {tbl.rows}×{tbl.columns} table <float>"


def _repr_table(tbl) -> str:
	"""Pretty repr for a FloatTable."""
	if tbl.released:
		return "# released table"
	if tbl.size() == 0:
		return _footer(tbl)

	row_indices = _preview_indices(tbl.rows, MAX_HEAD_ROWS)
	col_indices = _preview_indices(tbl.columns, MAX_HEAD_COLS)
	formatted_cols = [_format_column(tbl, c, row_indices) for c in col_indices]

	lines = []
	for i in range(len(row_indices) + 1):
		lines.append("  ".join(col[i] for col in formatted_cols))

	lines.append("")
	lines.append(_footer(tbl))
	return "\n".join(lines)
