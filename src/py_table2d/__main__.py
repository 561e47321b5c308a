"""
Demonstration driver: python -m py_table2d

Builds a small table, fills it row by row, prints it, walks it column by
column from the bottom row up, grows it and prints it again.
"""

import argparse
import sys

from .display import VALUE_FORMAT
from .errors import describe
from .table import FloatTable


def _fail(result, table=None) -> int:
	print(describe(result.kind), file=sys.stderr)
	if table is not None:
		table.destroy()
	return 1


def _print_columns(table, out) -> None:
	for c in range(table.columns):
		cells = []
		for r in range(table.rows - 1, -1, -1):
			cells.append(f"row[{r}]={VALUE_FORMAT % table[r, c]}")
		out.write(f"column[{c}] = {{{', '.join(cells)}}}\n")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="py-table2d", description="FloatTable demonstration")
	parser.add_argument("--rows", type=int, default=4, help="initial row count")
	parser.add_argument("--columns", type=int, default=2, help="initial column count")
	parser.add_argument("--resize", type=int, nargs=2, default=(12, 4), metavar=("ROWS", "COLUMNS"),
	                    help="shape to resize to")
	parser.add_argument("--fill", type=float, default=0.33, help="value for cells added by resize")
	return parser


def main(argv=None, out=None) -> int:
	args = build_parser().parse_args(argv)
	out = out if out is not None else sys.stdout

	result = FloatTable.new(args.rows, args.columns, 0.0)
	if not result:
		return _fail(result)
	table = result.value

	# Sequential values in row-major order
	value = 1.0
	for r in range(table.rows):
		for c in range(table.columns):
			result = table.set(r, c, value)
			if not result:
				return _fail(result, table)
			value += 1.0

	result = table.render(out)
	if not result:
		return _fail(result, table)

	out.write("---\n")
	_print_columns(table, out)
	out.write("---\n")

	result = table.resize(*args.resize, args.fill)
	if not result:
		return _fail(result, table)
	result = table.render(out)
	if not result:
		return _fail(result, table)

	table.destroy()
	return 0


if __name__ == "__main__":
	sys.exit(main())
