"""
py-table2d: a resizable two-dimensional table of floats

Values live in one row-major buffer owned by the table. The core
operations report failures through explicit status results rather than
exceptions, and resize keeps whatever content overlaps the new shape.

Main classes:
    - FloatTable: 2D table of floats (rows x columns)
    - Result: status/value returned by every core operation
    - ErrorKind: OK, OUT_OF_RANGE, NULL_POINTER, INVALID_SIZE

Zero external dependencies - pure Python stdlib only.
"""

from .errors import ErrorKind, describe
from .errors import TableError, TableIndexError, TableReleasedError, TableValueError, TableTypeError
from .result import Result
from .table import FloatTable
from .table import new_table, clear_table, destroy_table, get_value, set_value, resize_table, render_table

__version__ = "0.1.0"
__all__ = [
	"FloatTable",
	"Result",
	"ErrorKind",
	"describe",
	"new_table",
	"clear_table",
	"destroy_table",
	"get_value",
	"set_value",
	"resize_table",
	"render_table",
	"TableError",
	"TableIndexError",
	"TableReleasedError",
	"TableValueError",
	"TableTypeError",
]
