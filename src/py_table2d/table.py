import numbers
import operator
import sys
import warnings
from array import array

from .display import _dump
from .display import _repr_table
from .errors import ErrorKind
from .errors import TableIndexError
from .errors import TableReleasedError
from .errors import TableTypeError
from .errors import TableValueError
from .result import OK
from .result import Result
from .storage import TYPECODE
from .storage import RowMajorStorage

from typing import Iterator
from typing import List
from typing import Optional


# ============================================================
# Argument coercion
# ============================================================

def _as_index(x, what="index") -> int:
	"""Integer index/dimension or TableTypeError (bool is rejected)."""
	if isinstance(x, bool):
		raise TableTypeError(f"{what} must be an integer, not bool")
	try:
		return operator.index(x)
	except TypeError:
		raise TableTypeError(f"{what} must be an integer, not {type(x).__name__}") from None


def _as_value(v) -> float:
	"""Element value as float or TableTypeError."""
	if isinstance(v, bool) or not isinstance(v, numbers.Real):
		raise TableTypeError(f"Table values must be real numbers, not {type(v).__name__}")
	return float(v)


class FloatTable:
	"""
	Two-dimensional table of floats in row-major order.

	The core operations (new, get, set, resize, clear, destroy, render)
	report failures through a Result instead of raising. Indexing,
	row/column access and the other conveniences raise the matching
	TableError subclass instead.
	"""

	__slots__ = ('_store', '_released')
	__hash__ = None

	def __init__(self, rows=0, columns=0, initial_value=0.0):
		rows = _as_index(rows, "rows")
		columns = _as_index(columns, "columns")
		value = _as_value(initial_value)
		if rows < 0 or columns < 0:
			raise TableValueError(f"Table dimensions must be non-negative, got {rows}x{columns}")
		self._store = RowMajorStorage(rows, columns, value)
		self._released = False

	@classmethod
	def new(cls, rows, columns, initial_value=0.0) -> Result:
		"""Build a rows x columns table filled with initial_value.

		Negative dimensions give INVALID_SIZE and no table.
		"""
		rows = _as_index(rows, "rows")
		columns = _as_index(columns, "columns")
		if rows < 0 or columns < 0:
			return Result.failure(ErrorKind.INVALID_SIZE)
		return Result.success(cls(rows, columns, initial_value))

	@classmethod
	def from_rows(cls, rows) -> "FloatTable":
		"""Build from a rectangular nested sequence of numbers."""
		rows = [list(r) for r in rows]
		ncols = len(rows[0]) if rows else 0
		for i, r in enumerate(rows):
			if len(r) != ncols:
				raise TableValueError(f"Row {i} has {len(r)} values, expected {ncols}")
		if rows and not ncols:
			warnings.warn('Rows have no columns; the table holds no elements.')

		table = cls(len(rows), ncols)
		if rows and ncols:
			data = array(TYPECODE, (_as_value(v) for r in rows for v in r))
			table._store = RowMajorStorage.from_buffer(data, len(rows), ncols)
		return table

	# ============================================================
	# Shape
	# ============================================================

	@property
	def rows(self) -> int:
		return self._store.rows

	@property
	def columns(self) -> int:
		return self._store.columns

	@property
	def shape(self):
		return (self._store.rows, self._store.columns)

	@property
	def released(self) -> bool:
		return self._released

	def size(self) -> int:
		"""Number of stored elements (rows * columns)."""
		return len(self._store)

	def __len__(self):
		return self._store.rows

	def __bool__(self):
		return len(self._store) > 0

	def _in_bounds(self, r, c) -> bool:
		return 0 <= r < self._store.rows and 0 <= c < self._store.columns

	def _check_live(self):
		if self._released:
			raise TableReleasedError("Table has been destroyed")

	# ============================================================
	# Core operations (status results)
	# ============================================================

	def get(self, r, c) -> Result:
		"""Value at (r, c), or OUT_OF_RANGE / NULL_POINTER."""
		r = _as_index(r, "row")
		c = _as_index(c, "column")
		if self._released:
			return Result.failure(ErrorKind.NULL_POINTER)
		if not self._in_bounds(r, c):
			return Result.failure(ErrorKind.OUT_OF_RANGE)
		return Result.success(self._store.read(r, c))

	def set(self, r, c, value) -> Result:
		"""Overwrite (r, c) in place; nothing else changes."""
		r = _as_index(r, "row")
		c = _as_index(c, "column")
		value = _as_value(value)
		if self._released:
			return Result.failure(ErrorKind.NULL_POINTER)
		if not self._in_bounds(r, c):
			return Result.failure(ErrorKind.OUT_OF_RANGE)
		self._store.write(r, c, value)
		return OK

	def clear(self) -> Result:
		"""Drop all elements and collapse to 0x0. Safe to repeat."""
		if self._released:
			return Result.failure(ErrorKind.NULL_POINTER)
		self._store.release()
		return OK

	def destroy(self) -> Result:
		"""Clear, then mark the table released.

		Every later core operation on this object reports NULL_POINTER and
		the conveniences raise TableReleasedError.
		"""
		result = self.clear()
		if not result:
			return result
		self._released = True
		return OK

	def resize(self, rows, columns, fill_value=0.0) -> Result:
		"""
		Change the shape to rows x columns, keeping overlapping content.

		The top-left min(rows, old rows) x min(columns, old columns) block
		keeps its values; every other cell is set to fill_value. A zero
		element count behaves as clear(). Negative dimensions give
		INVALID_SIZE and leave the table untouched.
		"""
		rows = _as_index(rows, "rows")
		columns = _as_index(columns, "columns")
		fill_value = _as_value(fill_value)
		if self._released:
			return Result.failure(ErrorKind.NULL_POINTER)
		if rows < 0 or columns < 0:
			return Result.failure(ErrorKind.INVALID_SIZE)
		if rows * columns == 0:
			return self.clear()

		# Single assignment: shape and buffer change together
		self._store = self._store.migrated(rows, columns, fill_value)
		return OK

	def render(self, stream=None) -> Result:
		"""
		Write the diagnostic dump to stream (default stdout).

		Header "Table RxC", then one "  [v, v, ...]" line per row. The text
		is also returned as the result value. A failing read is reported on
		stderr and returned.
		"""
		if self._released:
			return Result.failure(ErrorKind.NULL_POINTER)

		row_values = []
		for r in range(self.rows):
			values = []
			for c in range(self.columns):
				result = self.get(r, c)
				if not result:
					print(result.description, file=sys.stderr)
					return result
				values.append(result.value)
			row_values.append(values)

		text = _dump(self.rows, self.columns, row_values)
		(stream if stream is not None else sys.stdout).write(text)
		return Result.success(text)

	# ============================================================
	# Pythonic access (raises)
	# ============================================================

	def _split_key(self, key):
		if not isinstance(key, tuple) or len(key) != 2:
			raise TableTypeError(f"Table indices must be a (row, column) pair, not {key!r}")
		return key

	def __getitem__(self, key):
		r, c = self._split_key(key)
		return self.get(r, c).unwrap()

	def __setitem__(self, key, value):
		r, c = self._split_key(key)
		self.set(r, c, value).unwrap()

	def row(self, r) -> List[float]:
		"""Values of row r, left to right."""
		self._check_live()
		r = _as_index(r, "row")
		if not 0 <= r < self.rows:
			raise TableIndexError(f"Row {r} out of range for {self.rows} rows")
		return list(self._store.row_slice(r))

	def column(self, c, reverse=False) -> List[float]:
		"""Values of column c, top to bottom (bottom to top with reverse)."""
		self._check_live()
		c = _as_index(c, "column")
		if not 0 <= c < self.columns:
			raise TableIndexError(f"Column {c} out of range for {self.columns} columns")
		order = range(self.rows - 1, -1, -1) if reverse else range(self.rows)
		return [self._store.read(r, c) for r in order]

	def iter_rows(self) -> Iterator[List[float]]:
		self._check_live()
		for r in range(self.rows):
			yield list(self._store.row_slice(r))

	def __iter__(self):
		return self.iter_rows()

	def fill(self, value):
		"""Set every element to value (returns self for chaining)."""
		self._check_live()
		self._store.fill(_as_value(value))
		return self

	def copy(self) -> "FloatTable":
		"""Independent table with the same shape and values."""
		self._check_live()
		new = FloatTable.__new__(FloatTable)
		new._store = self._store.copy()
		new._released = False
		return new

	def to_list(self) -> List[List[float]]:
		return list(self.iter_rows())

	def __eq__(self, other):
		if not isinstance(other, FloatTable):
			return NotImplemented
		if self._released or other._released:
			return self._released and other._released
		return self.shape == other.shape and list(self._store) == list(other._store)

	def __repr__(self):
		return _repr_table(self)


# ============================================================
# Functional interface (None is an absent table)
# ============================================================

def new_table(rows, columns, initial_value=0.0) -> Result:
	return FloatTable.new(rows, columns, initial_value)


def clear_table(table: Optional[FloatTable]) -> Result:
	if table is None:
		return Result.failure(ErrorKind.NULL_POINTER)
	return table.clear()


def destroy_table(table: Optional[FloatTable]) -> Result:
	"""Release table; an absent or already released table is NULL_POINTER."""
	if table is None:
		return Result.failure(ErrorKind.NULL_POINTER)
	return table.destroy()


def get_value(table: Optional[FloatTable], r, c) -> Result:
	if table is None:
		return Result.failure(ErrorKind.NULL_POINTER)
	return table.get(r, c)


def set_value(table: Optional[FloatTable], r, c, value) -> Result:
	if table is None:
		return Result.failure(ErrorKind.NULL_POINTER)
	return table.set(r, c, value)


def resize_table(table: Optional[FloatTable], rows, columns, fill_value=0.0) -> Result:
	if table is None:
		return Result.failure(ErrorKind.NULL_POINTER)
	return table.resize(rows, columns, fill_value)


def render_table(table: Optional[FloatTable], stream=None) -> Result:
	if table is None:
		return Result.failure(ErrorKind.NULL_POINTER)
	return table.render(stream)
