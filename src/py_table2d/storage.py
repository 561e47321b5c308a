"""
Owned row-major storage for FloatTable.

Pure Python implementation using array.array, one contiguous buffer
of C doubles. A zero-sized store holds no buffer at all.
"""

from __future__ import annotations
from array import array
from typing import Iterator


# Element typecode for the backing buffer (C double)
TYPECODE = 'd'


def offset(r: int, c: int, columns: int) -> int:
	"""Linear position of (r, c) in a row-major buffer of the given width."""
	return r * columns + c


class RowMajorStorage:
	"""
	Contiguous rows*columns buffer with row-major addressing.

	Callers are responsible for bounds checks; this class only keeps the
	buffer length equal to rows*columns.
	"""

	__slots__ = ('_data', '_rows', '_columns')

	def __init__(self, rows: int = 0, columns: int = 0, fill: float = 0.0):
		self._rows = rows
		self._columns = columns
		count = rows * columns
		self._data = array(TYPECODE, [fill]) * count if count else None

	@classmethod
	def from_buffer(cls, data: array | None, rows: int, columns: int) -> RowMajorStorage:
		"""Adopt an already built buffer (no copy)."""
		count = rows * columns
		if (len(data) if data is not None else 0) != count:
			raise ValueError(f"buffer holds {len(data) if data else 0} values, expected {count}")
		store = cls.__new__(cls)
		store._rows = rows
		store._columns = columns
		store._data = data if count else None
		return store

	@property
	def rows(self) -> int:
		return self._rows

	@property
	def columns(self) -> int:
		return self._columns

	def __len__(self) -> int:
		return len(self._data) if self._data is not None else 0

	def __iter__(self) -> Iterator[float]:
		if self._data is not None:
			yield from self._data

	def read(self, r: int, c: int) -> float:
		return self._data[offset(r, c, self._columns)]

	def write(self, r: int, c: int, value: float) -> None:
		self._data[offset(r, c, self._columns)] = value

	def row_slice(self, r: int) -> array:
		"""Copy of row r."""
		if self._data is None:
			return array(TYPECODE)
		start = offset(r, 0, self._columns)
		return self._data[start:start + self._columns]

	def fill(self, value: float) -> None:
		if self._data is not None:
			self._data = array(TYPECODE, [value]) * len(self._data)

	def release(self) -> None:
		"""Drop the buffer and collapse to 0x0."""
		self._data = None
		self._rows = 0
		self._columns = 0

	def copy(self) -> RowMajorStorage:
		data = array(TYPECODE, self._data) if self._data is not None else None
		return RowMajorStorage.from_buffer(data, self._rows, self._columns)

	def migrated(self, rows: int, columns: int, fill: float) -> RowMajorStorage:
		"""
		New storage of rows x columns keeping the top-left overlap.

		Cells inside min(rows, self.rows) x min(columns, self.columns) keep
		their values; trailing columns of kept rows and all appended rows
		get `fill`. Built row by row in row-major order.
		"""
		rcopy = min(rows, self._rows)
		ccopy = min(columns, self._columns)
		pad = array(TYPECODE, [fill])

		data = array(TYPECODE)
		for r in range(rcopy):
			if ccopy:
				start = offset(r, 0, self._columns)
				data.extend(self._data[start:start + ccopy])
			data.extend(pad * (columns - ccopy))
		data.extend(pad * ((rows - rcopy) * columns))

		return RowMajorStorage.from_buffer(data, rows, columns)
