"""Status taxonomy and exception hierarchy for py-table2d."""

from __future__ import annotations
from enum import IntEnum


class ErrorKind(IntEnum):
	"""Status of a table operation. Values match the classic integer codes."""
	OK = 0
	OUT_OF_RANGE = 1
	NULL_POINTER = 2
	INVALID_SIZE = 3

	@property
	def description(self) -> str:
		return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
	ErrorKind.OK: "No error",
	ErrorKind.OUT_OF_RANGE: "Index out of range",
	ErrorKind.NULL_POINTER: "Invalid pointers",
	ErrorKind.INVALID_SIZE: "Invalid size",
}

UNKNOWN_ERROR = "Unknown error"


def describe(code) -> str:
	"""Human-readable description for an ErrorKind or raw integer code.

	Unrecognized codes map to "Unknown error" instead of failing.
	"""
	try:
		return ErrorKind(code).description
	except (ValueError, TypeError):
		return UNKNOWN_ERROR


class TableError(Exception):
	"""Base exception for py-table2d."""
	kind = None

	def __init__(self, message=None, kind=None):
		if kind is not None:
			self.kind = kind
		if message is None and self.kind is not None:
			message = self.kind.description
		super().__init__(message)


class TableIndexError(TableError, IndexError):
	"""Raised when a row/column index is outside the table."""
	kind = ErrorKind.OUT_OF_RANGE


class TableReleasedError(TableError, ReferenceError):
	"""Raised when a table is absent or has already been destroyed."""
	kind = ErrorKind.NULL_POINTER


class TableValueError(TableError, ValueError):
	"""Raised for negative dimensions or ragged input."""
	kind = ErrorKind.INVALID_SIZE


class TableTypeError(TableError, TypeError):
	"""Raised for non-numeric values or non-integer indices."""
	pass


_EXCEPTIONS = {
	ErrorKind.OUT_OF_RANGE: TableIndexError,
	ErrorKind.NULL_POINTER: TableReleasedError,
	ErrorKind.INVALID_SIZE: TableValueError,
}


def exception_for(kind: ErrorKind, message=None) -> TableError:
	"""Build (not raise) the exception matching a failed status."""
	return _EXCEPTIONS[kind](message)
