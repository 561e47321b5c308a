"""Tagged status/value returned by every core table operation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from .errors import ErrorKind
from .errors import exception_for


@dataclass(frozen=True)
class Result:
	"""
	Outcome of a table operation.

	A successful result has kind ErrorKind.OK and may carry a value
	(the element for get, the new table for new, the text for render).
	A failed result carries only its kind.
	"""
	kind: ErrorKind = ErrorKind.OK
	value: Any = None

	@classmethod
	def success(cls, value=None) -> Result:
		return cls(ErrorKind.OK, value)

	@classmethod
	def failure(cls, kind: ErrorKind) -> Result:
		if kind is ErrorKind.OK:
			raise ValueError("failure() needs a non-OK kind")
		return cls(kind)

	@property
	def ok(self) -> bool:
		return self.kind is ErrorKind.OK

	@property
	def description(self) -> str:
		return self.kind.description

	def __bool__(self):
		return self.ok

	def unwrap(self):
		"""Return the value, or raise the exception matching the failure."""
		if not self.ok:
			raise exception_for(self.kind)
		return self.value

	def __repr__(self):
		if self.ok:
			return f"Result(OK, {self.value!r})"
		return f"Result({self.kind.name}: {self.description})"


OK = Result.success()
