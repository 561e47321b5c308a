"""
Test FloatTable.resize content migration.
"""

import pytest
from py_table2d import FloatTable, ErrorKind


def _numbered(rows, columns):
	"""rows x columns table holding 1.0, 2.0, ... in row-major order."""
	t = FloatTable(rows, columns)
	value = 1.0
	for r in range(rows):
		for c in range(columns):
			t[r, c] = value
			value += 1.0
	return t


class TestOverlapPreserved:
	"""Top-left overlap keeps its values, everything else is fill."""

	@pytest.mark.parametrize("old,new", [
		((4, 2), (12, 4)),
		((4, 2), (2, 1)),
		((3, 3), (3, 5)),
		((3, 3), (5, 3)),
		((3, 3), (2, 6)),
		((2, 5), (4, 2)),
		((3, 3), (3, 3)),
	])
	def test_overlap_and_fill(self, old, new):
		t = _numbered(*old)
		before = t.to_list()
		assert t.resize(new[0], new[1], -1.5).ok
		assert t.shape == new

		rcopy = min(old[0], new[0])
		ccopy = min(old[1], new[1])
		for r in range(new[0]):
			for c in range(new[1]):
				if r < rcopy and c < ccopy:
					assert t[r, c] == before[r][c]
				else:
					assert t[r, c] == -1.5

	def test_grow_from_empty_is_all_fill(self):
		t = FloatTable(0, 0)
		assert t.resize(2, 3, 4.0).ok
		assert t.to_list() == [[4.0, 4.0, 4.0], [4.0, 4.0, 4.0]]

	def test_grow_from_zero_columns(self):
		t = FloatTable(3, 0)
		assert t.resize(2, 2, 1.0).ok
		assert t.to_list() == [[1.0, 1.0], [1.0, 1.0]]

	def test_end_to_end_scenario(self):
		t = FloatTable.new(4, 2, 0.0).value
		value = 1.0
		for r in range(t.rows):
			for c in range(t.columns):
				t.set(r, c, value)
				value += 1.0
		assert t.get(0, 0).value == 1.0
		assert t.get(3, 1).value == 8.0

		assert t.resize(12, 4, 0.33).ok
		assert t.get(0, 0).value == 1.0
		assert t.get(3, 1).value == 8.0
		assert t.get(0, 2).value == 0.33
		assert t.get(5, 0).value == 0.33
		assert t.rows == 12
		assert t.columns == 4


class TestZeroAndInvalid:
	"""Zero-sized targets clear, negative targets are rejected."""

	@pytest.mark.parametrize("rows,columns", [(0, 0), (0, 7), (7, 0)])
	def test_zero_target_behaves_as_clear(self, rows, columns):
		t = _numbered(3, 3)
		assert t.resize(rows, columns, 9.0).ok
		assert t.shape == (0, 0)
		assert t.size() == 0
		assert t.get(0, 0).kind is ErrorKind.OUT_OF_RANGE

	@pytest.mark.parametrize("rows,columns", [(-1, 3), (3, -1), (-2, -2)])
	def test_negative_target_leaves_table_untouched(self, rows, columns):
		t = _numbered(2, 2)
		result = t.resize(rows, columns, 0.0)
		assert result.kind is ErrorKind.INVALID_SIZE
		assert t.shape == (2, 2)
		assert t.to_list() == [[1.0, 2.0], [3.0, 4.0]]

	def test_resize_does_not_alias_old_buffer(self):
		t = _numbered(2, 2)
		copy = t.copy()
		t.resize(3, 3, 0.0)
		t[0, 0] = 100.0
		assert copy[0, 0] == 1.0
