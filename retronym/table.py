"""
Packing data into tables.

Source text supplies values one at a time, in order, with nothing to mark
where one record ends and the next begins. Only the record type's column
count says so. RowBuilder therefore keeps explicit track of where it is in
the row, and is either still building or satisfied.
A satisfied row takes no more data; the TableBuilder starts the next one.
"""
from typing import NamedTuple, Optional
from .layout import Struct, PrimitiveField
from .syntax import Node
from .errors import RetronymError, ROW_SATISFIED, UNSATISFIED

class Cell(NamedTuple):
	""" One datum, bound to the field (column) it was packed against. """
	field: PrimitiveField
	node: Node
	row: int
	col: int

	def __str__(self): return str(self.node)
	def __repr__(self): return "[%d][%d] %s: %s" % (self.row, self.col, self.field, self.node)

class Row:
	def __init__(self, index:int, cells:tuple[Cell, ...]):
		self.index, self.cells = index, cells
	def __iter__(self): return iter(self.cells)
	def __len__(self): return len(self.cells)
	def __getitem__(self, col:int) -> Cell: return self.cells[col]
	def nodes(self) -> list[Node]: return [cell.node for cell in self.cells]
	def __str__(self): return ", ".join(map(str, self.cells))
	def __repr__(self): return "<Row %d: %s>" % (self.index, self)

class RowBuilder:
	""" Fills one row, field by field. Yields the finished row exactly once. """
	def __init__(self, struct:Struct, index:int):
		self._fields = list(struct.leaves())
		self._index = index
		self._col = 0
		self._cells = []
		self._is_satisfied = False

	def is_satisfied(self) -> bool: return self._is_satisfied
	def is_started(self) -> bool: return bool(self._cells)
	def index(self) -> int: return self._index

	def add_data(self, node:Node) -> Optional[Row]:
		if self._is_satisfied or self._col >= len(self._fields):
			raise RetronymError(ROW_SATISFIED, node.token)
		self._cells.append(Cell(self._fields[self._col], node, self._index, self._col))
		self._col += 1
		if self._col < len(self._fields): return None
		self._is_satisfied = True
		return Row(self._index, tuple(self._cells))

	def last_node(self) -> Optional[Node]:
		return self._cells[-1].node if self._cells else None

class Table:
	def __init__(self, record:Struct, rows:list[Row]):
		self.record, self.rows = record, rows
	def __iter__(self): return iter(self.rows)
	def __len__(self): return len(self.rows)
	def __str__(self):
		return "{\t%s\n%s}" % (self.record, "".join("\t%s\n" % row for row in self.rows))

class TableBuilder:
	"""
	Tables are tightly bound to the record type that defines their columns.
	There is no swapping the record type out while building.
	"""
	def __init__(self, record:Struct):
		self.record = record
		self.rows = []
		self._builder = RowBuilder(record, 0)

	def add_data(self, node:Node) -> Optional[Row]:
		if self._builder.is_satisfied():
			self._builder = RowBuilder(self.record, self._builder.index() + 1)
		row = self._builder.add_data(node)
		if row is not None: self.rows.append(row)
		return row

	def is_satisfied(self) -> bool:
		return self._builder.is_satisfied()

	def finish(self) -> Table:
		""" A partly-filled last row is an error. A table that never got any data is just empty. """
		if self._builder.is_started() and not self._builder.is_satisfied():
			raise RetronymError(UNSATISFIED, self._builder.last_node().token)
		return Table(self.record, self.rows)
