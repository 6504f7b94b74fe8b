"""
One pass over the statements of a source, producing an Object.

The Object is what a linker would eventually consume: the atoms this
source defines, the record types it knows, and its tables in order.
Data statements feed the table under construction. A new record-type
declaration closes that table and starts another.
"""
from typing import Iterable, Optional
from boozetools.support.foundation import Visitor
from .atoms import Atom, Atoms
from .layout import Structs, resolve_record
from .table import Table, TableBuilder
from .evaluate import evaluate, fold
from .errors import RetronymError, NO_RECORD, UNIMPLEMENTED, ARITHMETIC
from .source import Source
from .diagnostics import Report
from . import syntax

# The most a single repeat may pack: a full 16-bit address space of bytes.
REPEAT_LIMIT = 0x10000

class Object:
	tables: list[Table]

	def __init__(self, source:Optional[Source]=None, structs:Optional[Structs]=None):
		self.source = source
		self.atoms = Atoms()
		self.structs = Structs() if structs is None else structs
		self.tables = []

	def __str__(self): return "\n".join(map(str, self.tables))

class Assembler(Visitor):
	_builder: Optional[TableBuilder]

	def __init__(self, obj:Object, report:Optional[Report]=None):
		self.object = obj
		self._report = report
		self._builder = None

	def assemble(self, statements:Iterable[syntax.Node]) -> Object:
		""" All or nothing: the first error propagates, and the object is not to be trusted after. """
		for node in statements:
			self.statement(node)
		self.close()
		return self.object

	def statement(self, node:syntax.Node):
		self.visit(node)

	def close(self):
		""" Finish the table under construction, if any. """
		if self._builder is not None:
			table = self._builder.finish()
			self._builder = None
			self.object.tables.append(table)
			if self._report is not None:
				self._report.info("Table %d: %s, %d row(s)" % (len(self.object.tables), table.record, len(table)))

	def visit_Void(self, node:syntax.Void): pass

	def visit_DefAtom(self, node:syntax.DefAtom):
		self.object.atoms.define(Atom(node.name, node.token))

	def visit_Record(self, node:syntax.Record):
		self.close()
		self._builder = TableBuilder(resolve_record(node.fields, self.object.structs))

	def visit_Value(self, node:syntax.Value): self._pack(node)
	def visit_AtomRef(self, node:syntax.AtomRef): self._pack(node)

	def visit_Expr(self, node:syntax.Expr):
		if node.operator is syntax.REPEAT: self._repeat(node)
		else: self._pack(fold(node))

	def visit_Str(self, node:syntax.Str):
		""" One unsigned value per character. """
		for c in node.text:
			self._pack(syntax.Value(ord(c), syntax.UINT_KIND, node.token))

	def visit_MacroRef(self, node:syntax.MacroRef):
		raise RetronymError(UNIMPLEMENTED, node.token)

	def _repeat(self, node:syntax.Expr):
		""" `value x count` packs the value count times. The count had better be known now. """
		count = evaluate(node.rhs)
		if not isinstance(count, int) or count < 0:
			raise RetronymError(ARITHMETIC, node.token, ValueError("cannot repeat %s times" % count))
		if count > REPEAT_LIMIT:
			raise RetronymError(ARITHMETIC, node.token, OverflowError("cannot repeat more than %d times" % REPEAT_LIMIT))
		datum = fold(node.lhs)
		for _ in range(count):
			self._pack(datum)

	def _pack(self, node:syntax.Node):
		if self._builder is None:
			raise RetronymError(NO_RECORD, node.token)
		self._builder.add_data(node)

def assemble(statements:Iterable[syntax.Node], obj:Optional[Object]=None) -> Object:
	return Assembler(Object() if obj is None else obj).assemble(statements)
