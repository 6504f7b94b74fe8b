"""
Record types: how values get laid out in bytes.

A Struct is an ordered run of Fields. Each field is either a primitive of some
bit-width or another Struct nested whole. Stride (bytes per record) and column
count are running totals, accumulated as fields are added.

Sub-byte packing is not a thing yet: a bool or a nybl takes a byte of its own,
same as a byte does.
"""
from typing import Iterator, Optional
from boozetools.support.foundation import Visitor
from .ontology import Phrase
from .space import Layer, AlreadyExists, Absent
from .errors import RetronymError, DUPLICATE, UNDEFINED, UNEXPECTED
from . import syntax

def ceil_byte(bits:int) -> int:
	""" Bytes needed for a field this wide. Anything under a byte still takes a whole byte. """
	return max(1, (bits + 7) // 8)

class Field:
	name: str
	def bits(self) -> int: raise NotImplementedError(type(self))
	def cols(self) -> int: raise NotImplementedError(type(self))
	def stride(self) -> int: return ceil_byte(self.bits())
	def leaves(self) -> Iterator["PrimitiveField"]: raise NotImplementedError(type(self))
	def __repr__(self): return "<%s %s>" % (type(self).__name__, self)

class PrimitiveField(Field):
	def __init__(self, name:str, width:int):
		self.name, self.width = name, width
	def bits(self): return self.width
	def cols(self): return 1
	def leaves(self): yield self
	def __str__(self): return self.name

class StructField(Field):
	def __init__(self, name:str, struct:"Struct"):
		self.name, self.struct = name, struct
	def bits(self): return self.struct.stride() * 8
	def cols(self): return self.struct.cols()
	def leaves(self): return self.struct.leaves()
	def __str__(self): return self.name

class Struct:
	fields: list[Field]

	def __init__(self, name:Optional[str]=None):
		self.name = name
		self.fields = []
		self._stride = 0
		self._cols = 0

	def add_field(self, field:Field):
		self.fields.append(field)
		self._stride += field.stride()
		self._cols += field.cols()

	def stride(self) -> int: return self._stride
	def cols(self) -> int: return self._cols

	def leaves(self) -> Iterator[PrimitiveField]:
		""" The primitive fields in layout order, nested structs flattened out. There are cols() of them. """
		for field in self.fields:
			yield from field.leaves()

	def __len__(self): return len(self.fields)
	def __str__(self): return "<%s>" % ", ".join(map(str, self.fields))

class Structs:
	""" The record types available for nesting, by name. """
	def __init__(self):
		self._layer:Layer[Struct] = Layer()

	def define(self, name:str, struct:Struct, where:Optional[Phrase]=None) -> Struct:
		try: return self._layer.mount(name, where, struct)
		except AlreadyExists: raise RetronymError(DUPLICATE, where and where.left())

	def find(self, name:str, where:Optional[Phrase]=None) -> Struct:
		try: return self._layer.symbol(name)
		except Absent: raise RetronymError(UNDEFINED, where and where.left())

	def __contains__(self, name:str): return name in self._layer
	def __len__(self): return len(self._layer)
	def __iter__(self): return iter(self._layer)

class FieldMaker(Visitor):
	""" Turns one type-node into the Field it stands for. """
	def __init__(self, structs:Structs):
		self._structs = structs

	def visit_Primitive(self, node:syntax.Primitive) -> Field:
		return PrimitiveField(node.name, node.width)

	def visit_StructName(self, node:syntax.StructName) -> Field:
		return StructField(node.name, self._structs.find(node.name, node))

	def visit_Value(self, node:syntax.Value): raise RetronymError(UNEXPECTED, node.token)
	def visit_AtomRef(self, node:syntax.AtomRef): raise RetronymError(UNEXPECTED, node.token)
	def visit_MacroRef(self, node:syntax.MacroRef): raise RetronymError(UNEXPECTED, node.token)

def resolve_record(fields:syntax.NodeList, structs:Structs, name:Optional[str]=None) -> Struct:
	""" Fold the list of type-nodes into a Struct, one add_field per element. """
	maker = FieldMaker(structs)
	struct = Struct(name)
	for node in fields:
		struct.add_field(maker.visit(node))
	return struct
