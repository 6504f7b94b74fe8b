"""
The set of parse-nodes in simple form.
The parser builds these bottom-up, one statement at a time.
Nodes never change once built. A record-type declaration stays a list of
type-nodes here; turning it into a Struct is the layout module's business,
because nested struct names may not be known until later.

Every node knows whether it is static: whether its value can be had
without consulting anybody's symbol table.
"""
from typing import Optional, NamedTuple, Sequence, Union
from .ontology import Phrase
from .lexicon import Token, INT, HEX, BIN, PRIMITIVE, STRUCT, ATOM, MACRO
from .errors import RetronymError, PARSE_INT, UNEXPECTED

class Operator(NamedTuple):
	name: str
	glyph: str
	def __str__(self): return self.glyph

ADD = Operator("Add", "+")
SUB = Operator("Sub", "-")
MUL = Operator("Mul", "*")
DIV = Operator("Div", "/")
MOD = Operator("Mod", "\\\\")
POW = Operator("Pow", "**")
XOR = Operator("Xor", "^")
AND = Operator("And", "&")
OR = Operator("Or", "|")
SHL = Operator("Shl", "<<")
SHR = Operator("Shr", ">>")
REPEAT = Operator("Repeat", "x")

OPERATORS = {op.glyph: op for op in (ADD, SUB, MUL, DIV, MOD, POW, XOR, AND, OR, SHL, SHR, REPEAT)}

class Node(Phrase):
	token: Optional[int]  # Index into the token arena, if there's a token to blame.
	is_static: bool
	def __init__(self, token:Optional[int], is_static:bool):
		assert isinstance(token, int) or token is None, type(token)
		self.token, self.is_static = token, is_static
	def left(self): return self.token
	def right(self): return self.token
	def __repr__(self): return "<%s %s>" % (type(self).__name__, self)

class Void(Node):
	def __init__(self): super().__init__(None, True)
	def __str__(self): return "<VOID>"

class DefAtom(Node):
	""" Defines (and exports) an atom. The token is the name, not the keyword. """
	def __init__(self, name:str, token:Optional[int]):
		super().__init__(token, True)
		self.name = name
	def __str__(self): return "atom %s" % self.name
	def left(self): return None if self.token is None else self.token - 1

class Primitive(Node):
	def __init__(self, name:str, width:int, token:Optional[int]):
		super().__init__(token, True)
		self.name, self.width = name, width
	def __str__(self): return self.name

class StructName(Node):
	""" Names a record type that may not exist yet. Resolution comes later. """
	def __init__(self, name:str, token:Optional[int]):
		super().__init__(token, False)
		self.name = name
	def __str__(self): return self.name

class NodeList(Node):
	items: list[Node]
	def __init__(self, items:Sequence[Node]=()):
		super().__init__(None, True)
		self.items = []
		for item in items: self.push(item)
	def push(self, node:Node):
		if not node.is_static: self.is_static = False
		self.items.append(node)
	def __iter__(self): return iter(self.items)
	def __len__(self): return len(self.items)
	def __str__(self): return ", ".join(map(str, self.items))
	def left(self): return self.items[0].left() if self.items else None
	def right(self): return self.items[-1].right() if self.items else None

class Record(Node):
	""" A record-type declaration: the unresolved list of type-nodes. """
	def __init__(self, fields:NodeList):
		super().__init__(None, fields.is_static)
		self.fields = fields
	def __str__(self): return str(self.fields)
	def left(self): return self.fields.left()
	def right(self): return self.fields.right()

class AtomRef(Node):
	def __init__(self, name:str, token:Optional[int]):
		super().__init__(token, False)
		self.name = name
	def __str__(self): return self.name

class MacroRef(Node):
	def __init__(self, name:str, token:Optional[int]):
		super().__init__(token, False)
		self.name = name
	def __str__(self): return self.name

class Str(Node):
	""" Strings are self-contained lists, so they never appear inside expressions. """
	def __init__(self, text:str, token:Optional[int]):
		super().__init__(token, True)
		self.text = text
	def __str__(self): return '"%s"' % self.text

# Literal kinds. Hex and binary literals are raw bit-patterns, hence unsigned.
INT_KIND = "int"
UINT_KIND = "uint"
FLOAT_KIND = "float"

class Value(Node):
	def __init__(self, value:Union[int, float], kind:str, token:Optional[int]):
		super().__init__(token, True)
		self.value, self.kind = value, kind
	def __str__(self): return str(self.value)

class Expr(Node):
	"""
	A binary operation. The node's own token is the operator's,
	but its span runs from the far left of lhs to the far right of rhs.
	"""
	def __init__(self, lhs:Node, operator:Operator, rhs:Node, token:Optional[int]):
		super().__init__(token, lhs.is_static and rhs.is_static)
		self.lhs, self.operator, self.rhs = lhs, operator, rhs
	def __str__(self): return "(%s %s %s)" % (self.lhs, self.operator, self.rhs)
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()

def new_expr(lhs:Node, operator_token:Token, index:int, rhs:Node) -> Expr:
	try: operator = OPERATORS[operator_token.text]
	except KeyError: raise RetronymError(UNEXPECTED, index)
	return Expr(lhs, operator, rhs, index)

_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1

def _number(token:Token, index:int) -> Value:
	try:
		if token.tag == INT: value, kind, limit = int(token.text), INT_KIND, _INT_MAX
		elif token.tag == HEX: value, kind, limit = int(token.text[1:], 16), UINT_KIND, _UINT_MAX
		else: value, kind, limit = int(token.text[1:], 2), UINT_KIND, _UINT_MAX
	except ValueError as ex:
		raise RetronymError(PARSE_INT, index, ex)
	if value > limit:
		raise RetronymError(PARSE_INT, index, OverflowError("%s does not fit in 32 bits" % token.text))
	return Value(value, kind, index)

def node_from_token(token:Token, index:int) -> Node:
	""" Some tokens are a whole node all by themselves. """
	if token.tag in (INT, HEX, BIN): return _number(token, index)
	if token.tag == ATOM: return AtomRef(token.text, index)
	if token.tag == MACRO: return MacroRef(token.text, index)
	if token.tag == PRIMITIVE: return Primitive(token.text, token.width(), index)
	if token.tag == STRUCT: return StructName(token.text, index)
	raise RetronymError(UNEXPECTED, index)
