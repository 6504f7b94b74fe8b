"""
Constant folding.

Evaluation gives plain Python numbers: an int or a float. Integers are kept
to the signed 64-bit range; anything beyond that is an arithmetic error, and
shifts or powers that could only land out there are refused before they are
computed. Narrowing to whatever a field holds is the emitter's problem, not
ours. Division always comes out a float.

Atoms and macros cannot be folded here. Their values are known only at link
time, so asking for one raises NeedsResolution.
"""
import operator
from typing import Union
from boozetools.support.foundation import Visitor
from .errors import RetronymError, NeedsResolution, UNIMPLEMENTED, ARITHMETIC
from . import syntax

Evaluation = Union[int, float]

INT_BITS = 64
INT_MIN = -2**(INT_BITS-1)
INT_MAX = 2**(INT_BITS-1) - 1

def _bitwise(fn):
	def op(a, b):
		if isinstance(a, float) or isinstance(b, float): raise TypeError("bitwise operators need integers")
		return fn(a, b)
	return op

@_bitwise
def _shift_left(a, b):
	if b >= INT_BITS and a: raise OverflowError("cannot shift left by %d bits" % b)
	return a << b

def _power(a, b):
	if isinstance(a, int) and isinstance(b, int) and b >= INT_BITS and abs(a) > 1:
		raise OverflowError("%d ** %d is out of range" % (a, b))
	result = a ** b
	if isinstance(result, complex): raise ValueError("%s ** %s has no real value" % (a, b))
	return result

ARITHMETIC_OPS = {
	syntax.ADD: operator.add,
	syntax.SUB: operator.sub,
	syntax.MUL: operator.mul,
	syntax.DIV: operator.truediv,
	syntax.MOD: operator.mod,
	syntax.POW: _power,
	syntax.XOR: _bitwise(operator.xor),
	syntax.AND: _bitwise(operator.and_),
	syntax.OR: _bitwise(operator.or_),
	syntax.SHL: _shift_left,
	syntax.SHR: _bitwise(operator.rshift),
}

def _in_range(value:Evaluation) -> Evaluation:
	if isinstance(value, int) and not INT_MIN <= value <= INT_MAX:
		raise OverflowError("result does not fit in %d bits" % INT_BITS)
	return value

class Evaluator(Visitor):
	def visit_Value(self, node:syntax.Value) -> Evaluation:
		return node.value

	def visit_Expr(self, node:syntax.Expr) -> Evaluation:
		lhs, rhs = self.visit(node.lhs), self.visit(node.rhs)
		try: fn = ARITHMETIC_OPS[node.operator]
		except KeyError: raise RetronymError(UNIMPLEMENTED, node.token)
		try: return _in_range(fn(lhs, rhs))
		except TypeError as ex: raise RetronymError(UNIMPLEMENTED, node.token, ex)
		except (ZeroDivisionError, ValueError, OverflowError) as ex: raise RetronymError(ARITHMETIC, node.token, ex)

	def visit_AtomRef(self, node:syntax.AtomRef): raise NeedsResolution(node.token)
	def visit_MacroRef(self, node:syntax.MacroRef): raise NeedsResolution(node.token)
	def visit_StructName(self, node:syntax.StructName): raise NeedsResolution(node.token)

	def _not_a_value(self, node:syntax.Node): raise RetronymError(UNIMPLEMENTED, node.token)
	visit_Void = visit_DefAtom = visit_Primitive = visit_NodeList = visit_Record = visit_Str = _not_a_value

def evaluate(node:syntax.Node) -> Evaluation:
	return Evaluator().visit(node)

def _unsigned(node:syntax.Node) -> bool:
	""" Made of nothing but unsigned literals. """
	if isinstance(node, syntax.Value): return node.kind == syntax.UINT_KIND
	if isinstance(node, syntax.Expr): return _unsigned(node.lhs) and _unsigned(node.rhs)
	return False

def fold(node:syntax.Node) -> syntax.Node:
	"""
	Replace a static expression by the value it computes, keeping the operator's token
	for error messages. Anything else comes back as it was.
	Unsigned operands give an unsigned result, unless it came out negative.
	"""
	if isinstance(node, syntax.Expr) and node.is_static:
		value = evaluate(node)
		if isinstance(value, float): kind = syntax.FLOAT_KIND
		elif value >= 0 and _unsigned(node): kind = syntax.UINT_KIND
		else: kind = syntax.INT_KIND
		return syntax.Value(value, kind, node.token)
	return node
