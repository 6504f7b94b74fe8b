"""
Recursive descent over the token arena.

Each parse_* method looks at the current token and either takes
responsibility for it or returns None to say "not mine". None is not an
error: the caller decides whether anybody else wants the token.
A statement that starts but cannot finish raises a RetronymError.
The parser has already moved past whatever it consumed, so a driver
that reports the error and keeps iterating picks up at the next
statement.

Expressions have no precedence table. `a op b op c` groups as
`a op (b op c)` whatever the operators happen to be.
"""
from typing import Optional, Sequence
from .lexicon import Token, KEYWORD_ATOM, KEYWORD_MACRO, ATOM, MACRO, STRING
from .errors import RetronymError, END_OF_FILE, UNEXPECTED, UNIMPLEMENTED
from . import syntax

class TokenStream:
	""" A cursor over the token arena. Running off the end is the end of the stream. """
	def __init__(self, tokens:Sequence[Token]):
		self._tokens = tokens
		self.index = 0

	def is_eof(self) -> bool: return self.index >= len(self._tokens)

	def current(self) -> Optional[Token]:
		if self.is_eof(): return None
		return self._tokens[self.index]

	def is_tag(self, tag:str) -> bool:
		token = self.current()
		return token is not None and token.tag == tag

	def is_type(self) -> bool:
		token = self.current()
		return token is not None and token.is_type()

	def is_expr(self) -> bool:
		token = self.current()
		return token is not None and token.is_expr()

	def is_operator(self) -> bool:
		token = self.current()
		return token is not None and token.is_operator()

	def consume(self) -> int:
		""" Move past the current token, returning its index in the arena. """
		assert not self.is_eof()
		index = self.index
		self.index += 1
		return index

	def token(self, index:int) -> Token: return self._tokens[index]

def _missing(stream:TokenStream, after:int) -> RetronymError:
	""" Something required did not come. Blame the end of the stream, or the wrong token. """
	if stream.is_eof(): return RetronymError(END_OF_FILE, after)
	return RetronymError(UNEXPECTED, stream.index)

class Parser:
	"""
	Turn the crank and out come statements, one node apiece.
	Iteration ends at the end of the token stream.
	"""
	def __init__(self, tokens:Sequence[Token]):
		self.tokens = TokenStream(tokens)

	def __iter__(self): return self

	def __next__(self) -> syntax.Node:
		if self.tokens.is_eof(): raise StopIteration
		node = self.parse_statement()
		if node is None:
			# Nobody wanted this token. Step past it so the next statement has a chance.
			raise RetronymError(UNEXPECTED, self.tokens.consume())
		return node

	def parse_statement(self) -> Optional[syntax.Node]:
		for rule in (self.parse_keyword, self.parse_record, self.parse_macro, self.parse_string, self.parse_expr):
			node = rule()
			if node is not None: return node
		return None

	def parse_keyword(self) -> Optional[syntax.Node]:
		if self.tokens.is_tag(KEYWORD_ATOM): return self.parse_atom_definition()
		if self.tokens.is_tag(KEYWORD_MACRO): return self.parse_macro_definition()
		return None

	def parse_atom_definition(self) -> syntax.DefAtom:
		keyword = self.tokens.consume()
		if not self.tokens.is_tag(ATOM): raise _missing(self.tokens, keyword)
		index = self.tokens.consume()
		return syntax.DefAtom(self.tokens.token(index).text, index)

	def parse_macro_definition(self):
		keyword = self.tokens.consume()
		if not self.tokens.is_tag(MACRO): raise _missing(self.tokens, keyword)
		# Macro bodies are somebody else's problem for now.
		raise RetronymError(UNIMPLEMENTED, self.tokens.consume())

	def parse_record(self) -> Optional[syntax.Record]:
		"""
		Greedily take every contiguous type-name. Struct names are kept as names:
		they may refer to types nobody has defined yet.
		"""
		if not self.tokens.is_type(): return None
		fields = syntax.NodeList()
		while self.tokens.is_type():
			index = self.tokens.consume()
			fields.push(syntax.node_from_token(self.tokens.token(index), index))
		return syntax.Record(fields)

	def parse_macro(self) -> Optional[syntax.MacroRef]:
		if not self.tokens.is_tag(MACRO): return None
		index = self.tokens.consume()
		return syntax.MacroRef(self.tokens.token(index).text, index)

	def parse_string(self) -> Optional[syntax.Str]:
		if not self.tokens.is_tag(STRING): return None
		index = self.tokens.consume()
		return syntax.Str(self.tokens.token(index).text[1:-1], index)

	def parse_expr(self) -> Optional[syntax.Node]:
		"""
		A value, optionally followed by an operator and another expression.
		A bare value comes back as itself, not wrapped in an Expr; that ends the recursion.
		"""
		if not self.tokens.is_expr(): return None
		index = self.tokens.consume()
		left = syntax.node_from_token(self.tokens.token(index), index)
		while self.tokens.is_operator():
			operator = self.tokens.consume()
			right = self.parse_expr()
			if right is None: raise _missing(self.tokens, operator)
			left = syntax.new_expr(left, self.tokens.token(operator), operator, right)
		return left

def parse_tokens(tokens:Sequence[Token]) -> list[syntax.Node]:
	""" All or nothing: the first error propagates. """
	return list(Parser(tokens))
