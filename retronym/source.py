"""
A Source owns one text and the arena of tokens scanned from it.
Everything downstream refers to tokens by index into that arena, so the
Source is the one thing that must stay alive for as long as anybody wants
to say where an error happened.
"""
from pathlib import Path
from typing import Optional, Union
from boozetools.support.failureprone import SourceText, illustration
from .lexicon import Token, tokenize
from .ontology import Phrase, Spot
from .errors import RetronymError, IO

WHERE = Union[Phrase, int]

class Source:
	def __init__(self, text:str, path:Optional[Path]=None):
		self.text, self.path = text, path
		self.tokens = tokenize(text)
		self._text = SourceText(text, filename=None if path is None else str(path))

	@staticmethod
	def read(path:Path) -> "Source":
		try:
			with open(path, "r", encoding="utf-8") as fh:
				text = fh.read()
		except OSError as ex:
			raise RetronymError(IO, None, ex)
		return Source(text, path)

	def token(self, index:int) -> Token:
		return self.tokens[index]

	def span(self, where:WHERE) -> Optional[slice]:
		""" The stretch of text covered by a phrase, if it covers any. """
		if isinstance(where, int): where = Spot(where)
		left, right = where.span()
		if left is None or right is None: return None
		return slice(self.tokens[left].span.start, self.tokens[right].span.stop)

	def row_col(self, index:int) -> tuple[int, int]:
		token = self.tokens[index]
		return token.row, token.col

	def illustrate(self, where:WHERE, caption:str="") -> str:
		span = self.span(where)
		if span is None: return caption
		row, col = self._text.find_row_col(span.start)
		single_line = self._text.line_of_text(row)
		width = max(1, span.stop - span.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=caption)

	def __str__(self): return "<source>" if self.path is None else str(self.path)
