"""
The most fundamental classes of the syntax hierarchy live apart from the rest,
so that layout and packing modules can speak of phrases without importing the
whole parse-node zoo.

Positions are indices into the token arena owned by a Source. Nobody holds a
token directly; an index can always be turned back into a row and column.
"""
from typing import Optional

class Phrase:
	def left(self) -> Optional[int]:
		""" Return the index of the leftmost token of this phrase """
		raise NotImplementedError(type(self))
	def right(self) -> Optional[int]:
		""" Return the index of the rightmost token of this phrase """
		raise NotImplementedError(type(self))
	def span(self) -> tuple[Optional[int], Optional[int]]: return self.left(), self.right()

class Spot(Phrase):
	""" A bare token position, for errors that have nothing better to point at. """
	def __init__(self, index:int):
		assert isinstance(index, int), type(index)
		self.index = index
	def __repr__(self): return "<Spot %d>" % self.index
	def left(self): return self.index
	def right(self): return self.index
