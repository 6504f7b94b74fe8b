"""
Atoms are unique symbols with no value. Machine registers, mostly: A, X, HL and the like.
An object defines and exports them; the linker will want every atom used to be defined somewhere.
"""
from typing import Iterator, Optional
from .ontology import Spot
from .space import Layer, AlreadyExists, Absent
from .errors import RetronymError, DUPLICATE, UNDEFINED

class Atom:
	def __init__(self, name:str, token:Optional[int]=None):
		self.name, self.token = name, token
	def __eq__(self, other): return isinstance(other, Atom) and self.name == other.name
	def __hash__(self): return hash(self.name)
	def __str__(self): return self.name
	def __repr__(self): return "<Atom %s>" % self.name

class Atoms:
	""" The atoms one object defines. Names are unique; the first definition stands. """
	def __init__(self):
		self._layer:Layer[Atom] = Layer()

	def define(self, atom:Atom) -> Atom:
		where = None if atom.token is None else Spot(atom.token)
		try: return self._layer.mount(atom.name, where, atom)
		except AlreadyExists: raise RetronymError(DUPLICATE, atom.token)

	def __getitem__(self, name:str) -> Atom:
		try: return self._layer.symbol(name)
		except Absent: raise RetronymError(UNDEFINED)

	def first_definition(self, name:str) -> Optional[Spot]:
		try: return self._layer.locate(name)
		except Absent: raise RetronymError(UNDEFINED)

	def __contains__(self, name:str): return name in self._layer
	def __len__(self): return len(self._layer)
	def __iter__(self) -> Iterator[Atom]: return iter(self._layer.each_symbol())
