"""
Name-spaces for the things an object defines: atoms and record types.
Each object gets its own; nothing here is global.
"""
from typing import Generic, Iterable, Iterator, Optional, TypeVar
from .ontology import Phrase

T = TypeVar("T")

class AlreadyExists(KeyError): pass
class Absent(KeyError): pass

class Layer(Generic[T]):
	""" Lightly enhanced dictionary: It does not like duplicate keys. """
	_locate: dict[str, Optional[Phrase]]
	_symbol: dict[str, T]

	def __init__(self):
		self._locate, self._symbol = {}, {}

	def __contains__(self, key: str) -> bool:
		return key in self._symbol

	def __len__(self) -> int:
		return len(self._symbol)

	def __iter__(self) -> Iterator[str]:
		return iter(self._symbol)

	def symbol(self, key: str) -> T:
		try: return self._symbol[key]
		except KeyError: raise Absent(key)

	def locate(self, key: str) -> Optional[Phrase]:
		try: return self._locate[key]
		except KeyError: raise Absent(key)

	def mount(self, key:str, phrase:Optional[Phrase], symbol:T) -> T:
		""" Refuses to replace: the first definition stays put. """
		if key in self._symbol:
			raise AlreadyExists(key)
		else:
			self._locate[key] = phrase
			self._symbol[key] = symbol
			return symbol

	def each_symbol(self) -> Iterable[T]:
		return self._symbol.values()
