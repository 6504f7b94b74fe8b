import unittest
from retronym.lexicon import tokenize
from retronym.parser import parse_tokens
from retronym.layout import Struct, Structs, PrimitiveField, StructField, ceil_byte, resolve_record
from retronym.errors import RetronymError, DUPLICATE, UNDEFINED

def _fields(text):
	record, = parse_tokens(tokenize(text))
	return record.fields

def _struct(text, structs=None, name=None):
	return resolve_record(_fields(text), structs or Structs(), name)

class CeilByteTests(unittest.TestCase):
	def test_ceil_byte(self):
		for bits, size in [(0, 1), (1, 1), (4, 1), (8, 1), (9, 2), (16, 2), (17, 3), (32, 4)]:
			with self.subTest(bits=bits):
				self.assertEqual(size, ceil_byte(bits))

class StructTests(unittest.TestCase):
	def test_empty(self):
		struct = Struct()
		self.assertEqual(0, struct.stride())
		self.assertEqual(0, struct.cols())

	def test_add_field_accumulates(self):
		struct = Struct()
		struct.add_field(PrimitiveField("byte", 8))
		self.assertEqual((1, 1), (struct.stride(), struct.cols()))
		struct.add_field(PrimitiveField("word", 16))
		self.assertEqual((3, 2), (struct.stride(), struct.cols()))
		struct.add_field(PrimitiveField("long", 32))
		self.assertEqual((7, 3), (struct.stride(), struct.cols()))

	def test_small_fields_take_a_byte(self):
		struct = _struct("bool nybl")
		self.assertEqual(2, struct.stride())
		self.assertEqual(2, struct.cols())

	def test_resolve_record(self):
		struct = _struct("byte word")
		self.assertEqual(3, struct.stride())
		self.assertEqual(2, struct.cols())
		self.assertEqual("<byte, word>", str(struct))

	def test_nesting(self):
		structs = Structs()
		structs.define("Point", _struct("byte byte", name="Point"))
		struct = _struct("byte Point word", structs)
		self.assertEqual(5, struct.stride())
		self.assertEqual(4, struct.cols())
		self.assertEqual(3, len(struct))
		self.assertIsInstance(struct.fields[1], StructField)
		self.assertEqual(["byte", "byte", "byte", "word"], [f.name for f in struct.leaves()])

	def test_stride_and_cols_are_sums(self):
		structs = Structs()
		structs.define("Pair", _struct("word long"))
		struct = _struct("Pair bool Pair", structs)
		self.assertEqual(sum(f.stride() for f in struct.fields), struct.stride())
		self.assertEqual(sum(f.cols() for f in struct.fields), struct.cols())
		self.assertEqual(struct.cols(), len(list(struct.leaves())))

	def test_undefined_struct(self):
		with self.assertRaises(RetronymError) as cm:
			_struct("byte Mystery")
		self.assertEqual(UNDEFINED, cm.exception.kind)
		self.assertEqual(1, cm.exception.token)

class StructsTests(unittest.TestCase):
	def test_duplicate(self):
		structs = Structs()
		first = structs.define("Point", _struct("byte byte"))
		with self.assertRaises(RetronymError) as cm:
			structs.define("Point", _struct("word word"))
		self.assertEqual(DUPLICATE, cm.exception.kind)
		self.assertIs(first, structs.find("Point"))
		self.assertIn("Point", structs)
		self.assertEqual(1, len(structs))

	def test_find_missing(self):
		with self.assertRaises(RetronymError) as cm:
			Structs().find("Nope")
		self.assertEqual(UNDEFINED, cm.exception.kind)

if __name__ == '__main__':
	unittest.main()
