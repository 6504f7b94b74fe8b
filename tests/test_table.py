import unittest
from retronym.layout import Struct, PrimitiveField
from retronym.table import RowBuilder, TableBuilder, Row
from retronym.errors import RetronymError, ROW_SATISFIED, UNSATISFIED
from retronym import syntax

def _struct(*widths):
	struct = Struct()
	for width in widths:
		struct.add_field(PrimitiveField("w%d" % width, width))
	return struct

def _values(*numbers):
	return [syntax.Value(n, syntax.INT_KIND, i) for i, n in enumerate(numbers)]

class RowBuilderTests(unittest.TestCase):
	def test_fills_then_refuses(self):
		builder = RowBuilder(_struct(8, 8), 0)
		a, b, c = _values(1, 2, 3)
		self.assertFalse(builder.is_started())
		self.assertIsNone(builder.add_data(a))
		self.assertTrue(builder.is_started())
		self.assertFalse(builder.is_satisfied())
		row = builder.add_data(b)
		self.assertIsInstance(row, Row)
		self.assertTrue(builder.is_satisfied())
		self.assertEqual([a, b], row.nodes())
		with self.assertRaises(RetronymError) as cm:
			builder.add_data(c)
		self.assertEqual(ROW_SATISFIED, cm.exception.kind)
		self.assertEqual(2, cm.exception.token)

	def test_cells_know_their_place(self):
		builder = RowBuilder(_struct(8, 16), 3)
		for node in _values(5, 6):
			row = builder.add_data(node)
		self.assertEqual([(3, 0), (3, 1)], [(cell.row, cell.col) for cell in row])
		self.assertEqual([8, 16], [cell.field.width for cell in row])
		self.assertEqual("5, 6", str(row))

	def test_empty_struct_takes_nothing(self):
		with self.assertRaises(RetronymError) as cm:
			RowBuilder(Struct(), 0).add_data(_values(1)[0])
		self.assertEqual(ROW_SATISFIED, cm.exception.kind)

class TableBuilderTests(unittest.TestCase):
	def test_rows_chain(self):
		builder = TableBuilder(_struct(8, 8))
		for node in _values(10, 20, 30, 40):
			builder.add_data(node)
		table = builder.finish()
		self.assertEqual(2, len(table))
		self.assertEqual([[10, 20], [30, 40]], [[n.value for n in row.nodes()] for row in table])
		self.assertEqual([0, 1], [row.index for row in table])
		self.assertEqual("{\t<w8, w8>\n\t10, 20\n\t30, 40\n}", str(table))

	def test_add_data_reports_each_row(self):
		builder = TableBuilder(_struct(8, 8))
		results = [builder.add_data(node) for node in _values(1, 2, 3, 4)]
		self.assertTrue(builder.is_satisfied())
		self.assertIsNone(results[0])
		self.assertIsNone(results[2])
		self.assertEqual(0, results[1].index)
		self.assertEqual(1, results[3].index)

	def test_partial_row(self):
		builder = TableBuilder(_struct(8, 8))
		for node in _values(1, 2, 3):
			builder.add_data(node)
		with self.assertRaises(RetronymError) as cm:
			builder.finish()
		self.assertEqual(UNSATISFIED, cm.exception.kind)
		self.assertEqual(2, cm.exception.token)

	def test_empty_table(self):
		table = TableBuilder(_struct(8)).finish()
		self.assertEqual(0, len(table))

if __name__ == '__main__':
	unittest.main()
