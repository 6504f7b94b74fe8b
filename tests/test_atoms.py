import unittest
from retronym.atoms import Atom, Atoms
from retronym.errors import RetronymError, DUPLICATE, UNDEFINED

class AtomsTests(unittest.TestCase):
	def test_define_and_find(self):
		atoms = Atoms()
		hl = atoms.define(Atom("HL", 1))
		atoms.define(Atom("A", 3))
		self.assertIs(hl, atoms["HL"])
		self.assertIn("A", atoms)
		self.assertNotIn("B", atoms)
		self.assertEqual(2, len(atoms))
		self.assertEqual(["HL", "A"], [atom.name for atom in atoms])

	def test_names_are_unique(self):
		atoms = Atoms()
		first = atoms.define(Atom("A", 1))
		with self.assertRaises(RetronymError) as cm:
			atoms.define(Atom("A", 5))
		self.assertEqual(DUPLICATE, cm.exception.kind)
		self.assertEqual(5, cm.exception.token)
		self.assertIs(first, atoms["A"])
		self.assertEqual(1, atoms.first_definition("A").left())
		self.assertEqual(1, len(atoms))

	def test_missing(self):
		with self.assertRaises(RetronymError) as cm:
			Atoms()["Q"]
		self.assertEqual(UNDEFINED, cm.exception.kind)

	def test_first_definition_of_a_stranger(self):
		with self.assertRaises(RetronymError) as cm:
			Atoms().first_definition("Q")
		self.assertEqual(UNDEFINED, cm.exception.kind)

	def test_identity_is_the_name(self):
		self.assertEqual(Atom("X", 1), Atom("X", 9))
		self.assertEqual(1, len({Atom("X", 1), Atom("X", 9)}))

if __name__ == '__main__':
	unittest.main()
