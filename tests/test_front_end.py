import tempfile, unittest
from pathlib import Path
from retronym import diagnostics
from retronym.source import Source
from retronym.front_end import parse_text, survey_source, assemble_text, assemble_file
from retronym.repl import evaluate_line
from retronym.errors import RetronymError, NO_RECORD

class FrontEndTests(unittest.TestCase):
	def setUp(self):
		self.report = diagnostics.Report(verbose=False)

	def test_assemble_text(self):
		obj = assemble_text("byte byte\n10 20 30 40\n", self.report)
		self.report.assert_no_issues("Good text failed to assemble.")
		self.assertEqual(2, len(obj.tables[0]))

	def test_parse_text(self):
		statements = parse_text("atom A byte A", None, self.report)
		self.assertTrue(self.report.ok())
		self.assertEqual(["atom A", "byte", "A"], list(map(str, statements)))

	def test_failure_is_reported(self):
		self.assertIsNone(assemble_text("10 20", self.report))
		self.assertTrue(self.report.sick())
		issue, = self.report.issues()
		self.assertIn(diagnostics.INTRODUCTIONS[NO_RECORD], issue.as_text())

	def test_parse_failure_is_reported(self):
		self.assertIsNone(assemble_text("byte 1 +", self.report))
		self.assertEqual(1, len(self.report.issues()))

	def test_survey_finds_every_problem(self):
		statements = survey_source(Source("1 # 2 $ 3"), self.report)
		self.assertEqual(["1", "2", "3"], list(map(str, statements)))
		self.assertEqual(2, len(self.report.issues()))

	def test_too_many_issues(self):
		report = diagnostics.Report(verbose=False, max_issues=3)
		with self.assertRaises(diagnostics.TooManyIssues):
			survey_source(Source("# # # #"), report)

	def test_files(self):
		with tempfile.TemporaryDirectory() as folder:
			path = Path(folder) / "table.rym"
			path.write_text("word\n$1234 $5678\n", encoding="utf-8")
			obj = assemble_file(path, self.report)
			self.report.assert_no_issues("Good file failed to assemble.")
			self.assertEqual(path, obj.source.path)
			self.assertEqual([[0x1234], [0x5678]], [[n.value for n in row.nodes()] for row in obj.tables[0]])

	def test_missing_file(self):
		with tempfile.TemporaryDirectory() as folder:
			self.assertIsNone(assemble_file(Path(folder) / "nowhere.rym", self.report))
		self.assertTrue(self.report.sick())

	def test_read_wraps_os_errors(self):
		with tempfile.TemporaryDirectory() as folder:
			with self.assertRaises(RetronymError) as cm:
				Source.read(Path(folder) / "nowhere.rym")
		self.assertTrue(cm.exception.is_io_error())
		self.assertIsInstance(cm.exception.cause, FileNotFoundError)

class IllustrationTests(unittest.TestCase):
	def test_illustrate_points_at_the_token(self):
		source = Source("byte\n  12345")
		text = source.illustrate(1, "here")
		self.assertIn("12345", text)
		self.assertIn("here", text)
		self.assertEqual(slice(7, 12), source.span(1))
		self.assertEqual("12345", source.token(1).text)
		(row0, col0), (row1, col1) = source.row_col(0), source.row_col(1)
		self.assertEqual((row0 + 1, col0 + 2), (row1, col1))

class ReplTests(unittest.TestCase):
	def test_line(self):
		report = diagnostics.Report(verbose=False)
		output = evaluate_line("byte byte 1 2 + 3", report)
		self.assertTrue(report.ok())
		self.assertEqual(["byte, byte", "1", "(2 + 3)", "{\t<byte, byte>\n\t1, 5\n}"], output)

	def test_bad_line(self):
		report = diagnostics.Report(verbose=False)
		output = evaluate_line("1 2", report)
		self.assertEqual(["1", "2"], output)
		self.assertTrue(report.sick())

if __name__ == '__main__':
	unittest.main()
