"""
Read a line, show what Retronym made of it, repeat.
Each line is a little object all its own: it shares nothing with the line before.
"""
import sys
from .source import Source
from .front_end import survey_source
from .assembler import Object, Assembler
from .diagnostics import Report, TooManyIssues
from .errors import RetronymError

PROMPT = "> "

def evaluate_line(line:str, report:Report) -> list[str]:
	""" What to print for one line. Problems go to the report, not the result. """
	source = Source(line)
	statements = survey_source(source, report)
	output = [str(node) for node in statements]
	if report.ok() and statements:
		try: obj = Assembler(Object(source), report).assemble(statements)
		except RetronymError as ex: report.error(source, ex)
		else: output.extend(str(table) for table in obj.tables)
	return output

def repl(verbose:int=0):
	print("(use ^C or ^D to quit)")
	print()
	report = Report(verbose=verbose)
	while True:
		try: line = input(PROMPT)
		except (EOFError, KeyboardInterrupt):
			print()
			return
		try:
			for text in evaluate_line(line, report):
				print(text)
		except TooManyIssues:
			pass
		report.complain_to_console()
		report.reset()
		sys.stdout.flush()
