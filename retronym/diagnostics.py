import sys, random
from typing import Any, Optional, Sequence
from .errors import (
	RetronymError, END_OF_FILE, UNEXPECTED, DUPLICATE, NO_RECORD, ROW_SATISFIED,
	UNSATISFIED, UNIMPLEMENTED, UNDEFINED, ARITHMETIC, IO, PARSE_INT,
)
from .source import Source, WHERE

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = ['Drat', 'Rats', 'Nuts', 'Fiddlesticks', 'Good Grief', 'Confound it', 'Great Scott', 'Crikey']
	resignations = [
		'I cannot continue.',
		'The bytes will have to wait.',
		'I have no idea what the right answer is.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

INTRODUCTIONS = {
	END_OF_FILE: "Ran out of words in the middle of something.",
	UNEXPECTED: "Retronym got confused here.",
	DUPLICATE: "This symbol is defined more than once in the same object.",
	NO_RECORD: "There is data here, but no record type yet to say how to pack it.",
	ROW_SATISFIED: "This row already has a value for every column.",
	UNSATISFIED: "The last row of this table is only partly filled.",
	UNIMPLEMENTED: "This is recognized, but not supported yet.",
	UNDEFINED: "I don't see what this refers to.",
	ARITHMETIC: "This arithmetic does not work out.",
	IO: "Something went pear-shaped while trying to read a file.",
	PARSE_INT: "This number does not make sense as written.",
}

class Report:
	""" Collects issues as they happen; tells the console about them when asked. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def error(self, source:Optional[Source], ex:RetronymError):
		""" Turn an exception from the core into an issue, pointing at the guilty token if there is one. """
		intro = INTRODUCTIONS.get(ex.kind, ex.kind)
		if ex.cause is not None:
			intro += " (%s)" % ex.cause
		problem = []
		if source is not None and ex.token is not None:
			problem.append(Annotation(source, ex.token, str(ex)))
		self.issue(Pic(intro, problem))

	def no_such_file(self, path, ex:RetronymError):
		self.issue(Pic("I see no file called %s" % path, [], [str(ex.cause)]))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

class Annotation:
	def __init__(self, source:Source, where:WHERE, caption:str=""):
		self.source, self.where, self.caption = source, where, caption
	def illustrate(self):
		return self.source.illustrate(self.where, self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self.intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self.intro, ""]
		source = None
		for ann in self._anns:
			if ann.source is not source:
				source = ann.source
				lines.append(str(source))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
