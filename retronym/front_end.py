"""
From text (or a file) to statements, and from statements to an Object.
Problems go to the report; callers get None back when something went wrong.
"""
from pathlib import Path
from typing import Optional
from .source import Source
from .parser import Parser
from .assembler import Object, Assembler
from .layout import Structs
from .diagnostics import Report
from .errors import RetronymError
from . import syntax

def parse_source(source:Source, report:Report) -> Optional[list[syntax.Node]]:
	""" Stop at the first problem. """
	try:
		return list(Parser(source.tokens))
	except RetronymError as ex:
		report.error(source, ex)

def survey_source(source:Source, report:Report) -> list[syntax.Node]:
	"""
	Report every statement that fails to parse, not just the first.
	The parser is always past the trouble by the time it complains,
	so carrying on from the same parser picks up at the next statement.
	"""
	statements = []
	parser = Parser(source.tokens)
	while True:
		try: statements.append(next(parser))
		except StopIteration: return statements
		except RetronymError as ex: report.error(source, ex)

def parse_text(text:str, path:Optional[Path], report:Report) -> Optional[list[syntax.Node]]:
	return parse_source(Source(text, path), report)

def assemble_source(source:Source, report:Report, structs:Optional[Structs]=None) -> Optional[Object]:
	statements = parse_source(source, report)
	if statements is None:
		assert report.sick()
		return None
	obj = Object(source, structs)
	try:
		return Assembler(obj, report).assemble(statements)
	except RetronymError as ex:
		report.error(source, ex)

def assemble_text(text:str, report:Report, path:Optional[Path]=None) -> Optional[Object]:
	return assemble_source(Source(text, path), report)

def assemble_file(path:Path, report:Report) -> Optional[Object]:
	report.info("Assembling", path)
	try: source = Source.read(path)
	except RetronymError as ex:
		if isinstance(ex.cause, FileNotFoundError): report.no_such_file(path, ex)
		else: report.error(None, ex)
		return None
	return assemble_source(source, report)
