"""
Everything that goes wrong in the core comes out as a RetronymError.
The kind says what went wrong; the token (an index into the source's
token arena) says where, if anyone knows.
"""
from typing import Optional
from boozetools.parsing.interface import ParseError

# The stream ended in the middle of a construct. Callers decide if that's unexpected.
END_OF_FILE = "End Of File"
# A required token was missing or of the wrong sort.
UNEXPECTED = "Unexpected"
# Something was defined twice in the same object.
DUPLICATE = "Duplicate"
# Data showed up before any record type said how to pack it.
NO_RECORD = "No Record"
# Data offered to a row that already has a value for every column.
ROW_SATISFIED = "Row Satisfied"
# A table closed with its last row only partly filled.
UNSATISFIED = "Unsatisfied"
# Recognized, but not supported yet.
UNIMPLEMENTED = "Unimplemented"
# A struct-type name with no definition.
UNDEFINED = "Undefined"
# Division by zero and friends, found while folding constants.
ARITHMETIC = "Arithmetic"
# Wrapped failures from reading files and parsing numbers.
IO = "I/O"
PARSE_INT = "Parse Int"

class RetronymError(ParseError):
	def __init__(self, kind:str, token:Optional[int]=None, cause:Optional[BaseException]=None):
		super().__init__(kind, token, cause)
		self.kind, self.token, self.cause = kind, token, cause
	
	def __str__(self):
		if self.cause is None: return self.kind
		return "%s: %s" % (self.kind, self.cause)
	
	def is_end_of_file(self): return self.kind == END_OF_FILE
	def is_io_error(self): return self.kind == IO

class NeedsResolution(RetronymError):
	"""
	Constant folding met a name (atom or macro) whose value lives elsewhere.
	The linker, not the folder, gets to worry about these.
	"""
	def __init__(self, token:Optional[int]):
		super().__init__(UNIMPLEMENTED, token)
	
	def __str__(self): return "Requires external resolution"

