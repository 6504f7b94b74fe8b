"""
The words of Retronym, and how to tell them apart.

Every word gets classified exactly once, right here, so the parser
never needs to look at spelling again. Characters that make no word
at all still come out as "bogus" tokens: the parser rejects those
one statement at a time instead of the scanner giving up on a file.
"""
import sys
from typing import NamedTuple
from boozetools.scanning import miniscan
from boozetools.scanning.engine import IterableScanner
from boozetools.support.failureprone import SourceText

KEYWORD_ATOM = "keyword_atom"
KEYWORD_MACRO = "keyword_macro"
PRIMITIVE = "primitive"
STRUCT = "struct"
ATOM = "atom"
MACRO = "macro"
STRING = "string"
INT = "int"
HEX = "hex"
BIN = "bin"
OPERATOR = "operator"
BOGUS = "bogus"

KEYWORDS = {"atom": KEYWORD_ATOM, "macro": KEYWORD_MACRO}

# Widths in bits, on the target system.
PRIMITIVES = {"bool": 1, "nybl": 4, "byte": 8, "word": 16, "long": 32}

# The repeat operator is spelled like a word.
REPEAT = "x"

TYPE_TAGS = frozenset([PRIMITIVE, STRUCT])
EXPRESSION_OPENERS = frozenset([ATOM, INT, HEX, BIN])
NUMBERS = frozenset([INT, HEX, BIN])

class Token(NamedTuple):
	""" One word of source text, classified. Row and column are for humans. """
	tag: str
	text: str
	span: slice
	row: int
	col: int

	def __str__(self): return self.text

	def is_keyword(self): return self.tag in (KEYWORD_ATOM, KEYWORD_MACRO)
	def is_type(self): return self.tag in TYPE_TAGS
	def is_expr(self): return self.tag in EXPRESSION_OPENERS
	def is_number(self): return self.tag in NUMBERS
	def is_operator(self): return self.tag == OPERATOR
	def width(self): return PRIMITIVES[self.text]

def classify_word(word:str) -> str:
	if word in KEYWORDS: return KEYWORDS[word]
	if word in PRIMITIVES: return PRIMITIVE
	if word == REPEAT: return OPERATOR
	if word[0].isupper():
		return STRUCT if any(c.islower() for c in word) else ATOM
	return MACRO

# Literal blanks in a pattern are not significant to miniscan. Whitespace is spelled \s.
_lexicon = miniscan.Definition()
_lexicon.ignore(r'\s+')
_lexicon.ignore(r';[^\n]*')

@_lexicon.on(r'[A-Za-z][A-Za-z0-9_]*')
def _scan_word(yy:IterableScanner):
	yy.token(classify_word(yy.match()), yy.slice())

@_lexicon.on(r'\d+')
def _scan_decimal(yy:IterableScanner): yy.token(INT, yy.slice())

@_lexicon.on(r'\$[0-9A-Fa-f]+')
def _scan_hexadecimal(yy:IterableScanner): yy.token(HEX, yy.slice())

@_lexicon.on(r'%[01]+')
def _scan_binary(yy:IterableScanner): yy.token(BIN, yy.slice())

@_lexicon.on(r'"[^"\n]*"')
def _scan_string(yy:IterableScanner): yy.token(STRING, yy.slice())

@_lexicon.on(r'\*\*|<<|>>|\\\\|[\+\-\*\/\^\&\|]')
def _scan_operator(yy:IterableScanner): yy.token(OPERATOR, yy.slice())

# Anything that cannot start one of the words above. No character is matched
# equally well by this and any other rule, so there's nothing to break ties.
@_lexicon.on(r'[^A-Za-z0-9\s;\+\-\*\/\^\&\|]')
def _scan_bogus(yy:IterableScanner): yy.token(BOGUS, yy.slice())

def tokenize(text:str) -> list[Token]:
	""" Scan the whole text into a list; that list becomes the token arena. """
	where = SourceText(text)
	tokens = []
	for tag, span in _lexicon.scan(text):
		row, col = where.find_row_col(span.start)
		tokens.append(Token(tag, sys.intern(text[span]), span, row, col))
	return tokens
