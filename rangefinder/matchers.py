"""
The query language, and what it compiles into.

A query is a space-separated sequence of `key=value` terms:

	cat=N      any codepoint whose major category is N
	cat=Lu     any codepoint in category Lu
	ch=#       just the character #
	ch=a-z     the characters a through z inclusive
	cp=feff    just the codepoint U+FEFF
	cp=1a-af   the codepoints U+1A through U+AF inclusive

Each term becomes one matcher, and a codepoint matches the query if any matcher says so.
Matchers are plain tagged tuples with a `matches(record)` method, rather than closures:
that way you can look at them, compare them, and test them without running a scan.

Separately, the `-range` switch supplies an AllowedBounds object. Whatever falls outside
those bounds is excluded regardless of what the matchers think.

Compilation is fail-fast: the first bad term raises a QueryError which knows exactly
where in the query text the trouble lies.
"""

import re
from typing import NamedTuple, Optional

from .interfaces import MAX_CODEPOINT, QueryError, UsageError, squawk
from .table import CodepointRecord

CATEGORY_NAMES = {
	'Cc': 'Control',
	'Cf': 'Format',
	'Cn': 'Not Assigned',
	'Co': 'Private Use',
	'Cs': 'Surrogate',
	'Ll': 'Lowercase Letter',
	'Lm': 'Modifier Letter',
	'Lo': 'Other Letter',
	'Lt': 'Titlecase Letter',
	'Lu': 'Uppercase Letter',
	'Mc': 'Spacing Mark',
	'Me': 'Enclosing Mark',
	'Mn': 'Nonspacing Mark',
	'Nd': 'Decimal Number',
	'Nl': 'Letter Number',
	'No': 'Other Number',
	'Pc': 'Connector Punctuation',
	'Pd': 'Dash Punctuation',
	'Pe': 'Close Punctuation',
	'Pf': 'Final Punctuation',
	'Pi': 'Initial Punctuation',
	'Po': 'Other Punctuation',
	'Ps': 'Open Punctuation',
	'Sc': 'Currency Symbol',
	'Sk': 'Modifier Symbol',
	'Sm': 'Math Symbol',
	'So': 'Other Symbol',
	'Zl': 'Line Separator',
	'Zp': 'Paragraph Separator',
	'Zs': 'Space Separator',
}
MAJOR_CATEGORIES = frozenset(code[0] for code in CATEGORY_NAMES)

### The matcher variants:

class ByMajorCategory(NamedTuple):
	major: str
	def matches(self, record:CodepointRecord) -> bool: return record.major == self.major

class ByMajorMinorCategory(NamedTuple):
	major: str
	minor: str
	def matches(self, record:CodepointRecord) -> bool:
		return record.major == self.major and record.minor == self.minor

class BySingleChar(NamedTuple):
	codepoint: int
	def matches(self, record:CodepointRecord) -> bool: return record.codepoint == self.codepoint

class ByCharRange(NamedTuple):
	low: int
	high: int
	def matches(self, record:CodepointRecord) -> bool: return self.low <= record.codepoint <= self.high

class BySingleCodepoint(NamedTuple):
	codepoint: int
	def matches(self, record:CodepointRecord) -> bool: return record.codepoint == self.codepoint

class ByCodepointRange(NamedTuple):
	low: int
	high: int
	def matches(self, record:CodepointRecord) -> bool: return self.low <= record.codepoint <= self.high


class AllowedBounds(NamedTuple):
	""" Inclusive limits on which scalar values may match at all. """
	low: int
	high: int
	def permits(self, codepoint:int) -> bool: return self.low <= codepoint <= self.high
	def is_everything(self) -> bool: return self.low <= 0 and self.high >= MAX_CODEPOINT


class Query(NamedTuple):
	inclusive: tuple
	bounds: Optional[AllowedBounds] = None

	def accepts(self, record:CodepointRecord) -> bool:
		if self.bounds is not None and not self.bounds.permits(record.codepoint): return False
		for matcher in self.inclusive:
			if matcher.matches(record): return True
		return False


### Compiling the query language:

_TERM = re.compile(r'[^ ]+')
_HEX = re.compile(r'[0-9A-Fa-f]+')
_NUMBER = re.compile(r'0[xX][0-9A-Fa-f]+|[0-9]+')

def compile_query(text:str) -> list:
	""" Turn query text into a list of matchers, one per term. Raises QueryError on the first bad term. """
	return [compile_term(text, slice(m.start(), m.end())) for m in _TERM.finditer(text)]

def compile_term(query:str, where:slice):
	term = query[where]
	def fail(message): return QueryError(message, query, where)
	pair = term.split('=')
	if len(pair) != 2: raise fail("Unknown query param")
	key, value = pair
	try: builder = _BUILDERS[key]
	except KeyError: raise fail("Unknown query param") from None
	return builder(value, fail)

def _category(value, fail):
	if len(value) == 1:
		if value not in MAJOR_CATEGORIES: squawk("Note: %r is not a major category Unicode uses."%value)
		return ByMajorCategory(value)
	if len(value) == 2:
		if value not in CATEGORY_NAMES: squawk("Note: %r is not a category Unicode uses."%value)
		return ByMajorMinorCategory(value[0], value[1])
	raise fail("A category is one or two letters, like N or Lu")

def _character(value, fail):
	if len(value) == 1: return BySingleChar(ord(value))
	if len(value) == 3 and value[1] == '-':
		low, high = ord(value[0]), ord(value[2])
		if low > high: raise fail("Character range runs backwards")
		return ByCharRange(low, high)
	raise fail("Expected a single character or a range of characters like a-z")

def _codepoint(value, fail):
	ends = value.split('-')
	if len(ends) > 2: raise fail("Expected a single codepoint or a range of codepoints like 1a-af")
	numbers = [_hexadecimal(e, fail) for e in ends]
	if len(numbers) == 1: return BySingleCodepoint(numbers[0])
	low, high = numbers
	if low > high: raise fail("Codepoint range runs backwards")
	return ByCodepointRange(low, high)

def _hexadecimal(text, fail) -> int:
	if not _HEX.fullmatch(text): raise fail("%r is not a hexadecimal codepoint"%text)
	value = int(text, 16)
	if value > MAX_CODEPOINT: raise fail("%X is beyond the last Unicode codepoint"%value)
	return value

_BUILDERS = {'cat': _category, 'ch': _character, 'cp': _codepoint}


### The exclusive bound:

def parse_number(text:str) -> int:
	""" Decimal, or hexadecimal with a 0x prefix. """
	if not _NUMBER.fullmatch(text): raise UsageError("%r is not a number"%text)
	return int(text, 0) if text[:2] in ('0x', '0X') else int(text, 10)

def parse_bounds(text:str) -> AllowedBounds:
	""" Parse the LOW-HIGH syntax of the `-range` switch. """
	ends = text.split('-')
	if len(ends) != 2: raise UsageError("malformed range [%s]"%text)
	low, high = map(parse_number, ends)
	if low > high: raise UsageError("range [%s] runs backwards"%text)
	if high > MAX_CODEPOINT: raise UsageError("range [%s] goes beyond the last Unicode codepoint"%text)
	return AllowedBounds(low, high)

def build_query(text:str, bounds:AllowedBounds=None) -> Query:
	""" A bound which admits every codepoint is the same as no bound at all. """
	if bounds is not None and bounds.is_everything(): bounds = None
	matchers = compile_query(text)
	squawk("Compiled %d matcher(s) from query %r"%(len(matchers), text))
	return Query(tuple(matchers), bounds)
