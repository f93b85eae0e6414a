"""
The codepoint table: one record per Unicode scalar value, giving the two letters of its
General_Category property.

A table covers a contiguous span of scalar values with no gaps and no duplicates. It need
not start at zero: generation mode can trim the table to a sub-range. For that reason
every record carries its own scalar value, and nothing downstream should ever confuse a
position in the table with a codepoint.

Storage is nothing fancy. The categories live in one string holding two characters per
codepoint (major letter, minor letter), and records are manufactured on demand. That is
about as compact as Python gets without resorting to arrays of bytes, and it makes the
JSON asset format trivial: the same string goes straight into the file.

The asset is written and read as JSON, with compact separators, exactly as the JSON
automata of a parser generator would be. If nobody has generated an asset yet, the
interpreter's own `unicodedata` module supplies a table, which is handy if perhaps a
Unicode version behind the times.
"""

import contextlib, json, os, string
import unicodedata
from typing import NamedTuple, Iterable

from .interfaces import MAX_CODEPOINT, UNSET, TableError, squawk

ASSET_FORMAT = 1
DEFAULT_TABLE_PATH = os.path.join(os.path.dirname(__file__), 'data', 'codepoints.json')

_MAJOR_LETTERS = frozenset(string.ascii_uppercase + UNSET)
_MINOR_LETTERS = frozenset(string.ascii_lowercase + UNSET)

class CodepointRecord(NamedTuple):
	codepoint: int
	major: str
	minor: str

	@property
	def category(self) -> str:
		""" The two-letter category code as Unicode writes it, or '' if unassigned. """
		return (self.major + self.minor).strip()


class CodepointTable:
	""" Read-only, dense, ordered sequence of CodepointRecord objects. """

	def __init__(self, low:int, categories:str, unicode_version:str=None):
		if len(categories) % 2:
			raise TableError("Category data must hold exactly two letters per codepoint.")
		if low < 0 or low + len(categories)//2 - 1 > MAX_CODEPOINT:
			raise TableError("Table span exceeds the Unicode scalar range.")
		if not (set(categories[0::2]) <= _MAJOR_LETTERS and set(categories[1::2]) <= _MINOR_LETTERS):
			raise TableError("Category data contains characters which are not category letters.")
		self.low = low
		self.unicode_version = unicode_version
		self.__categories = categories

	@classmethod
	def from_records(cls, records:Iterable[CodepointRecord], unicode_version=None) -> "CodepointTable":
		"""
		Build a table from records in ascending order of scalar value.
		The records must be total over their span: a gap or a duplicate is a TableError.
		"""
		low, expect, letters = None, None, []
		for r in records:
			if low is None: low = expect = r.codepoint
			if r.codepoint != expect:
				raise TableError("Expected a record for %X but got %X."%(expect, r.codepoint))
			letters.append(r.major)
			letters.append(r.minor)
			expect += 1
		return cls(low or 0, ''.join(letters), unicode_version)

	@classmethod
	def from_unicodedata(cls, low:int=0, high:int=MAX_CODEPOINT) -> "CodepointTable":
		""" Use whatever Unicode version the running interpreter was built with. """
		categories = ''.join(unicodedata.category(chr(cp)) for cp in range(low, high+1))
		return cls(low, categories, unicodedata.unidata_version)

	def __len__(self): return len(self.__categories) // 2

	@property
	def high(self) -> int:
		""" Last scalar value covered. For an empty table, this is one less than `low`. """
		return self.low + len(self) - 1

	def __getitem__(self, position:int) -> CodepointRecord:
		size = len(self)
		if position < 0: position += size
		if not 0 <= position < size: raise IndexError(position)
		i = 2 * position
		return CodepointRecord(self.low + position, self.__categories[i], self.__categories[i+1])

	def __iter__(self):
		letters = self.__categories
		for position in range(len(self)):
			i = 2 * position
			yield CodepointRecord(self.low + position, letters[i], letters[i+1])

	def __contains__(self, codepoint:int): return self.low <= codepoint <= self.high

	def record_for(self, codepoint:int) -> CodepointRecord:
		""" Look up by scalar value, not by position. """
		if codepoint not in self: raise KeyError(codepoint)
		return self[codepoint - self.low]

	def category_of(self, codepoint:int) -> str: return self.record_for(codepoint).category

	def as_document(self) -> dict:
		return {
			'format': ASSET_FORMAT,
			'low': self.low,
			'high': self.high,
			'unicode_version': self.unicode_version,
			'categories': self.__categories,
		}


def save_table(table:CodepointTable, path:str):
	""" Write the table asset, replacing any existing one only once the new one is complete. """
	folder = os.path.dirname(os.path.abspath(path))
	temp_path = path + '.tmp'
	try:
		os.makedirs(folder, exist_ok=True)
		with open(temp_path, 'w', encoding='ascii') as fh:
			json.dump(table.as_document(), fh, separators=(',', ':'))
		os.replace(temp_path, path)
	except OSError as e:
		with contextlib.suppress(OSError): os.remove(temp_path)
		raise TableError("Cannot write codepoint table %s: %s"%(path, e)) from e
	squawk("Wrote %d codepoint records to %s"%(len(table), path))

def _is_integer(x): return isinstance(x, int) and not isinstance(x, bool)

def load_table(path:str) -> CodepointTable:
	try:
		with open(path, encoding='ascii') as fh: document = json.load(fh)
	except (OSError, ValueError) as e:
		raise TableError("Cannot read codepoint table %s: %s"%(path, e)) from e
	if not isinstance(document, dict) or document.get('format') != ASSET_FORMAT:
		raise TableError("%s is not a codepoint table in a format this version understands."%path)
	try:
		low, high, categories = document['low'], document['high'], document['categories']
	except KeyError as e:
		raise TableError("Codepoint table %s lacks the %r field."%(path, e.args[0])) from e
	if not (_is_integer(low) and _is_integer(high) and isinstance(categories, str)):
		raise TableError("Codepoint table %s has fields of the wrong type."%path)
	table = CodepointTable(low, categories, document.get('unicode_version'))
	if table.high != high:
		raise TableError("Codepoint table %s claims to end at %X but its data ends at %X."%(path, high, table.high))
	squawk("Loaded %d codepoint records (%X-%X) from %s"%(len(table), table.low, table.high, path))
	return table

def open_default_table(path:str=None) -> CodepointTable:
	""" Load the named asset, or else the generated one, or else fall back on `unicodedata`. """
	if path is not None: return load_table(path)
	if os.path.exists(DEFAULT_TABLE_PATH): return load_table(DEFAULT_TABLE_PATH)
	squawk("No generated table at %s; using Unicode %s from the interpreter."%(DEFAULT_TABLE_PATH, unicodedata.unidata_version))
	return CodepointTable.from_unicodedata()
