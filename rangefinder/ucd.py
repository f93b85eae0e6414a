"""
Generation mode: rebuild the codepoint table from the Unicode Character Database in XML.

Get the database from https://www.unicode.org/Public/UCD/latest/ucdxml/ucd.all.flat.zip
(the grouped variant works too) and unzip it. The file is large, so it gets read as a
stream of elements rather than a whole tree.

The interesting elements are `char`, `reserved`, `noncharacter`, and `surrogate`. Each
covers either one codepoint (a `cp` attribute) or a span of them (`first-cp` and
`last-cp`). The `gc` attribute holds the General_Category, and in the grouped variant
an element may inherit it from the enclosing `group`. Whatever the database leaves
unmentioned keeps the unset placeholder.
"""

import string
import xml.etree.ElementTree as ET
from typing import NamedTuple

from .interfaces import MAX_CODEPOINT, UNSET, GenerationError, squawk
from .table import CodepointTable

ENTRY_TAGS = frozenset(['char', 'reserved', 'noncharacter', 'surrogate'])

class Entry(NamedTuple):
	first: int
	last: int
	major: str
	minor: str

def split_category(gc:str):
	""" Anything which isn't a proper category letter becomes the placeholder. """
	major = gc[0] if gc[:1] and gc[0] in string.ascii_uppercase else UNSET
	minor = gc[1] if len(gc) >= 2 and gc[1] in string.ascii_lowercase else UNSET
	return major, minor

def _local_name(tag:str) -> str: return tag.rpartition('}')[2]

def _hex_attribute(element, name) -> int:
	text = element.get(name)
	try: value = int(text, 16)
	except (TypeError, ValueError):
		raise GenerationError("Bad %s attribute %r on <%s> element"%(name, text, _local_name(element.tag))) from None
	if not 0 <= value <= MAX_CODEPOINT:
		raise GenerationError("Codepoint %X on <%s> element is out of range"%(value, _local_name(element.tag)))
	return value

def _span(element):
	if element.get('cp') is not None:
		cp = _hex_attribute(element, 'cp')
		return cp, cp
	first, last = _hex_attribute(element, 'first-cp'), _hex_attribute(element, 'last-cp')
	if first > last: raise GenerationError("Element covers backwards span %X-%X"%(first, last))
	return first, last

def read_database(source):
	"""
	`source` is a filename or an open binary file object.
	Returns a list of Entry objects sorted by first codepoint, and the Unicode version (or None).
	"""
	entries, groups, version = [], [], None
	try:
		for event, element in ET.iterparse(source, events=('start', 'end')):
			name = _local_name(element.tag)
			if event == 'start':
				if name == 'group': groups.append(element.get('gc'))
				continue
			if name == 'description':
				version = (element.text or '').strip().replace('Unicode ', '', 1) or None
			elif name == 'group':
				groups.pop()
				element.clear()
			elif name in ENTRY_TAGS:
				gc = element.get('gc')
				if gc is None: gc = next((g for g in reversed(groups) if g is not None), '')
				first, last = _span(element)
				entries.append(Entry(first, last, *split_category(gc)))
				element.clear()
	except ET.ParseError as e:
		raise GenerationError("Malformed Unicode database XML: %s"%e) from e
	except OSError as e:
		raise GenerationError("Cannot read the Unicode database: %s"%e) from e
	entries.sort(key=lambda e:e.first)
	squawk("Read %d entries from the Unicode %s database"%(len(entries), version or '(unknown version)'))
	return entries, version

def generate_table(source, low:int=0, high:int=MAX_CODEPOINT) -> CodepointTable:
	""" Build a dense table over [low, high] inclusive. Scalar values survive the trimming intact. """
	entries, version = read_database(source)
	letters = [UNSET+UNSET] * (MAX_CODEPOINT + 1)
	for e in entries:
		letters[e.first:e.last+1] = [e.major+e.minor] * (e.last - e.first + 1)
	return CodepointTable(low, ''.join(letters[low:high+1]), version)
