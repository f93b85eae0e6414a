"""
One pass over the codepoint table, collapsing runs of matching codepoints into ranges.

The only state is whether we are inside a run and where that run began. A run ends at
the first record which fails to match, or at a break in the scalar values (which a
well-formed table never has, but costs nothing to respect), or at the end of the table.
Consequently no two ranges in the output are ever adjacent: anything adjacent would
have been part of the same run.
"""

from typing import NamedTuple, Iterable

from .table import CodepointRecord
from .matchers import Query

class Range(NamedTuple):
	""" Closed, inclusive interval of scalar values. """
	begin: int
	end: int

	def __str__(self):
		if self.begin == self.end: return "#x%X" % self.begin
		return "[#x%X-#x%X]" % (self.begin, self.end)

def scan(records:Iterable[CodepointRecord], query:Query) -> list:
	return scan_with(records, query.accepts)

def scan_with(records:Iterable[CodepointRecord], accepts) -> list:
	"""
	`accepts` is any predicate over records. The records must come in ascending order
	of scalar value, which the CodepointTable guarantees.
	"""
	ranges = []
	start = previous = None
	for record in records:
		codepoint = record.codepoint
		if start is not None and codepoint != previous + 1:
			ranges.append(Range(start, previous))
			start = None
		if accepts(record):
			if start is None: start = codepoint
		elif start is not None:
			ranges.append(Range(start, previous))
			start = None
		previous = codepoint
	if start is not None: ranges.append(Range(start, previous))
	return ranges
