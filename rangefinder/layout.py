"""
Laying out ranges as the right-hand side of a grammar rule.

Ranges come out separated by " | ", so the text reads as a list of alternatives.
The first line begins with the leadup (something like "char ::= ") and every
further line is indented by the width of the leadup, so the alternatives line up
under one another. A line breaks before any range that would push it past the
high column, and the " |" which ends a broken line stays with the range before it:
that way each line but the last visibly continues onto the next.

The high column is a soft limit. A range too wide to fit even on an otherwise
empty line still gets a line to itself, or else we would never finish.
"""

from .interfaces import DEFAULT_HIGHCOL

def join_ranges(ranges) -> str:
	return " | ".join(map(str, ranges))

def layout(ranges, leadup:str='', highcol:int=DEFAULT_HIGHCOL) -> list:
	""" Return the lines of text (without line terminators) for a sequence of ranges. """
	ranges = list(ranges)
	if not ranges: return []
	if highcol <= 0: return [leadup + join_ranges(ranges)]
	lines, position = [], 0
	indent = ' ' * len(leadup)
	while position < len(ranges):
		used, text = fill_line(ranges, position, len(leadup), highcol)
		lines.append(leadup + text)
		leadup = indent
		position += used
	return lines

def fill_line(ranges:list, first:int, low_col:int, highcol:int):
	""" Take as many ranges as fit, but never fewer than one. Returns (how many, text). """
	pieces, col = [], low_col
	last = len(ranges) - 1
	for i in range(first, len(ranges)):
		token = (' ' if i > first else '') + str(ranges[i]) + (' |' if i < last else '')
		col += len(token)
		if col > highcol and pieces: break
		pieces.append(token)
	return len(pieces), ''.join(pieces)

def print_ranges(ranges, leadup:str='', highcol:int=DEFAULT_HIGHCOL, file=None):
	for line in layout(ranges, leadup, highcol): print(line, file=file)
