"""
This module is all about easing over the process to display where things go wrong.

A query is a single line of text, so there is no need for the row-and-column machinery
a multi-line source would call for. What's left is the picture: given the query and the
slice of the offending term, draw the line with a row of carets under the culprit.
"""

import sys

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

def complaint(text:str, a_slice:slice, message:str) -> str:
	left, right = a_slice.start, a_slice.stop
	reference = "At column %d: %s" % (left + 1, message)
	illustrated = illustration(text, left, right - left, prefix=' >>> ', caption="here")
	return "%s\n%s"%(reference, illustrated)

def complain(text:str, a_slice:slice, message:str):
	print(complaint(text, a_slice, message), file=sys.stderr)
