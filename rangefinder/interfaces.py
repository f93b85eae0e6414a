"""
This file aggregates the exception types and the handful of design constants which the
range finder deals in.

The error taxonomy is deliberately shallow. A user can get the command line wrong
(a UsageError, or its more specific cousin the QueryError), the table asset can be
broken (TableError), or the Unicode database can be unreadable during generation
(GenerationError). There are no retries and no partial results: any of these stops
the run.
"""
import sys

MAX_CODEPOINT = 0x10FFFF
UNSET = ' ' # Placeholder category letter for codepoints the database says nothing about.
DEFAULT_HIGHCOL = 80

VERBOSE = False # Set by the `-v` command-line switch.

def squawk(*args):
	""" Diagnostic chatter, only when asked for. Never on STDOUT, which belongs to the ranges. """
	if VERBOSE:
		print(*args, file=sys.stderr)

class RangeFinderError(ValueError):
	""" Base class of all exceptions arising from the range finder. """

class UsageError(RangeFinderError):
	""" The command line asked for something which does not make sense. """

class QueryError(UsageError):
	"""
	Raised for a malformed query term. Parameters are:
		a description of the problem,
		the complete query text,
		a slice-object giving the extent of the offending term within that text.
	"""
	def __init__(self, message, query, where:slice):
		super().__init__(message, query, where)
		self.message, self.query, self.where = message, query, where
	
	def __str__(self): return "%s: %s"%(self.query[self.where], self.message)

class TableError(RangeFinderError):
	""" The codepoint table asset is missing, unreadable, or not total over its range. """

class GenerationError(RangeFinderError):
	""" Failure to read or make sense of the Unicode Character Database during generation. """
