"""
Search the table of Unicode General_Category data and print the matching codepoints
as ranges in the notation BNF-style grammars use for character classes, e.g.:

	py -m rangefinder -leadup="    upper ::= " cat=Lu -range=0-0x7f
	    upper ::= [#x41-#x5A]

Given -unicode, instead rebuild the table from the Unicode Character Database XML.
  Get it from https://www.unicode.org/Public/UCD/latest/ucdxml/ucd.all.flat.zip
"""

import sys, argparse

from rangefinder import interfaces, layout, matchers, scanner, table, ucd
from rangefinder.interfaces import DEFAULT_HIGHCOL, MAX_CODEPOINT, RangeFinderError, UsageError, QueryError
from rangefinder.support.failureprone import complain

EPILOG = """
Where search params is a space separated set of:
 * A category (e.g. cat=N, cat=Cc etc)
 * A specific or range of characters (e.g. ch=a-z, ch=# etc)
 * A specific or range of codepoints (e.g. cp=1a-af, cp=feff etc)

Categories:
""" + "\n".join("    %s: %s"%pair for pair in sorted(matchers.CATEGORY_NAMES.items()))

def make_parser():
	parser = argparse.ArgumentParser(
		prog='py -m rangefinder',
		usage='%(prog)s [options] <search params>',
		description=__doc__,
		epilog=EPILOG,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument('query', nargs='*', metavar='search params', help='terms of the query; see below')
	parser.add_argument('-range', '--range', dest='range', help='Range of codepoints to search, or range to build if -unicode specified (e.g. 50-0x7f)')
	parser.add_argument('-leadup', '--leadup', default='', help='Leadup text to print and align to')
	parser.add_argument('-highcol', '--highcol', type=int, default=DEFAULT_HIGHCOL, help='Highest column to print at (columns start at 1); zero or less means never wrap.')
	parser.add_argument('-unicode', '--unicode', metavar='PATH', help='Regenerate the codepoint table from /path/to/ucd.all.flat.xml')
	parser.add_argument('-table', '--table', metavar='PATH', help='Codepoint table to search, or to write if -unicode specified (default: the generated table inside the package)')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk on STDERR about what's going on.")
	return parser

def generate(args, bounds):
	low, high = (0, MAX_CODEPOINT) if bounds is None else bounds
	codepoints = ucd.generate_table(args.unicode, low, high)
	target_path = args.table or table.DEFAULT_TABLE_PATH
	table.save_table(codepoints, target_path)
	print('Wrote codepoint table in JSON format to:')
	print('\t'+target_path)

def search(args, bounds):
	query = matchers.build_query(' '.join(args.query), bounds)
	codepoints = table.open_default_table(args.table)
	ranges = scanner.scan(codepoints, query)
	interfaces.squawk("Found %d range(s)"%len(ranges))
	layout.print_ranges(ranges, args.leadup, args.highcol)

def run(args, parser):
	bounds = matchers.parse_bounds(args.range) if args.range else None
	if args.unicode: generate(args, bounds)
	elif args.query: search(args, bounds)
	else:
		print("Must provide at least one query param")
		parser.print_help()

def main(argv=None):
	parser = make_parser()
	args = parser.parse_intermixed_args(argv)
	if args.verbose: interfaces.VERBOSE = True
	try: run(args, parser)
	except QueryError as e:
		complain(e.query, e.where, e.message)
		parser.print_help(sys.stderr)
		sys.exit(1)
	except UsageError as e:
		print(e.args[0], file=sys.stderr)
		parser.print_help(sys.stderr)
		sys.exit(1)
	except RangeFinderError as e:
		print(e.args[0], file=sys.stderr)
		sys.exit(1)

if __name__ == '__main__': main()
