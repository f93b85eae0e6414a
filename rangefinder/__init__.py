"""
Find the codepoint ranges belonging to Unicode categories, characters, or codepoints,
and print them as alternatives ready to paste into a BNF grammar.
"""
