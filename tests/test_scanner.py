import unittest

from rangefinder import matchers, scanner
from rangefinder.matchers import AllowedBounds
from rangefinder.scanner import Range
from rangefinder.table import CodepointRecord, CodepointTable

ASCII_AND_LATIN_1 = CodepointTable.from_unicodedata(0, 0xFF)

def find(table, text, bounds=None):
	return scanner.scan(table, matchers.build_query(text, bounds))


class TestScanner(unittest.TestCase):
	def test_00_uppercase_block(self):
		table = CodepointTable(0x41, 'Lu'*26)
		self.assertEqual([Range(0x41, 0x5A)], find(table, 'cat=Lu'))
	
	def test_01_single_codepoint(self):
		self.assertEqual([Range(0x41, 0x41)], find(ASCII_AND_LATIN_1, 'cp=41'))
	
	def test_02_character_range(self):
		self.assertEqual([Range(ord('a'), ord('z'))], find(ASCII_AND_LATIN_1, 'ch=a-z'))
	
	def test_03_bounds_are_enforced(self):
		expect = [Range(0x30, 0x39), Range(0x41, 0x5A), Range(0x61, 0x7A)]
		self.assertEqual(expect, find(ASCII_AND_LATIN_1, 'cat=N cat=L', AllowedBounds(0, 0x7F)))
		# Without the bound, Latin-1 letters show up too.
		self.assertGreater(len(find(ASCII_AND_LATIN_1, 'cat=N cat=L')), len(expect))
	
	def test_04_adjacent_matches_merge(self):
		self.assertEqual([Range(0x41, 0x4A)], find(ASCII_AND_LATIN_1, 'cp=41-45 cp=46-4a'))
		self.assertEqual([Range(0x41, 0x48)], find(ASCII_AND_LATIN_1, 'cp=41-45 cp=43-48 ch=B'))
	
	def test_05_nothing_to_find(self):
		self.assertEqual([], find(CodepointTable(0, ''), 'cat=L'))
		self.assertEqual([], find(ASCII_AND_LATIN_1, 'cat=Zl'))
		self.assertEqual([], find(ASCII_AND_LATIN_1, 'cp=10000'))
	
	def test_06_run_reaching_the_end(self):
		table = CodepointTable(0x10, 'CcLuLu')
		self.assertEqual([Range(0x11, 0x12)], find(table, 'cat=L'))
		self.assertEqual([Range(0x10, 0x10)], find(table, 'cat=C'))
	
	def test_07_offset_table_uses_scalar_values(self):
		table = CodepointTable(0x1000, 'LoNdLo')
		self.assertEqual([Range(0x1000, 0x1000), Range(0x1002, 0x1002)], find(table, 'cat=Lo'))
	
	def test_08_break_in_scalar_values_ends_a_run(self):
		records = [CodepointRecord(1, 'L', 'u'), CodepointRecord(2, 'L', 'u'), CodepointRecord(5, 'L', 'u')]
		self.assertEqual([Range(1, 2), Range(5, 5)], scanner.scan_with(records, lambda r: True))
	
	def test_09_ranges_ascend_without_touching(self):
		table = CodepointTable.from_unicodedata(0, 0x2FF)
		for text in ['cat=L', 'cat=P cat=S', 'cat=Ll', 'cat=C cp=20-40']:
			with self.subTest(text=text):
				ranges = find(table, text)
				assert ranges
				for r in ranges: assert r.begin <= r.end
				for a, b in zip(ranges, ranges[1:]): assert a.end + 1 < b.begin
	
	def test_10_same_query_same_answer(self):
		self.assertEqual(find(ASCII_AND_LATIN_1, 'cat=P ch=a-f'), find(ASCII_AND_LATIN_1, 'cat=P ch=a-f'))
	
	def test_11_range_is_a_plain_pair(self):
		r = Range(0x41, 0x5A)
		self.assertEqual(2, len(r))
		self.assertEqual([0x5A, 0x41], list(reversed(r)))
		begin, end = r
		self.assertEqual((0x41, 0x5A), (begin, end))


if __name__ == '__main__':
	unittest.main()
