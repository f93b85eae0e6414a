import contextlib
import io
import os
import tempfile
import unittest

from rangefinder import interfaces, table
from rangefinder.__main__ import main
from rangefinder.table import CodepointTable

TINY_UCD = """<?xml version="1.0" encoding="UTF-8"?>
<ucd xmlns="http://www.unicode.org/ns/2003/ucd/1.0">
<repertoire>
<char cp="0041" gc="Lu"/>
<char cp="0042" gc="Lu"/>
<char cp="0061" gc="Ll"/>
<char cp="0100" gc="Lu"/>
</repertoire>
</ucd>
"""


class TestCommandLine(unittest.TestCase):
	def setUp(self):
		self.folder = tempfile.TemporaryDirectory()
		self.table_path = os.path.join(self.folder.name, 'codepoints.json')
		table.save_table(CodepointTable.from_unicodedata(0, 0xFF), self.table_path)
	
	def tearDown(self):
		self.folder.cleanup()
		interfaces.VERBOSE = False
	
	def run_main(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
			main(list(argv))
		return out.getvalue(), err.getvalue()
	
	def fail_main(self, *argv):
		with self.assertRaises(SystemExit) as cm: out, err = self.run_main(*argv)
		self.assertEqual(1, cm.exception.code)
	
	def test_00_query(self):
		out, err = self.run_main('-table', self.table_path, 'cat=Lu', '-range=0-0x7f')
		self.assertEqual('[#x41-#x5A]\n', out)
	
	def test_01_leadup(self):
		out, err = self.run_main('-table='+self.table_path, '-leadup=    upper ::= ', 'cat=Lu', '-range=0-0x7f')
		self.assertEqual('    upper ::= [#x41-#x5A]\n', out)
	
	def test_02_terms_are_joined(self):
		out, err = self.run_main('-table', self.table_path, 'cat=N', '-range=0-0x7f', 'ch=a-c')
		self.assertEqual('[#x30-#x39] | [#x61-#x63]\n', out)
	
	def test_03_no_wrapping(self):
		out, err = self.run_main('-table', self.table_path, '-highcol=0', 'cat=P')
		self.assertEqual(1, out.count('\n'))
	
	def test_04_no_query(self):
		out, err = self.run_main('-table', self.table_path)
		assert out.startswith('Must provide at least one query param')
		self.assertIn('Categories:', out)
	
	def test_05_bad_query(self):
		err = io.StringIO()
		with contextlib.redirect_stderr(err), contextlib.redirect_stdout(io.StringIO()):
			with self.assertRaises(SystemExit) as cm: main(['-table', self.table_path, 'cat=L', 'bogus'])
		self.assertEqual(1, cm.exception.code)
		self.assertIn('Unknown query param', err.getvalue())
		self.assertIn('^^^^^', err.getvalue())
	
	def test_06_bad_range(self):
		with contextlib.redirect_stderr(io.StringIO()): self.fail_main('-table', self.table_path, '-range=5', 'cat=L')
	
	def test_07_missing_table(self):
		missing = os.path.join(self.folder.name, 'nope.json')
		with contextlib.redirect_stderr(io.StringIO()): self.fail_main('-table', missing, 'cat=L')
	
	def test_08_generate_then_query(self):
		ucd_path = os.path.join(self.folder.name, 'ucd.all.flat.xml')
		out_path = os.path.join(self.folder.name, 'generated.json')
		with open(ucd_path, 'w', encoding='utf-8') as fh: fh.write(TINY_UCD)
		out, err = self.run_main('-unicode', ucd_path, '-table', out_path, '-range=0x30-0x7f')
		self.assertIn(out_path, out)
		self.assertEqual(0x30, table.load_table(out_path).low)
		out, err = self.run_main('-table', out_path, 'cat=L')
		self.assertEqual('[#x41-#x42] | #x61\n', out)
	
	def test_09_verbose(self):
		out, err = self.run_main('-v', '-table', self.table_path, 'cp=41')
		self.assertEqual('#x41\n', out)
		self.assertIn('Found 1 range(s)', err)
	
	def test_10_generation_cannot_write(self):
		ucd_path = os.path.join(self.folder.name, 'ucd.all.flat.xml')
		out_path = os.path.join(self.folder.name, 'sub')
		os.mkdir(out_path)
		with open(ucd_path, 'w', encoding='utf-8') as fh: fh.write(TINY_UCD)
		err = io.StringIO()
		with contextlib.redirect_stderr(err): self.fail_main('-unicode', ucd_path, '-range=0-0x7f', '-table', out_path)
		self.assertIn('Cannot write codepoint table', err.getvalue())
		assert not os.path.exists(out_path + '.tmp')
	
	def test_11_table_with_bad_field_types(self):
		with open(self.table_path, 'w') as fh: fh.write('{"format":1,"low":"0","high":0,"categories":"Cc"}')
		with contextlib.redirect_stderr(io.StringIO()): self.fail_main('-table', self.table_path, 'cat=C')


if __name__ == '__main__':
	unittest.main()
