import unittest, io, os, tempfile, contextlib, warnings
from unittest import mock
from bfup import runtime
from bfup.__main__ import parse_arguments, make_config, main


class TestArguments(unittest.TestCase):
	def test_00_defaults(self):
		c = make_config(parse_arguments([]))
		self.assertEqual(32, c.output_width)
		self.assertEqual(frozenset('+-<>[].,'), c.operators)

	def test_01_role_flags(self):
		c = make_config(parse_arguments(['-+', 'XY', '-#', '*', '-m', '@', '-e', '!', '--group-start-delimiter', '{', '--group-end-delimiter', '}']))
		self.assertEqual((frozenset('XY'), '{', '}', '*', '@', '!'), c[:6])

	def test_02_width_flags(self):
		self.assertEqual(0, make_config(parse_arguments(['-n'])).output_width)
		self.assertEqual(5, make_config(parse_arguments(['-l', '5'])).output_width)

	def test_03_conflicts(self):
		for argv in [['-C', 'x.json', '-m', '@'], ['-n', '-l', '5'], ['-l', '-1']]:
			with self.subTest(argv=argv):
				with contextlib.redirect_stderr(io.StringIO()):
					with self.assertRaises(SystemExit): parse_arguments(argv)

class TestMain(unittest.TestCase):
	def setUp(self):
		self.folder = tempfile.TemporaryDirectory()
		self.addCleanup(self.folder.cleanup)

	def path(self, name, content=None):
		path = os.path.join(self.folder.name, name)
		if content is not None:
			with open(path, 'w', encoding='utf-8') as fh: fh.write(content)
		return path

	def run_main(self, argv, stdin=''):
		out, err = io.StringIO(), io.StringIO()
		with mock.patch('sys.stdin', io.StringIO(stdin)), contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
			status = main(parse_arguments(argv))
		return status, out.getvalue(), err.getvalue()

	def test_00_stdin_to_stdout(self):
		status, out, err = self.run_main(['-l', '6'], stdin='#6(#6(+))')
		self.assertEqual(0, status)
		self.assertEqual('++++++\n' * 6, out)
		self.assertEqual('', err)

	def test_01_no_newline(self):
		status, out, err = self.run_main(['-b', '-n'], stdin='$z([-]) $p(.z) #3+p')
		self.assertEqual((0, '+++.[-]'), (status, out))

	def test_02_files(self):
		source = self.path('prog.bfup', '#3+')
		target = self.path('prog.bf')
		status, out, err = self.run_main([source, '-o', target])
		self.assertEqual((0, ''), (status, out))
		with open(target, encoding='utf-8') as fh: self.assertEqual('+++\n', fh.read())

	def test_03_config_file(self):
		conf = self.path('conf.json', '{"operators": "ab", "multiply_prefix": "*", "output_width": 2}')
		status, out, err = self.run_main(['-C', conf], stdin='*3a b')
		self.assertEqual((0, 'aa\nab\n'), (status, out))

	def test_04_parse_error(self):
		source = self.path('bad.bfup', '++\n(+')
		status, out, err = self.run_main([source])
		self.assertEqual((1, ''), (status, out))
		self.assertIn('bad.bfup: line 2, column 1:', err)

	def test_05_missing_input(self):
		status, out, err = self.run_main([self.path('nope.bfup')])
		self.assertEqual(1, status)
		self.assertIn("error: failed to open", err)

	def test_06_bad_config(self):
		conf = self.path('conf.json', '{"escape": "too long"}')
		status, out, err = self.run_main(['-C', conf])
		self.assertEqual(1, status)
		self.assertIn("invalid configuration: escape prefix", err)

	def test_07_license(self):
		status, out, err = self.run_main(['-L'])
		self.assertEqual(0, status)
		self.assertIn('GNU General Public License', out)

	def test_08_overlap_warning(self):
		with warnings.catch_warnings(record=True) as caught:
			warnings.simplefilter('always')
			status, out, err = self.run_main(['-n', '-m', '('], stdin='+')
		self.assertEqual((0, '+\n'), (status, out))
		self.assertEqual(1, len(caught))

	def test_09_verbose(self):
		try: status, out, err = self.run_main(['-v'], stdin='$a+aa')
		finally: runtime.VERBOSE = False
		self.assertEqual((0, '++\n'), (status, out))
		self.assertIn('wrote 2 operators', err)

	def test_10_non_string_operators(self):
		conf = self.path('conf.json', '{"operators": 5}')
		status, out, err = self.run_main(['-C', conf, os.devnull])
		self.assertEqual((1, ''), (status, out))
		self.assertIn("invalid configuration: operators must be a string", err)

	def test_11_carriage_returns_are_kept(self):
		source = self.path('cr.bfup')
		with open(source, 'wb') as fh: fh.write(b'$\r+\n\r')
		status, out, err = self.run_main(['-n', '-b', source])
		self.assertEqual((0, '+'), (status, out))

	def test_12_output_too_long(self):
		status, out, err = self.run_main(['-n'], stdin='#9223372036854775807+')
		self.assertEqual((1, ''), (status, out))
		self.assertIn('column 1:', err)


if __name__ == '__main__':
	unittest.main()
