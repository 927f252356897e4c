import unittest, io, contextlib
from bfup import runtime, interface
from bfup.config import Config


class TestPreprocess(unittest.TestCase):
	def test_00_end_to_end(self):
		config = Config.build(output_width=0)
		self.assertEqual('+++.[-]', runtime.preprocess('$z([-]) $p(.z) #3+p', config))

	def test_01_default_width_is_32(self):
		self.assertEqual('+' * 32 + '\n' + '+' * 8, runtime.preprocess('#40+'))

	def test_02_width_override(self):
		self.assertEqual('\n'.join(['++++++'] * 6), runtime.preprocess('#6(#6(+))', width=6))

	def test_03_error_means_no_output(self):
		with self.assertRaises(interface.UnterminatedGroup): runtime.preprocess('++++(')

class Quiet(runtime.Preprocessor):
	def __init__(self, *args, **kwargs):
		super().__init__(*args, **kwargs)
		self.logged = []
	def log_error(self, *parts):
		self.logged.append(' '.join(map(str, parts)))

class TestPreprocessor(unittest.TestCase):
	def test_00_success(self):
		p = Quiet(Config.build(output_width=3))
		self.assertEqual('+++\n++', p.preprocess('#5+'))
		self.assertEqual([], p.logged)

	def test_01_error_is_reported_then_raised(self):
		p = Quiet()
		with self.assertRaises(interface.MissingCount) as cm: p.preprocess('++\n+#x', filename='demo.bf')
		self.assertEqual(4, cm.exception.offset)
		self.assertEqual(1, len(p.logged))
		self.assertTrue(p.logged[0].startswith("demo.bf: line 2, column 2: number prefix '#'"))

	def test_02_independent_documents(self):
		p = Quiet(Config.build(output_width=0))
		self.assertEqual('-', p.preprocess('$+-+'))
		self.assertEqual('+', p.preprocess('+'))

	def test_03_depth_limit(self):
		p = Quiet(max_depth=2)
		with self.assertRaises(interface.StackLimitExceeded): p.preprocess('(((+)))')

	def test_04_verbose(self):
		p = Quiet(Config.build(output_width=0))
		runtime.VERBOSE = True
		try: p.preprocess('$a(++) aa')
		finally: runtime.VERBOSE = False
		self.assertEqual("Read 9 characters; wrote 4 operators in 1 row(s).", p.logged[0])
		self.assertIn("macro 'a' expands to 2 operator(s)", p.logged[1])

	def test_05_default_log_goes_to_stderr(self):
		buffer = io.StringIO()
		with contextlib.redirect_stderr(buffer):
			with self.assertRaises(interface.UnterminatedGroup): runtime.Preprocessor().preprocess('(')
		self.assertIn("At line 1, column 1: expected ')' to close this group", buffer.getvalue())


if __name__ == '__main__':
	unittest.main()
