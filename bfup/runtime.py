"""
A convenient runtime interface to the most common use case: text in, rectangle out.

The `preprocess` function is all most callers need. The `Preprocessor` class does the
same job but also takes responsibility for telling a human what went wrong, which is
what the command-line tool wants.
"""

import sys

from . import expander, rectangle, diagnostics, interface
from .config import Config, DEFAULT
from .tokens import length

VERBOSE = False

def preprocess(text:str, config:Config=DEFAULT, *, width:int=None, max_depth:int=expander.DEFAULT_MAX_DEPTH) -> str:
	"""
	Expand the text and lay it out at the configured width (or at `width`, if given).
	Raises some `interface.ParseError` if the text is malformed.
	"""
	if width is None: width = config.output_width
	return rectangle.rectangle(expander.expand(text, config, max_depth=max_depth), width)

class Preprocessor:
	"""
	Holds one configuration and applies it to as many documents as you like.
	Nothing about one document is remembered when processing the next.
	"""

	def __init__(self, config:Config=DEFAULT, *, max_depth:int=expander.DEFAULT_MAX_DEPTH):
		self.config = config
		self.max_depth = max_depth

	source: diagnostics.SourceText

	def preprocess(self, text:str, *, filename:str=None) -> str:
		self.source = diagnostics.SourceText(text, filename=filename)
		pass_ = expander.Expander(text, self.config, max_depth=self.max_depth)
		try: flat = pass_.expand()
		except interface.ParseError as ex:
			self.parse_error(ex)
			raise
		result = rectangle.rectangle(flat, self.config.output_width)
		if VERBOSE: self.report(pass_, flat)
		return result

	@staticmethod
	def log_error(*parts):
		""" Simple place to override if you'd rather use a logging framework. """
		print(*parts, file=sys.stderr)

	def parse_error(self, ex:interface.ParseError):
		self.log_error(self.source.complaint(ex.offset, diagnostics.describe(ex, self.config)))

	def report(self, pass_:expander.Expander, flat:str):
		self.log_error("Read %d characters; wrote %d operators in %d row(s)."%(
			len(self.source.content), len(flat), len(rectangle.rows(flat, self.config.output_width)),
		))
		for name, token in pass_.macros.items():
			self.log_error("\tmacro %r expands to %d operator(s)"%(name, length(token)))
