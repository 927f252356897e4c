"""
Turning a ParseError into something a person can act on.

The expander knows only string offsets. That keeps it simple, but people think in lines
and columns, and they like to see the offending line with the trouble spot marked. The
SourceText here converts one to the other, and `describe` says in words what each kind
of error means, quoting the characters the configuration actually assigned.

Line breaks follow the usual conventions: LF, CR-LF, or a lone CR.
"""

import bisect, re

from . import interface
from .config import Config, DEFAULT

LINE_BREAK = re.compile(r'\r\n?|\n')

def illustration(single_line:str, start:int, width:int=1, *, prefix='', caption="here") -> str:
	""" The line, then a caret underneath the spot in question. Tabs line up with tabs. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^' * max(1, min(width, len(single_line.rstrip('\r\n')) - start))
	return prefix + single_line.rstrip('\r\n') + '\n' + blanks + underline + ' ' + caption

class SourceText:
	""" A document, plus the line-break table needed to locate offsets within it. """

	def __init__(self, content:str, filename:str=None):
		self.content = content
		self.filename = filename
		self.__bounds = None

	def __line_starts(self) -> list[int]:
		if self.__bounds is None:
			self.__bounds = [0] + [m.end() for m in LINE_BREAK.finditer(self.content)]
		return self.__bounds

	def find_row_col(self, offset:int) -> tuple[int, int]:
		""" One-based row, zero-based column. """
		starts = self.__line_starts()
		row = bisect.bisect_right(starts, offset) - 1
		return row + 1, offset - starts[row]

	def line_of_text(self, row:int) -> str:
		starts = self.__line_starts()
		left = starts[row - 1]
		right = starts[row] if row < len(starts) else len(self.content)
		return self.content[left:right]

	def complaint(self, offset:int, message:str) -> str:
		row, col = self.find_row_col(offset)
		where = "At" if self.filename is None else str(self.filename) + ":"
		reference = "%s line %d, column %d: %s" % (where, row, col + 1, message)
		return reference + '\n' + illustration(self.line_of_text(row), col, prefix=' >>> ')


def describe(error:interface.ParseError, config:Config=DEFAULT) -> str:
	""" A one-line explanation, in terms of the characters this configuration uses. """
	if isinstance(error, interface.UnterminatedGroup):
		return "expected %r to close this group" % config.group_close
	if isinstance(error, interface.UnopenedGroup):
		return "%r must have a preceding %r" % (config.group_close, config.group_open)
	if isinstance(error, interface.UnterminatedEscape):
		return "escape prefix %r must be followed by a character" % config.escape
	if isinstance(error, interface.UnterminatedDefine):
		return "macro prefix %r must be followed by a character and a token" % config.define_prefix
	if isinstance(error, interface.MissingCount):
		return "number prefix %r must be followed by a number" % config.multiply_prefix
	if isinstance(error, interface.UnterminatedMultiply):
		return "number prefix %r and its count must be followed by a token" % config.multiply_prefix
	if isinstance(error, interface.CountOverflow):
		if error.literal is None: return "this expands to more operators than one string can hold"
		return "repetition count %s is too large" % error.literal
	if isinstance(error, interface.StackLimitExceeded):
		return "nesting is deeper than the limit of %d" % error.limit
	return error.kind
