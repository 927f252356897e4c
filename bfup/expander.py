"""
The expander reads a document once, left to right, and turns it into tokens.

At each step, the character under the cursor is classified by a fixed precedence:

	escape > group-open > group-close > multiply-prefix > define-prefix
		> bound macro name > operator > noise

The first role that matches wins, so a character that is both (say) the multiply-prefix
and a macro name is always the multiply-prefix. Macro names are only looked up after all
the directive roles, and before the operator set: a macro named by an operator character
hides that operator until the end of the document.

Definitions are eager. The body of a macro is parsed, with every macro use inside it
already substituted, at the moment of definition. The resulting token is a plain value;
rebinding the name later affects only later uses.

Nesting (of groups, repetitions and definitions) is followed by ordinary recursion, up to
a fixed depth. Past that depth the expander raises `StackLimitExceeded` rather than
letting the interpreter run out of stack in some less predictable place.
"""

import sys
from typing import Iterator, Optional

from . import interface
from .config import Config, DEFAULT
from .tokens import Token, Char, Group, Repeat, render, length

DEFAULT_MAX_DEPTH = 150
MAX_COUNT = sys.maxsize # Repetition counts are native index-sized integers.

_CLOSE = object() # What parse_token(closable=True) returns upon consuming a group-close.

class Expander:
	"""
	One pass over one document. The macro table and the cursor live here, and
	nowhere else, so nothing carries over from one document to the next.
	"""

	def __init__(self, text:str, config:Config=DEFAULT, *, max_depth:int=DEFAULT_MAX_DEPTH):
		self.__text = text
		self.__size = len(text)
		self.__config = config
		self.__max_depth = max_depth
		self.__depth = 0
		self.__frontier = self.__reached = self.__start = 0
		self.macros : dict[str, Token] = {}
		self.cursor = 0

	def has_more(self) -> bool:
		return self.cursor < self.__size

	def __iter__(self) -> Iterator[Token]:
		""" Yield each top-level token in turn. Definitions and noise yield nothing. """
		while self.has_more():
			self.__start = self.cursor
			try: token = self.parse_token()
			except RecursionError:
				raise interface.StackLimitExceeded(self.__frontier, self.__reached) from None
			if token is not None: yield token

	def expand(self) -> str:
		"""
		The whole output has to fit in one string. Its length is tallied over the entire
		document before anything is rendered, and the top-level token that would push it
		past the interpreter's limit is reported as a CountOverflow.
		"""
		tokens, total = [], 0
		for token in self:
			total += length(token)
			if total >= sys.maxsize: raise interface.CountOverflow(self.__start, None)
			tokens.append(token)
		return ''.join(map(render, tokens))

	def parse_token(self, *, closable=False) -> Optional[Token]:
		"""
		Consume one construct starting at the cursor, and return the token it stands for.
		Returns None for noise and for definitions. If `closable` is set, a group-close
		is consumed and reported as the _CLOSE marker; otherwise it is an error.
		"""
		config = self.__config
		start = self.cursor
		c = self.__text[start]
		self.cursor = start + 1
		if c == config.escape: return self.__escape(start)
		if c == config.group_open: return self.__group(start)
		if c == config.group_close:
			if closable: return _CLOSE
			raise interface.UnopenedGroup(start)
		if c == config.multiply_prefix: return self.__multiply(start)
		if c == config.define_prefix: return self.__define(start)
		if c in self.macros: return self.macros[c]
		if c in config.operators: return Char(c)
		return None

	def __escape(self, start) -> Token:
		if not self.has_more(): raise interface.UnterminatedEscape(start)
		c = self.__text[self.cursor]
		self.cursor += 1
		return Char(c)

	def __enter(self, start):
		if self.__depth >= self.__max_depth:
			raise interface.StackLimitExceeded(start, self.__max_depth)
		self.__depth += 1
		self.__frontier, self.__reached = start, self.__depth

	def __group(self, start) -> Token:
		self.__enter(start)
		try:
			items = []
			while self.has_more():
				token = self.parse_token(closable=True)
				if token is _CLOSE: return Group(tuple(items))
				if token is not None: items.append(token)
			raise interface.UnterminatedGroup(start)
		finally: self.__depth -= 1

	def __count(self, start) -> int:
		left = self.cursor
		while self.has_more() and '0' <= self.__text[self.cursor] <= '9': self.cursor += 1
		literal = self.__text[left:self.cursor]
		if not literal: raise interface.MissingCount(start)
		# Very long literals would trip the interpreter's own int-conversion limit.
		significant = literal.lstrip('0') or '0'
		if len(significant) > len(str(MAX_COUNT)) or int(significant) > MAX_COUNT:
			raise interface.CountOverflow(start, literal)
		return int(significant)

	def __multiply(self, start) -> Token:
		count = self.__count(start)
		self.__enter(start)
		try: return Repeat(self.__operand(start, interface.UnterminatedMultiply), count)
		finally: self.__depth -= 1

	def __define(self, start) -> None:
		if not self.has_more(): raise interface.UnterminatedDefine(start)
		name = self.__text[self.cursor]
		self.cursor += 1
		self.__enter(start)
		try: self.macros[name] = self.__operand(start, interface.UnterminatedDefine)
		finally: self.__depth -= 1

	def __operand(self, start, error) -> Token:
		"""
		Find the one token that a repetition or definition applies to.
		Noise and nested definitions along the way are passed over. Running into
		the end of the text, or into the close of an enclosing group, is an error
		that belongs to the construct which began at `start`.
		"""
		while self.has_more():
			token = self.parse_token(closable=True)
			if token is _CLOSE: break
			if token is not None: return token
		raise error(start)


def expand(text:str, config:Config=DEFAULT, *, max_depth:int=DEFAULT_MAX_DEPTH) -> str:
	"""
	Expand an entire document into its flat operator-character output.
	Raises some `interface.ParseError` upon finding the first malformed construct.
	"""
	return Expander(text, config, max_depth=max_depth).expand()
