"""
This file aggregates the exception types which bfup deals in.

Every problem with a document is structural: it is a deterministic function of the text
and the configuration, and it is fatal to the whole document. Consequently there are no
warnings and no partial results here. The expander raises the first problem it finds and
stops. Each exception carries the string offset where the malformed construct began;
converting that to a line and column is the job of `diagnostics.SourceText`.
"""

from typing import Optional

class ConfigError(ValueError):
	""" Raised when a configuration cannot be built from what was supplied. """

class ParseError(ValueError):
	"""
	Base class of all exceptions arising from a malformed document.
	Parameters are:
		the string offset where the offending construct began.
	"""
	def __init__(self, offset:int):
		super().__init__(offset)
		self.offset = offset

	@property
	def kind(self) -> str:
		""" The variant name, which is just the class name. """
		return type(self).__name__

class UnterminatedGroup(ParseError):
	""" A group-open was never matched by a group-close. """

class UnopenedGroup(ParseError):
	""" A group-close appeared while no group was open. """

class UnterminatedEscape(ParseError):
	""" The escape character was the very last thing in the document. """

class UnterminatedDefine(ParseError):
	""" A definition ran out of document before it had both a name and a body. """

class MissingCount(ParseError):
	""" A multiply-prefix was not followed by any decimal digits. """

class UnterminatedMultiply(ParseError):
	""" A multiply-prefix and its count were not followed by anything to repeat. """

class CountOverflow(ParseError):
	"""
	The repetition count does not fit the supported integer width, or (when `literal`
	is None) the expansion would be longer than any string the interpreter can hold.
	"""
	def __init__(self, offset:int, literal:Optional[str]):
		super().__init__(offset)
		self.literal = literal

class StackLimitExceeded(ParseError):
	""" Constructs were nested more deeply than the expander is prepared to follow. """
	def __init__(self, offset:int, limit:int):
		super().__init__(offset)
		self.limit = limit
