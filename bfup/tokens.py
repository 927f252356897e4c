"""
Tokens are what the expander builds: a small algebraic data type with three constructors.

	Char(c)            one operator character, to be copied verbatim.
	Group(items)       an ordered sequence of tokens, rendered back-to-back.
	Repeat(body, n)    a token rendered n times in a row.

Tokens are immutable values. A macro binds its name to one of these, fully resolved at
definition time, so rebinding a name can never reach back and change a token that some
earlier use already produced. There are no lazy references anywhere in the tree.

Rendering walks the tree with an explicit stack rather than by recursion. The parser
limits how deeply the text may nest, but macros can build arbitrarily deep trees without
any textual nesting at all: consider a macro repeatedly redefined in terms of itself.
"""

__all__ = ['Char', 'Group', 'Repeat', 'Token', 'render', 'length']

from typing import NamedTuple, Union


class Char(NamedTuple):
	char: str

class Group(NamedTuple):
	items: tuple

class Repeat(NamedTuple):
	body: "Token"
	count: int

Token = Union[Char, Group, Repeat]


def _fold(token:Token, leaf, repeat, group):
	"""
	Post-order evaluation of a token tree without using the Python stack.
	`leaf(char)`, `repeat(value, count)` and `group(values)` supply the algebra.
	Shared subtrees (which macros produce in abundance) are evaluated once per call.
	"""
	done = {}
	stack = [token]
	while stack:
		node = stack[-1]
		if id(node) in done:
			stack.pop()
		elif isinstance(node, Char):
			done[id(node)] = leaf(node.char)
			stack.pop()
		elif isinstance(node, Repeat):
			if id(node.body) in done:
				done[id(node)] = repeat(done[id(node.body)], node.count)
				stack.pop()
			else: stack.append(node.body)
		elif isinstance(node, Group):
			pending = [item for item in node.items if id(item) not in done]
			if pending: stack.extend(reversed(pending))
			else:
				done[id(node)] = group([done[id(item)] for item in node.items])
				stack.pop()
		else: raise TypeError(node)
	return done[id(token)]

def render(token:Token) -> str:
	""" The flat operator-character output a token stands for. """
	# An empty body stays empty however large the count.
	return _fold(token, str, lambda s, n: s * n if s else s, ''.join)

def length(token:Token) -> int:
	""" Same as len(render(token)), but without building the string. """
	return _fold(token, lambda c: 1, int.__mul__, sum)
