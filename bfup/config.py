"""
The preprocessor's configuration: which characters are operators, which characters play
the directive roles, and how wide the output rectangle should be.

A Config is built once, before a pass begins, and handed explicitly to the expander.
It is an immutable value. Roles may overlap with one another or with the operator set;
that is legal, and the expander resolves it by a fixed precedence. Since an overlap is
usually a mistake in a hand-written configuration, `overlaps()` will point them out.

Configurations may also be read from a JSON object whose keys are the field names.
"""

import json, warnings
from typing import NamedTuple

from .interface import ConfigError

DEFAULT_OPERATORS = '+-<>[].,'
DEFAULT_GROUP_OPEN = '('
DEFAULT_GROUP_CLOSE = ')'
DEFAULT_MULTIPLY_PREFIX = '#'
DEFAULT_DEFINE_PREFIX = '$'
DEFAULT_ESCAPE = '\\'
DEFAULT_OUTPUT_WIDTH = 32

# In order of precedence, as the expander checks them.
ROLES = ('escape', 'group_open', 'group_close', 'multiply_prefix', 'define_prefix')

ROLE_NAMES = {
	'operator': "operator",
	'group_open': "group start delimiter",
	'group_close': "group end delimiter",
	'multiply_prefix': "number prefix",
	'define_prefix': "macro prefix",
	'escape': "escape prefix",
}

class Config(NamedTuple):
	operators: frozenset = frozenset(DEFAULT_OPERATORS)
	group_open: str = DEFAULT_GROUP_OPEN
	group_close: str = DEFAULT_GROUP_CLOSE
	multiply_prefix: str = DEFAULT_MULTIPLY_PREFIX
	define_prefix: str = DEFAULT_DEFINE_PREFIX
	escape: str = DEFAULT_ESCAPE
	output_width: int = DEFAULT_OUTPUT_WIDTH

	@classmethod
	def build(cls, operators=DEFAULT_OPERATORS, **kwargs) -> "Config":
		"""
		Validating constructor. Accepts the operators as any iterable of characters
		(typically a string) and checks that each role is exactly one character.
		"""
		unknown = kwargs.keys() - cls._fields
		if unknown: raise ConfigError("unknown configuration field(s): %s"%", ".join(sorted(unknown)))
		if not isinstance(operators, (str, list, tuple, set, frozenset)):
			raise ConfigError("operators must be a string of characters, not %r"%(operators,))
		operators = frozenset(operators)
		for c in operators:
			if not (isinstance(c, str) and len(c) == 1): raise ConfigError("operator %r must be a single character"%(c,))
		for role in ROLES:
			if role in kwargs:
				value = kwargs[role]
				if not (isinstance(value, str) and len(value) == 1):
					raise ConfigError("%s must be a single character, not %r"%(ROLE_NAMES[role], value))
		width = kwargs.get('output_width', DEFAULT_OUTPUT_WIDTH)
		if isinstance(width, bool) or not isinstance(width, int) or width < 0:
			raise ConfigError("output width must be a non-negative integer, not %r"%(width,))
		return cls(operators=operators, **kwargs)

	@classmethod
	def from_json(cls, text:str) -> "Config":
		try: data = json.loads(text)
		except json.JSONDecodeError as e:
			raise ConfigError("[%d:%d]: %s"%(e.lineno, e.colno, e.msg)) from None
		if not isinstance(data, dict): raise ConfigError("configuration must be a JSON object")
		return cls.build(**data)

	@classmethod
	def load(cls, path) -> "Config":
		with open(path, encoding='utf-8') as fh: return cls.from_json(fh.read())

	def with_width(self, width:int) -> "Config":
		return self.build(**{**self._asdict(), 'output_width': width})

	def roles_of(self, c:str) -> list[str]:
		""" Every role the character plays, in order of precedence. Operator comes last. """
		found = [role for role in ROLES if getattr(self, role) == c]
		if c in self.operators: found.append('operator')
		return found

	def overlaps(self) -> dict[str, list[str]]:
		""" Characters that play more than one role, mapped to those roles. """
		candidates = {getattr(self, role) for role in ROLES}
		return {c: roles for c in sorted(candidates) for roles in [self.roles_of(c)] if len(roles) > 1}

	def warn_overlaps(self):
		for c, roles in self.overlaps().items():
			warnings.warn("%r is configured as %s; only the %s role will apply"%(
				c, " and ".join(ROLE_NAMES[r] for r in roles), ROLE_NAMES[roles[0]],
			))

DEFAULT = Config()
