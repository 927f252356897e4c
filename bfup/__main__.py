"""
Preprocess a document written for a brainfuck-like language: expand its macros,
repetitions and groups into plain operators, and lay the result out in a rectangle.

  Syntax summary (default characters):
	#N tok     repeat the token N times
	( ... )    group several tokens into one
	$c tok     define the character c as a macro standing for the token
	\\c         the character c, literally
  Every character that is not an operator, a directive or a macro is ignored.
"""

import sys, argparse

from bfup import config, runtime, __version__ as VERSION
from bfup.interface import ConfigError, ParseError

LICENSE = """This is free software. You may redistribute copies of it under the terms of
the GNU General Public License <https://www.gnu.org/licenses/gpl.html>.
There is NO WARRANTY, to the extent permitted by law."""

ROLE_FLAGS = ('operators', 'number_prefix', 'macro_prefix', 'escape_prefix', 'group_start_delimiter', 'group_end_delimiter')

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='bfup', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('input', nargs='?', metavar='FILE', help='file to preprocess (default: stdin)')
	parser.add_argument('-o', '--output', metavar='FILE', help='write the result here instead of stdout')
	parser.add_argument('-C', '--config-file', metavar='FILE', help='read the preprocessor configuration from a JSON file')
	parser.add_argument('-+', '--operators', help='recognized operators (default: %r)'%config.DEFAULT_OPERATORS)
	parser.add_argument('-#', '--number-prefix', metavar='CHAR', help='multiplier prefix (default: %r)'%config.DEFAULT_MULTIPLY_PREFIX)
	parser.add_argument('-m', '--macro-prefix', metavar='CHAR', help='macro definition prefix (default: %r)'%config.DEFAULT_DEFINE_PREFIX)
	parser.add_argument('-e', '--escape-prefix', metavar='CHAR', help='escape prefix (default: %r)'%config.DEFAULT_ESCAPE)
	parser.add_argument('--group-start-delimiter', metavar='CHAR', help='(default: %r)'%config.DEFAULT_GROUP_OPEN)
	parser.add_argument('--group-end-delimiter', metavar='CHAR', help='(default: %r)'%config.DEFAULT_GROUP_CLOSE)
	parser.add_argument('-n', '--no-align', action='store_true', help='do not align the output in a rectangle')
	parser.add_argument('-b', '--no-newline', action='store_true', help='do not append a newline at the end')
	parser.add_argument('-l', '--line-width', type=int, metavar='WIDTH', help='maximum line width (default: %d)'%config.DEFAULT_OUTPUT_WIDTH)
	parser.add_argument('-L', '--license', action='store_true', help='print the license and exit')
	parser.add_argument('-v', '--verbose', action='store_true', help='report some statistics on stderr')
	parser.add_argument('--version', action='version', version='%(prog)s '+VERSION)
	args = parser.parse_args(argv)
	if args.config_file is not None:
		clash = [flag for flag in ROLE_FLAGS if getattr(args, flag) is not None]
		if clash: parser.error('--config-file cannot be combined with --%s'%clash[0].replace('_', '-'))
	if args.no_align and args.line_width is not None:
		parser.error('--no-align cannot be combined with --line-width')
	if args.line_width is not None and args.line_width < 0:
		parser.error('--line-width must not be negative')
	return args

def make_config(args) -> config.Config:
	if args.config_file is not None:
		found = config.Config.load(args.config_file)
	else:
		given = {
			'operators': args.operators,
			'multiply_prefix': args.number_prefix,
			'define_prefix': args.macro_prefix,
			'escape': args.escape_prefix,
			'group_open': args.group_start_delimiter,
			'group_close': args.group_end_delimiter,
		}
		found = config.Config.build(**{k:v for k,v in given.items() if v is not None})
	if args.no_align: return found.with_width(0)
	if args.line_width is not None: return found.with_width(args.line_width)
	return found

def fail(message):
	print('error: '+message, file=sys.stderr)
	return 1

def main(args) -> int:
	if args.license:
		print('bfup %s\n\n%s'%(VERSION, LICENSE))
		return 0
	if args.verbose: runtime.VERBOSE = True
	try: the_config = make_config(args)
	except OSError as e: return fail("failed to open config '%s': %s"%(args.config_file, e.strerror))
	except ConfigError as e: return fail("invalid configuration: %s"%e.args[0])
	the_config.warn_overlaps()
	try:
		if args.input is None: document = sys.stdin.read()
		else:
			with open(args.input, encoding='utf-8', newline='') as fh: document = fh.read()
	except OSError as e: return fail("failed to open '%s': %s"%(args.input, e.strerror))
	except UnicodeDecodeError as e: return fail("failed to decode '%s': %s"%(args.input, e.reason))
	try: result = runtime.Preprocessor(the_config).preprocess(document, filename=args.input)
	except ParseError: return 1
	if not args.no_newline: result += '\n'
	if args.output is None: sys.stdout.write(result)
	else:
		try:
			with open(args.output, 'w', encoding='utf-8', newline='') as fh: fh.write(result)
		except OSError as e: return fail("failed to open '%s': %s"%(args.output, e.strerror))
	return 0

def entry():
	sys.exit(main(parse_arguments()))

if __name__ == '__main__': entry()
