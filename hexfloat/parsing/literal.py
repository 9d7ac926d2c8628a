"""
Parse hexadecimal floating constants, as in C11 section 6.4.4.2, into a normalized Literal.

The grammar is small enough that a hand-written, single-pass recognizer is the natural
tool: an optional sign, a `0x` or `0X` prefix, hex digits with an optional radix point
somewhere among them, and an optional binary exponent introduced by `p` or `P`.
There is no backtracking: each step looks at one character and either takes it or leaves it.

Two departures from C are deliberate:
	* An exponent is not required. (`0x1.2` is fine.)
	* The floating-suffix is not parsed. (`0x1p4l` is not a literal here.)

And one thing is configurable: how much the exponent is worth. C says `p4` means
"times two to the fourth". Some dialects say "times sixteen to the fourth", which keeps
the exponent in the same units as the digits. The Literal records which convention it
was read under (see `exponent_scale`) so the converter cannot get it wrong.

There are two ways to run the parser:
	`parse` wants the whole input to be one literal, and complains about leftovers.
	`parse_prefix` reads one literal from the front and tells you how far it got, which
	is what you want when the literal is embedded in a larger token stream.
"""
from typing import NamedTuple

from ..support.interfaces import ParseError, ParseErrorKind
from ..scanning.cursor import CursorBase, make_cursor
from ..scanning import charset
from ..conversion import converter, formats

INT32_MIN, INT32_MAX = -(1 << 31), (1 << 31) - 1

EXPONENT_SCALE = {16: 4, 2: 1} # Bits of magnitude per unit of explicit exponent, by exponent base.

PLUS, MINUS, ZERO = ord('+'), ord('-'), ord('0')


class ParseOptions(NamedTuple):
	"""
	decimal_separator: the single character that serves as the radix point.
	exponent_base: 16 (the default) or 2 (as in C).
	embedded: if true, trailing input after a complete literal is left alone
		instead of being reported as EXTRA_DATA.
	"""
	decimal_separator: str = '.'
	exponent_base: int = 16
	embedded: bool = False

	def check(self):
		if not (isinstance(self.decimal_separator, str) and len(self.decimal_separator) == 1):
			raise ValueError("decimal separator must be a single character", self.decimal_separator)
		if charset.in_class(charset.XDIGIT, ord(self.decimal_separator)):
			raise ValueError("decimal separator cannot be a hex digit", self.decimal_separator)
		if self.exponent_base not in EXPONENT_SCALE:
			raise ValueError("exponent base must be 16 or 2", self.exponent_base)
		return self

DEFAULT = ParseOptions()
EMBEDDED = ParseOptions(embedded=True)
C11 = ParseOptions(exponent_base=2)


class Literal(NamedTuple):
	"""
	The parsed, normalized form of a literal.

	The magnitude is `digits` (read as one hexadecimal integer) times
	16 ** (decimal_offset - len(digits)) times 2 ** (exponent * exponent_scale).
	Leading and trailing zero digits are always trimmed, so `digits` is either
	empty (the value is a signed zero) or starts and ends with a non-zero digit.
	"""
	is_positive: bool
	digits: tuple
	decimal_offset: int
	exponent: int = 0
	exponent_scale: int = 4

	def is_zero(self) -> bool: return not self.digits

	def convert(self, fmt=formats.BINARY64):
		""" Convert to a float format (binary64 if not specified); returns a ConversionResult. """
		return converter.convert(self, fmt)


def normalize(is_positive:bool, ipart, fpart, exponent:int=0, exponent_scale:int=4) -> Literal:
	""" Trim zeros from both ends of the combined digits, and adjust the radix point to suit. """
	raw_digits = list(ipart) + list(fpart)
	nonzero = [i for i, d in enumerate(raw_digits) if d]
	if not nonzero:
		return Literal(is_positive, (), 0, exponent, exponent_scale)
	first, last = nonzero[0], nonzero[-1]
	return Literal(is_positive, tuple(raw_digits[first:last+1]), len(ipart) - first, exponent, exponent_scale)


def scan_literal(cursor:CursorBase, options:ParseOptions=DEFAULT) -> Literal:
	"""
	Drive the cursor through one literal. The cursor is left on the first character
	which is not part of the literal. Trailing input is the caller's concern.
	"""
	is_positive = cursor.current() != MINUS
	cursor.accept(PLUS, MINUS)

	prefix_at = cursor.consumed
	if not (cursor.accept(ZERO) and cursor.accept(ord('x'), ord('X'))):
		raise ParseError(ParseErrorKind.MISSING_PREFIX, prefix_at)

	ipart = cursor.consume_hex_run()
	if cursor.accept(ord(options.decimal_separator)): fpart = cursor.consume_hex_run()
	else: fpart = []
	if not (ipart or fpart):
		raise ParseError(ParseErrorKind.MISSING_DIGITS, cursor.consumed)

	if cursor.accept(ord('p'), ord('P')): exponent = _scan_exponent(cursor)
	else: exponent = 0

	return normalize(is_positive, ipart, fpart, exponent, EXPONENT_SCALE[options.exponent_base])

def _scan_exponent(cursor:CursorBase) -> int:
	run_at = cursor.consumed
	is_negative = cursor.current() == MINUS
	cursor.accept(PLUS, MINUS)
	digits_at = cursor.consumed
	text = cursor.consume_decimal_run()
	if not text:
		raise ParseError(ParseErrorKind.MISSING_EXPONENT, digits_at)
	# More than ten significant digits cannot fit. Checking that first also keeps
	# absurdly long runs away from int(), which limits how many digits it will convert.
	significant = text.lstrip('0') or '0'
	exponent = int(significant) if len(significant) <= 10 else INT32_MAX + 2
	if is_negative: exponent = -exponent
	if not INT32_MIN <= exponent <= INT32_MAX:
		raise ParseError(ParseErrorKind.EXPONENT_OVERFLOW, run_at)
	return exponent


def parse(text, options:ParseOptions=DEFAULT) -> Literal:
	"""
	Parse `text` (str, bytes or bytearray) as exactly one literal.
	Raises ParseError on failure. If `options.embedded` is set, trailing input
	is ignored; use `parse_prefix` if you need to know where the literal ended.
	"""
	options.check()
	cursor = make_cursor(text)
	literal = scan_literal(cursor, options)
	if not (options.embedded or cursor.is_exhausted()):
		raise ParseError(ParseErrorKind.EXTRA_DATA, cursor.consumed)
	return literal

def parse_prefix(text, decimal_separator:str='.', *, exponent_base:int=16) -> tuple[Literal, int]:
	"""
	Parse one literal from the front of `text` and return it with the number of
	characters it occupied. Whatever follows is left for the caller; EXTRA_DATA is
	never reported. On failure, ParseError.index says where the trouble was.
	"""
	options = ParseOptions(decimal_separator, exponent_base, embedded=True).check()
	cursor = make_cursor(text)
	start = cursor.consumed
	literal = scan_literal(cursor, options)
	return literal, cursor.consumed - start
