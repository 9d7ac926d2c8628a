"""
A convenient runtime interface to the most common use cases.

Most callers just want a float from some text, and have an opinion about what should
happen if the float cannot be exact. `to_float` does the parse and conversion together
and applies that opinion: ignore the loss, warn about it, or raise.

`scan_all` is the stream-embedded parser put to work: it pulls every literal out of a
list of them separated by blanks or commas, reporting where each one sat.
"""
import warnings

from .support.interfaces import ParseError, ParseErrorKind, PrecisionLoss, PrecisionWarning, FloatFormat
from .parsing import literal
from .scanning.cursor import make_cursor
from .conversion import converter, formats

PRECISION_POLICIES = ('ignore', 'warn', 'raise')
SEPARATORS = frozenset(map(ord, ' \t\r\n,'))


def to_float(text, fmt:FloatFormat=formats.BINARY64, *, precision='ignore', options:literal.ParseOptions=literal.DEFAULT):
	"""
	Parse and convert in one step, returning just the value.
	precision: 'ignore' (the default) returns the best-effort value regardless;
	'warn' issues a PrecisionWarning if it is not exact; 'raise' raises PrecisionLoss instead.
	"""
	if precision not in PRECISION_POLICIES: raise ValueError("precision policy must be one of %r"%(PRECISION_POLICIES,), precision)
	result = literal.parse(text, options).convert(fmt)
	if not result.is_precise:
		if precision == 'raise': raise PrecisionLoss(text, result)
		if precision == 'warn': warnings.warn("%r cannot be represented exactly in %s"%(text, fmt.name), PrecisionWarning, stacklevel=2)
	return result.value


def scan_all(text, fmt:FloatFormat=formats.BINARY64, decimal_separator:str='.', *, exponent_base:int=16) -> list[tuple[int, int, converter.ConversionResult]]:
	"""
	Convert each literal in a blank- or comma-separated list.
	Returns (start, stop, result) triples, where text[start:stop] is the literal.
	A literal that runs into anything other than a separator is an EXTRA_DATA error.
	"""
	cursor = make_cursor(text)
	found = []
	while True:
		while cursor.current() in SEPARATORS: cursor.advance()
		if cursor.is_exhausted(): return found
		start = cursor.consumed
		item, size = literal.parse_prefix(cursor, decimal_separator, exponent_base=exponent_base)
		if not (cursor.is_exhausted() or cursor.current() in SEPARATORS):
			raise ParseError(ParseErrorKind.EXTRA_DATA, cursor.consumed)
		found.append((start, start+size, item.convert(fmt)))
