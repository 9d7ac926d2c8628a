"""
This file aggregates the abstract classes and exception types which hexfloat deals in.

Parsing errors are values with a kind and a position. The position is an offset into
whatever text (or bytes) you handed the parser, so you can point at the problem later.
Conversion never fails: it only tells you whether it was exact. If you would rather
have a fuss made about that, the runtime module can warn or raise on your behalf.

The `FloatFormat` class is the one place that knows about a particular bit layout.
The conversion algorithm asks it a handful of questions and otherwise works
identically for every width.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum

from .failureprone import SourceText

END_OF_INPUT = -1 # Used in place of a character ordinal when the cursor runs off the end.

class LiteralError(ValueError):
	""" Base class of all exceptions arising from the literal machinery. """

class ParseErrorKind(Enum):
	MISSING_PREFIX = "literal must have hex prefix"
	MISSING_DIGITS = "literal must have digits"
	MISSING_EXPONENT = "exponent not present"
	EXPONENT_OVERFLOW = "exponent too large to fit in integer"
	EXTRA_DATA = "extra bytes were found at the end of float literal"

class ParseError(LiteralError):
	"""
	Raised when text does not spell a hexadecimal floating constant.
	Parameters are:
		the kind of problem, a member of ParseErrorKind;
		the (approximate) offset where it happened. When something expected
		was simply absent, that is the length of the input.
	"""
	def __init__(self, kind:ParseErrorKind, index:int):
		super().__init__(kind, index)
		self.kind, self.index = kind, index

	def __str__(self): return "%s (at offset %d)"%(self.kind.value, self.index)

	def describe(self, text, filename:str=None) -> str:
		""" Render this error as a message with the offending text underlined. """
		if isinstance(text, (bytes, bytearray)): text = text.decode('latin-1')
		return SourceText(text, filename=filename).complaint(slice(self.index, self.index+1), self.kind.value)

class PrecisionLoss(LiteralError):
	""" Raised on request when a conversion had to discard information. The best-effort result rides along. """
	def __init__(self, text, result):
		super().__init__(text, result)
		self.text, self.result = text, result

	def __str__(self): return "%r cannot be represented exactly; nearest effort is %r"%(self.text, self.result.value)

class PrecisionWarning(UserWarning):
	""" Category for the warning issued when a conversion had to discard information. """


class FloatFormat(ABC):
	"""
	Describe an IEEE-754 style binary interchange layout: a sign bit, then a biased
	exponent field, then the stored (fractional) part of a normalized significand.

	Subclasses supply the two field widths and a way to turn a bit pattern into a
	value. Everything else is derived, following the conventions of <float.h>:
	min_exp and max_exp are one more than the smallest and largest unbiased exponents
	of a normal number.
	"""

	name: str
	exponent_bits: int
	mantissa_bits: int

	@abstractmethod
	def from_bits(self, bits:int):
		""" Reinterpret an unsigned integer of `total_bits` width as a value of this format. """

	def to_bits(self, value) -> int:
		"""
		The inverse of from_bits, worked out with frexp for any format whose values are
		Python floats. Subnormals are encoded too, since from_bits may produce them.
		Override this if there is a more direct way, as with the struct module.
		"""
		if math.isnan(value): raise ValueError("NaN has no one bit pattern", value)
		bits = self.sign_bit(math.copysign(1.0, value) < 0)
		magnitude = abs(value)
		if math.isinf(magnitude): return bits | ((1 << self.exponent_bits) - 1) << self.mantissa_bits
		if not magnitude: return bits
		fraction, exponent = math.frexp(magnitude) # 0.5 <= fraction < 1
		biased = exponent - 1 + self.bias
		if biased > 0: return bits | biased << self.mantissa_bits | int(math.ldexp(2 * fraction - 1, self.mantissa_bits))
		return bits | int(math.ldexp(magnitude, self.mantissa_bits - self.min_exp + 1))

	@property
	def total_bits(self) -> int: return 1 + self.exponent_bits + self.mantissa_bits

	@property
	def bias(self) -> int: return (1 << (self.exponent_bits - 1)) - 1

	@property
	def min_exp(self) -> int: return 2 - self.bias

	@property
	def max_exp(self) -> int: return self.bias + 1

	@property
	def register_bits(self) -> int:
		""" Width of the working integer: total bits rounded up to a power of two, like a machine register. """
		return max(8, 1 << (self.total_bits - 1).bit_length())

	@property
	def infinity(self): return self.signed_infinity(False)

	def sign_bit(self, is_negative:bool) -> int:
		return int(is_negative) << (self.exponent_bits + self.mantissa_bits)

	def signed_zero(self, is_negative:bool): return self.from_bits(self.sign_bit(is_negative))

	def signed_infinity(self, is_negative:bool):
		all_ones = (1 << self.exponent_bits) - 1
		return self.from_bits(self.sign_bit(is_negative) | all_ones << self.mantissa_bits)

	def __repr__(self): return "<%s E=%d M=%d>"%(self.name, self.exponent_bits, self.mantissa_bits)
