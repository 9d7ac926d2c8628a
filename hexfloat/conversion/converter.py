"""
Turn a Literal into a value of some floating-point format, and say whether that was exact.

There is exactly one algorithm, and it works for every FloatFormat:

	1. Pack the hex digits, most-significant first, into a working integer as wide as a
	   machine register for the format. Digits that do not fit are dropped.
	2. Find the leading 1 bit. In normalized form it is implicit, so it is shifted out,
	   and the next `mantissa_bits` bits become the stored mantissa. Anything below
	   those is dropped as well.
	3. Work out the binary exponent from the position of the radix point, the position
	   of the leading 1, and the explicit exponent.
	4. Saturate to zero or infinity if that exponent is out of range; otherwise assemble
	   the sign, biased exponent and mantissa into a bit pattern.

Dropping bits is a truncation toward zero, NOT round-to-nearest-even. A correctly
rounding parser would sometimes produce the next representable value up. The result
is tagged Imprecise whenever a non-zero bit was dropped, so the difference is never silent.

Subnormal results are not constructed: anything below the smallest normal number
collapses to a signed zero, tagged Imprecise.
"""
from ..support.interfaces import FloatFormat


class ConversionResult:
	"""
	Exactly one of two variants, Precise or Imprecise, each carrying a value.
	Precise means the value represents the literal exactly. Imprecise means it is the
	best effort available: bits were truncated, or the magnitude over/underflowed.
	"""
	__slots__ = ('value',)
	is_precise: bool

	def __init__(self, value):
		if type(self) is ConversionResult: raise TypeError("use Precise or Imprecise")
		self.value = value

	def inner(self):
		""" The value, whichever variant this is. """
		return self.value

	def __eq__(self, other):
		return type(self) is type(other) and self.value == other.value

	def __hash__(self): return hash((type(self), self.value))

	def __repr__(self): return "%s(%r)"%(type(self).__name__, self.value)

class Precise(ConversionResult):
	is_precise = True

class Imprecise(ConversionResult):
	is_precise = False


def convert(literal, fmt:FloatFormat) -> ConversionResult:
	is_negative = not literal.is_positive
	if not literal.digits:
		return Precise(fmt.signed_zero(is_negative))

	width = fmt.register_bits
	capacity = width // 4
	was_truncated = len(literal.digits) > capacity

	packed = 0
	for index, digit in enumerate(literal.digits[:capacity]):
		packed |= digit << (width - 4 * (index + 1))

	# The first digit is non-zero, so the leading 1 is somewhere in the top nibble.
	leading_zeros = width - packed.bit_length()
	exponent_offset = literal.decimal_offset * 4 - (leading_zeros + 1)
	packed = (packed << (leading_zeros + 1)) & ((1 << width) - 1)
	surplus = width - fmt.mantissa_bits
	if packed & ((1 << surplus) - 1): was_truncated = True
	mantissa = packed >> surplus

	final_exponent = exponent_offset + literal.exponent * literal.exponent_scale

	if final_exponent < fmt.min_exp - 1:
		return Imprecise(fmt.signed_zero(is_negative))
	if final_exponent > fmt.max_exp - 1:
		return Imprecise(fmt.signed_infinity(is_negative))

	bits = fmt.sign_bit(is_negative) | (final_exponent + fmt.bias) << fmt.mantissa_bits | mantissa
	value = fmt.from_bits(bits)
	return Imprecise(value) if was_truncated else Precise(value)
