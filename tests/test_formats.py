import unittest, math
from hexfloat.conversion import formats
from hexfloat.support.interfaces import FloatFormat


class TestDerivedConstants(unittest.TestCase):
	def test_00_float_h_conventions(self):
		# (format, bias, min_exp, max_exp, register_bits) with min/max_exp as in <float.h>
		for fmt, bias, min_exp, max_exp, register in [
			(formats.BINARY16, 15, -13, 16, 16),
			(formats.BFLOAT16, 127, -125, 128, 16),
			(formats.BINARY32, 127, -125, 128, 32),
			(formats.BINARY64, 1023, -1021, 1024, 64),
		]:
			with self.subTest(fmt=fmt):
				self.assertEqual(bias, fmt.bias)
				self.assertEqual(min_exp, fmt.min_exp)
				self.assertEqual(max_exp, fmt.max_exp)
				self.assertEqual(register, fmt.register_bits)

	def test_01_special_values(self):
		for fmt in (formats.BINARY16, formats.BFLOAT16, formats.BINARY32, formats.BINARY64):
			with self.subTest(fmt=fmt):
				self.assertEqual(math.inf, fmt.infinity)
				self.assertEqual(-math.inf, fmt.signed_infinity(True))
				self.assertEqual(0, fmt.to_bits(fmt.signed_zero(False)))
				self.assertEqual(1 << (fmt.total_bits - 1), fmt.to_bits(fmt.signed_zero(True)))

	def test_02_bits_round_trip(self):
		self.assertEqual(1.0, formats.BINARY32.from_bits(0x3f800000))
		self.assertEqual(0x3ff0000000000000, formats.BINARY64.to_bits(1.0))
		self.assertEqual(0x3c00, formats.BINARY16.to_bits(1.0))
		self.assertEqual(0x3f80, formats.BFLOAT16.to_bits(1.0))
		self.assertEqual(1.0, formats.BFLOAT16.from_bits(0x3f80))


class TestLookup(unittest.TestCase):
	def test_00_names(self):
		self.assertIs(formats.BINARY32, formats.lookup('single'))
		self.assertIs(formats.BINARY64, formats.lookup('DOUBLE'))
		self.assertIs(formats.BINARY16, formats.lookup('half'))
		self.assertIs(formats.BFLOAT16, formats.lookup('bfloat16'))
		with self.assertRaises(KeyError):
			formats.lookup('binary128')


class TestCustomFormat(unittest.TestCase):
	""" Any layout works, so long as somebody can say what a bit pattern means. """

	class Minifloat(FloatFormat):
		name = 'e4m3'
		exponent_bits = 4
		mantissa_bits = 3
		def from_bits(self, bits):
			sign = -1.0 if bits >> 7 else 1.0
			exponent, mantissa = (bits >> 3) & 15, bits & 7
			if exponent == 15: return sign * math.inf
			if exponent == 0: return sign * 0.0
			return sign * (1 + mantissa / 8) * 2.0 ** (exponent - self.bias)

	def test_00_convert(self):
		from hexfloat.parsing import literal
		fmt = self.Minifloat()
		self.assertEqual(8, fmt.register_bits)
		self.assertEqual(-13.0, literal.parse("-0xd").convert(fmt).value)
		self.assertTrue(literal.parse("-0xd").convert(fmt).is_precise)
		self.assertEqual(16.0, literal.parse("0x11").convert(fmt).value)
		self.assertFalse(literal.parse("0x11").convert(fmt).is_precise)
		self.assertEqual(math.inf, literal.parse("0x1p2").convert(fmt).value)

	def test_01_bits_without_help(self):
		fmt = self.Minifloat()
		self.assertEqual(0xd5, fmt.to_bits(-13.0))
		self.assertEqual(0x78, fmt.to_bits(math.inf))
		self.assertEqual(0x80, fmt.to_bits(-0.0))
		for bits in range(256):
			if (bits >> 3) & 15: # the Minifloat has no subnormals
				with self.subTest(bits=bits):
					self.assertEqual(bits & ~(7 if (bits >> 3) & 15 == 15 else 0), fmt.to_bits(fmt.from_bits(bits)))
		with self.assertRaises(ValueError):
			fmt.to_bits(math.nan)

	def test_02_bits_agree_with_struct(self):
		for fmt in (formats.BINARY16, formats.BINARY32, formats.BINARY64):
			smallest = 1 << (fmt.mantissa_bits - 1)
			for value in [1.0, -2.5, fmt.from_bits(1), fmt.from_bits(smallest), fmt.from_bits((1 << (fmt.total_bits - 1)) - (1 << fmt.mantissa_bits) - 1), -math.inf, -0.0]:
				with self.subTest(fmt=fmt, value=value):
					self.assertEqual(fmt.to_bits(value), FloatFormat.to_bits(fmt, value))


if __name__ == '__main__':
	unittest.main()
