"""
Concrete floating-point formats.

Each format is a FloatFormat (see support.interfaces) which knows its field widths and
how to turn a bit pattern into a Python value. The struct module does the reinterpreting
for the layouts it knows. bfloat16 is just the top half of a binary32, so it borrows
binary32's unpacking.

If you need some other layout, subclass FloatFormat and supply `from_bits`. The
inherited `to_bits` will work it out backwards, more slowly than struct does.
"""
import struct

from ..support.interfaces import FloatFormat


class StructFormat(FloatFormat):
	""" A format which the struct module can unpack directly, given the format code. """
	def __init__(self, name:str, exponent_bits:int, mantissa_bits:int, code:str):
		self.name = name
		self.exponent_bits = exponent_bits
		self.mantissa_bits = mantissa_bits
		self.__packing = struct.Struct('<'+code)
		self.__raw = struct.Struct('<'+{2:'H', 4:'I', 8:'Q'}[self.__packing.size])
		assert self.__packing.size * 8 == self.total_bits, name

	def from_bits(self, bits:int) -> float:
		return self.__packing.unpack(self.__raw.pack(bits))[0]

	def to_bits(self, value:float) -> int:
		return self.__raw.unpack(self.__packing.pack(value))[0]


class TruncatedFormat(FloatFormat):
	""" The most-significant half (or so) of some wider format, with the same exponent field. """
	def __init__(self, name:str, wider:StructFormat, mantissa_bits:int):
		assert mantissa_bits < wider.mantissa_bits
		self.name = name
		self.exponent_bits = wider.exponent_bits
		self.mantissa_bits = mantissa_bits
		self.__wider = wider
		self.__shift = wider.mantissa_bits - mantissa_bits

	def from_bits(self, bits:int) -> float: return self.__wider.from_bits(bits << self.__shift)

	def to_bits(self, value:float) -> int: return self.__wider.to_bits(value) >> self.__shift


BINARY16 = StructFormat('binary16', 5, 10, 'e')
BINARY32 = StructFormat('binary32', 8, 23, 'f')
BINARY64 = StructFormat('binary64', 11, 52, 'd')
BFLOAT16 = TruncatedFormat('bfloat16', BINARY32, 7)

FORMATS = {
	'binary16': BINARY16, 'half': BINARY16,
	'bfloat16': BFLOAT16,
	'binary32': BINARY32, 'single': BINARY32, 'float': BINARY32,
	'binary64': BINARY64, 'double': BINARY64,
}

def lookup(name:str) -> FloatFormat:
	try: return FORMATS[name.lower()]
	except KeyError: raise KeyError(name, sorted(FORMATS)) from None
