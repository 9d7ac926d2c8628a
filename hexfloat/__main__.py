"""
Convert hexadecimal floating constants (like 0x1.8p3) to binary floating-point values,
and say whether each conversion was exact.

For each literal, prints the value, the bit pattern in hexadecimal, and either
"precise" or "imprecise". Exponents are powers of sixteen unless --binary-exponent
is given, in which case they are powers of two, as in C.
Put -- before the first literal if it has a minus sign.
"""

import sys, argparse

from hexfloat.support.interfaces import ParseError
from hexfloat.parsing import literal
from hexfloat.conversion import formats

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m hexfloat', description=__doc__,)
	parser.add_argument('literals', nargs='+', metavar='LITERAL', help='hexadecimal floating constant(s) to convert')
	parser.add_argument('-f', '--format', default='binary64', choices=sorted(formats.FORMATS), help='target floating-point format (default: binary64)')
	parser.add_argument('-s', '--separator', default='.', help='character to use as the radix point (default: ".")')
	parser.add_argument('-b', '--binary-exponent', action='store_const', dest='exponent_base', const=2, default=16, help='read p-exponents as powers of two, as C does')
	parser.add_argument('--strict', action='store_true', help='exit with status 2 if any conversion is imprecise')
	return parser.parse_args(argv)

def main(args):
	fmt = formats.lookup(args.format)
	try: options = literal.ParseOptions(args.separator, args.exponent_base).check()
	except ValueError as e:
		print(e.args[0], file=sys.stderr)
		return 1
	status = 0
	for text in args.literals:
		try:
			result = literal.parse(text, options).convert(fmt)
		except ParseError as e:
			print(e.describe(text), file=sys.stderr)
			return 1
		else:
			if not result.is_precise and args.strict: status = 2
			digits = (fmt.total_bits + 3) // 4
			bits = fmt.to_bits(result.value)
			print("%s\t%r\t0x%0*x\t%s"%(text, result.value, digits, bits, 'precise' if result.is_precise else 'imprecise'))
	return status

if __name__ == '__main__': sys.exit(main(parse_arguments()))
