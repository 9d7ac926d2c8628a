"""
Character classes in compact form.

A character class is a sorted list of lower bounds with implied exclusion below the
first listed bound. That is: a character is a member of the class exactly when an odd
number of lower-bounds in the class are less-than-or-equal-to that character's
codepoint value. (See the `in_class(...)` function.)

The grammar of a hexadecimal floating constant only needs a couple of classes, and it
needs them to be strictly ASCII: `str.isdigit` and friends would happily accept Arabic-
Indic digits and full-width letters, which C does not.
"""
import bisect, operator

# How to tell if a character (by codepoint) is a member of the class:
def in_class(cls:list, codepoint:int) -> bool: return bisect.bisect_right(cls, codepoint) % 2

def range_class(first, last) -> list: return [first, last+1] if first <= last else [last, first+1]
def combine(op, x:list, y:list) -> list:
	""" Arbitrary boolean combination of character classes controlled by 'op :: (bool, bool) -> bool'  """
	result = []
	for b in sorted({0}.union(x, y)): # The zero is included in case op(False, False) == True.
		if len(result) % 2 != bool(op(in_class(x, b), in_class(y, b))):
			result.append(b)
	return result
def union(a:list, b:list) -> list: return combine(operator.or_, a, b)

DIGIT = range_class(ord('0'), ord('9'))
UPPER_HEX = range_class(ord('A'), ord('F'))
LOWER_HEX = range_class(ord('a'), ord('f'))
XDIGIT = union(DIGIT, union(UPPER_HEX, LOWER_HEX))

assert XDIGIT == sorted(XDIGIT)

def nibble(codepoint:int) -> int:
	""" Decode an ASCII hex digit (by codepoint) into its value, 0 through 15. """
	if in_class(DIGIT, codepoint): return codepoint - ord('0')
	if in_class(UPPER_HEX, codepoint): return codepoint - ord('A') + 10
	if in_class(LOWER_HEX, codepoint): return codepoint - ord('a') + 10
	raise ValueError(codepoint)
