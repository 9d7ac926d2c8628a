"""
A cursor walks forward through a subject text one character at a time.

Scanning strings and bytes-objects requires slightly different access syntax, so there
is one cursor class for each, sharing everything but `codepoint_at`. Everything is done
in terms of integer codepoints, which lets the same grammar run over either kind of
subject without decoding anything.

A cursor never fails. Running off the end yields END_OF_INPUT, and asking for a run of
digits where there are none yields an empty run. Deciding whether that is a problem is
the parser's business.
"""
from typing import TypeVar, Generic
from ..support.interfaces import END_OF_INPUT
from . import charset

T = TypeVar('T')


class CursorBase(Generic[T]):

	consumed: int

	_subject: T
	_size:int

	def __init__(self, subject:T, offset:int=0):
		self._subject = subject
		self._size = len(self._subject)
		self.consumed = offset

	def codepoint_at(self, offset) -> int: raise NotImplementedError(type(self))

	def current(self) -> int:
		""" Lookahead: the codepoint under the cursor, or END_OF_INPUT. """
		if self.consumed < self._size: return self.codepoint_at(self.consumed)
		return END_OF_INPUT

	def advance(self):
		""" Consume one character. Does nothing at the end of input. """
		if self.consumed < self._size: self.consumed += 1

	def accept(self, *codepoints) -> bool:
		""" If the current character is among those given, consume it and say so. """
		if self.current() in codepoints:
			self.advance()
			return True
		return False

	def consume_run(self, cls:list):
		""" Consume the maximal run of characters in the class; return the (left, right) offsets of the run. """
		left = self.consumed
		while charset.in_class(cls, self.current()): self.advance() # END_OF_INPUT is never in a class.
		return left, self.consumed

	def consume_hex_run(self) -> list[int]:
		""" Consume the maximal run of hex digits, returning their values in order. """
		left, right = self.consume_run(charset.XDIGIT)
		return [charset.nibble(self.codepoint_at(i)) for i in range(left, right)]

	def consume_decimal_run(self) -> str:
		""" Consume the maximal run of decimal digits, returning their text. """
		left, right = self.consume_run(charset.DIGIT)
		return ''.join(chr(self.codepoint_at(i)) for i in range(left, right))

	def remaining(self) -> T: return self._subject[self.consumed:]

	def is_exhausted(self) -> bool: return self.consumed >= self._size

class StringCursor(CursorBase[str]):
	def codepoint_at(self, offset) -> int: return ord(self._subject[offset])

class BytesCursor(CursorBase[bytes]):
	def codepoint_at(self, offset) -> int: return self._subject[offset]

def make_cursor(subject, offset:int=0) -> CursorBase:
	if isinstance(subject, CursorBase): return subject
	if isinstance(subject, str): return StringCursor(subject, offset)
	if isinstance(subject, (bytes, bytearray)): return BytesCursor(subject, offset)
	raise TypeError(type(subject))
