"""
This module is all about easing over the process to display where things go wrong.

A parse error knows only an integer offset. That is plenty for a program, but a person
would like to see the offending text with the spot marked. Hexadecimal literals are
usually short and alone on a line, but the parser also runs embedded inside larger
tokenizers, where the literal may sit anywhere in a multi-line document. So the
SourceText converts an offset into a row and column, fetches the corresponding line,
and draws a caret under the problem with the `illustration` function.

Line breaks are a funny thing. Unix calls for \n, Apple prior to OSX called for \r,
and DOS and its descendants call for \r\n. All three count as line breaks here.
"""

import bisect, re

LINE_BREAK = re.compile(r'\r\n?|\n')

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class SourceText:
	""" Wrapper for source text: participates in half-respectable error-display with context. Rows count from one. """
	def __init__(self, content:str, filename:str=None):
		self.content = content
		self.filename = filename
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		col = index - self.__bounds[row]
		return row+1, col

	def line_of_text(self, row):
		self.__make_bounds()
		r = max(0, row - 1)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def complaint(self, a_slice:slice, message:str):
		left, right = a_slice.start, a_slice.stop
		row, col = self.find_row_col(left)
		reference = self._format_message(row, col, message)
		line = self.line_of_text(row)
		illustrated = illustration(line, col, right - left, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)
