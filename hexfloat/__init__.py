""" Hexadecimal floating-point literals: parse them, and convert them to binary floating-point of any width. """
