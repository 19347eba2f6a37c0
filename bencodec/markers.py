INT_BEGIN = b"i"
LIST_BEGIN = b"l"
DICT_BEGIN = b"d"
END = b"e"
SEPARATOR = b":"
MINUS = b"-"
ZERO = b"0"
