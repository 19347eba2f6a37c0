class BencodeDecodeError(ValueError):
    """Raised when the input does not follow the bencode grammar.

    ``byte`` is the offending byte value, or 0 when the input ended before an
    expected byte (``end_of_input`` is then set). ``pos`` is its zero-based
    offset in the input.
    """
    kind = "bad bencode"

    def __init__(self, byte: int, pos: int, end_of_input: bool = False):
        self.byte = byte
        self.pos = pos
        self.end_of_input = end_of_input
        super().__init__(self._describe())

    def _describe(self) -> str:
        found = "end of input" if self.end_of_input else repr(bytes([self.byte]))
        return f"{self.kind}: {found} at position {self.pos}"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.byte, self.pos) == (other.byte, other.pos)

    def __hash__(self):
        return hash((type(self), self.byte, self.pos))

    def __repr__(self):
        return f"{type(self).__name__}(byte={self.byte}, pos={self.pos})"


class UnexpectedByte(BencodeDecodeError):
    kind = "unexpected byte"


class BadInteger(BencodeDecodeError):
    kind = "bad integer"


class BadString(BencodeDecodeError):
    kind = "bad byte string"


class BadList(BencodeDecodeError):
    kind = "bad list"


class _DictError(BencodeDecodeError):
    # dict errors only point at a position
    def __init__(self, pos: int):
        super().__init__(0, pos)

    def _describe(self) -> str:
        return f"{self.kind} at position {self.pos}"

    def __repr__(self):
        return f"{type(self).__name__}(pos={self.pos})"


class BadDictKey(_DictError):
    kind = "bad dict key"


class BadDictValue(_DictError):
    kind = "bad dict value"
