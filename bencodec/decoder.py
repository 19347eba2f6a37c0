import logging
from dataclasses import dataclass, field

from bencodec import markers
from bencodec.errors import (
    BadDictKey,
    BadDictValue,
    BadInteger,
    BadList,
    BadString,
    BencodeDecodeError,
    UnexpectedByte,
)
from bencodec.value import INT_MAX, ByteString, Dict, Integer, List, Value

logger = logging.getLogger(__name__)


@dataclass
class _OpenList:
    items: list[Value] = field(default_factory=list)

    def add(self, value: Value):
        self.items.append(value)

    def close(self) -> List:
        return List(self.items)


@dataclass
class _OpenDict:
    entries: dict[bytes, Value] = field(default_factory=dict)
    """key waiting for its value, None while a key is expected"""
    key: bytes | None = None
    key_pos: int = 0

    def add(self, value: Value):
        if self.key is None:
            if not isinstance(value, ByteString):
                raise BadDictKey(self.key_pos)
            self.key = value.data
        else:
            # a repeated key keeps the last value
            self.entries[self.key] = value
            self.key = None

    def close(self) -> Dict:
        return Dict(self.entries)


class BencodeDecoder:
    """Reader over a bencoded buffer.

    Holds the buffer and a cursor (``pos``). Lists and dicts are parsed with an
    explicit stack of open collections, so nesting depth is only bounded by
    memory. Each instance is single-use parsing state and must not be shared
    between threads.
    """

    def __init__(self, data: bytes):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise ValueError("data to decode must be bytes")
        self.data = bytes(data)
        self.pos = 0

    @property
    def finished(self) -> bool:
        return self.pos >= len(self.data)

    def _peek(self, offset: int = 0) -> bytes:
        """the byte at pos + offset as a 1-byte slice, b"" past the end"""
        start = self.pos + offset
        return self.data[start: start + 1]

    def next_value(self) -> Value | None:
        """Parses one value starting at the cursor and moves past it.

        Returns None if the input is already exhausted.
        """
        if self.finished:
            return None
        stack: list[_OpenList | _OpenDict] = []
        while True:
            value = self._step(stack)
            if value is None:
                continue
            if not stack:
                return value
            stack[-1].add(value)

    def __iter__(self):
        while (value := self.next_value()) is not None:
            yield value

    def _step(self, stack: list) -> Value | None:
        """Reads the next scalar or closes the innermost collection.

        Returns None after opening a new collection.
        """
        if stack:
            top = stack[-1]
            byte = self._peek()
            expecting_value = isinstance(top, _OpenDict) and top.key is not None
            if byte == markers.END and not expecting_value:
                self.pos += 1
                return stack.pop().close()
            if not byte:
                if isinstance(top, _OpenList):
                    raise BadList(0, self.pos, end_of_input=True)
                if expecting_value:
                    raise BadDictValue(self.pos)
                raise BadDictKey(self.pos)
            if isinstance(top, _OpenDict) and not expecting_value:
                top.key_pos = self.pos

        match self._peek():
            case markers.INT_BEGIN:
                self.pos += 1
                return self._decode_int()
            case markers.LIST_BEGIN:
                self.pos += 1
                stack.append(_OpenList())
            case markers.DICT_BEGIN:
                self.pos += 1
                stack.append(_OpenDict())
            case byte if byte.isdigit():
                return self._decode_string()
            case byte:
                raise UnexpectedByte(byte[0], self.pos)
        return None

    def _decode_int(self) -> Integer:
        negative = self._peek() == markers.MINUS
        if negative:
            self.pos += 1

        first = self._peek()
        if not first:
            raise BadInteger(0, self.pos, end_of_input=True)
        if not first.isdigit():
            raise BadInteger(first[0], self.pos)
        if negative and first == markers.ZERO:
            raise BadInteger(first[0], self.pos)
        if first == markers.ZERO and self._peek(1).isdigit():
            raise BadInteger(first[0], self.pos + 1)

        limit = INT_MAX + 1 if negative else INT_MAX
        value = 0
        while (byte := self._peek()) and byte != markers.END:
            if not byte.isdigit():
                raise BadInteger(byte[0], self.pos)
            value = value * 10 + byte[0] - markers.ZERO[0]
            if value > limit:
                raise BadInteger(byte[0], self.pos)
            self.pos += 1
        if not byte:
            raise BadInteger(0, self.pos, end_of_input=True)
        self.pos += 1
        return Integer(-value if negative else value)

    def _decode_string(self) -> ByteString:
        if self._peek() == markers.ZERO and self._peek(1).isdigit():
            raise BadString(markers.ZERO[0], self.pos + 1)

        length = 0
        while (byte := self._peek()) and byte != markers.SEPARATOR:
            if not byte.isdigit():
                raise BadString(byte[0], self.pos)
            length = length * 10 + byte[0] - markers.ZERO[0]
            if length > len(self.data):
                # can never be satisfied by this input
                raise BadString(0, len(self.data), end_of_input=True)
            self.pos += 1
        if not byte:
            raise BadString(0, self.pos, end_of_input=True)
        self.pos += 1

        end = self.pos + length
        if end > len(self.data):
            raise BadString(0, len(self.data), end_of_input=True)
        value = self.data[self.pos: end]
        self.pos = end
        return ByteString(value)


def decode(data: bytes) -> Value | None:
    """Decodes exactly one bencoded value.

    Returns None for empty input. Raises a BencodeDecodeError subclass on the
    first grammar violation, including bytes left over after the value.
    """
    decoder = BencodeDecoder(data)
    try:
        value = decoder.next_value()
        if not decoder.finished:
            raise UnexpectedByte(decoder.data[decoder.pos], decoder.pos)
    except BencodeDecodeError as e:
        logger.debug("rejected %d bytes of bencode: %s", len(decoder.data), e)
        raise
    return value
