from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

INVALID_TEXT = "<invalid>"

# integers are signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def _as_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return INVALID_TEXT


@dataclass(frozen=True)
class Value(ABC):
    """A decoded or encodable bencode value"""

    @abstractmethod
    def render(self) -> str:
        """Debug rendering, never used for encoding"""

    def __str__(self):
        return self.render()

    def __rich__(self):
        from bencodec.ui import render_tree
        return render_tree(self)


@dataclass(frozen=True)
class Integer(Value):
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer holds an int, got {type(self.value)}")
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError("Integer outside the signed 64-bit range")

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ByteString(Value):
    """raw bytes, not guaranteed to be text"""
    data: bytes

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError(f"ByteString holds bytes, got {type(self.data)}")
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def text(self) -> str | None:
        """the UTF-8 text of the string, or None if it isn't valid UTF-8"""
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def render(self) -> str:
        return _as_text(self.data)


@dataclass(frozen=True)
class List(Value):
    items: tuple[Value, ...] = ()

    def __post_init__(self):
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, Value):
                raise TypeError(f"List items must be bencode values, got {type(item)}")
        object.__setattr__(self, "items", items)

    def render(self) -> str:
        return "[" + ", ".join(item.render() for item in self.items) + "]"


@dataclass(frozen=True)
class Dict(Value):
    """mapping of raw byte keys to values. Keys may be given as bytes or ByteString"""
    entries: Mapping[bytes, Value] = field(default_factory=dict)

    def __post_init__(self):
        entries = {}
        for key, value in dict(self.entries).items():
            if isinstance(key, ByteString):
                key = key.data
            if not isinstance(key, bytes):
                raise TypeError(f"Dict keys must be bytes, got {type(key)}")
            if not isinstance(value, Value):
                raise TypeError(f"Dict values must be bencode values, got {type(value)}")
            entries[key] = value
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __hash__(self):
        return hash(tuple(self.sorted_items()))

    def sorted_items(self) -> list[tuple[bytes, Value]]:
        """pairs in canonical order: ascending raw byte order of keys"""
        return sorted(self.entries.items(), key=lambda pair: pair[0])

    def render(self) -> str:
        return "{" + ", ".join(
            f"{_as_text(key)}: {value.render()}" for key, value in self.sorted_items()
        ) + "}"
