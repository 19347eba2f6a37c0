from bencodec import markers
from bencodec.value import ByteString, Dict, Integer, List, Value


def _encode_string(data: bytes) -> bytes:
    return str.encode(str(len(data)), "ascii") + markers.SEPARATOR + data


def encode(value: Value) -> bytes:
    """Canonical encoding of a value tree.

    Dict pairs are written in ascending raw byte order of their keys, so equal
    trees always encode to the same bytes.
    """
    if not isinstance(value, Value):
        raise ValueError(f"Unsupported type {type(value)}")
    out = []
    # values still to encode and literal chunks, popped from the end
    pending: list[Value | bytes] = [value]
    while pending:
        match pending.pop():
            case bytes() as chunk:
                out.append(chunk)
            case Integer(n):
                out.append(markers.INT_BEGIN + str.encode(str(n), "ascii") + markers.END)
            case ByteString(data):
                out.append(_encode_string(data))
            case List(items):
                out.append(markers.LIST_BEGIN)
                pending.append(markers.END)
                pending.extend(reversed(items))
            case Dict() as item:
                out.append(markers.DICT_BEGIN)
                pending.append(markers.END)
                for key, child in reversed(item.sorted_items()):
                    pending.append(child)
                    pending.append(_encode_string(key))
            case other:
                raise ValueError(f"Unsupported type {type(other)}")
    return b"".join(out)
