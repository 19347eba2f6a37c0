from bencodec.decoder import BencodeDecoder, decode
from bencodec.encoder import encode
from bencodec.errors import (
    BadDictKey,
    BadDictValue,
    BadInteger,
    BadList,
    BadString,
    BencodeDecodeError,
    UnexpectedByte,
)
from bencodec.value import ByteString, Dict, Integer, List, Value

__version__ = "0.1.0"
