import struct
from typing import Any, List, Optional

import numpy as np

from milvus_codec.exceptions import DataNotMatchException, DimensionMismatchError, ExceptionsMessage

from .constants import BITS_PER_BYTE


# reference: https://docs.python.org/3/library/struct.html#struct.pack
def vector_float_to_bytes(v: List[float]) -> bytes:
    # pack len(v) number of little-endian float32
    return struct.pack(f"<{len(v)}f", *v)


def pack_float(v: Any) -> List[float]:
    """Float vectors go to the wire as they are, already IEEE-754 single precision."""
    if isinstance(v, np.ndarray):
        return v.tolist()
    return list(v)


def pack_binary(bits: Any) -> bytes:
    """Pack 0/1 values eight per byte, most significant bit first.

    ``pack_binary([1, 0, 0, 0, 0, 0, 0, 1])`` gives ``b"\\x81"``.
    """
    arr = np.asarray(bits)
    if arr.ndim != 1 or len(arr) % BITS_PER_BYTE != 0:
        raise DimensionMismatchError(message=ExceptionsMessage.PackBinaryLength % arr.size)
    return np.packbits(arr.astype(bool), bitorder="big").tobytes()


def unpack_binary(data: bytes, dim: Optional[int] = None) -> List[int]:
    bits = np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8), bitorder="big")
    if dim is not None:
        bits = bits[:dim]
    return bits.tolist()


def binary_to_bytes(values: Any) -> bytes:
    """Byte layout of an already packed binary vector, one value per 8 dimensions."""
    if isinstance(values, (bytes, bytearray)):
        return bytes(values)
    if isinstance(values, np.ndarray):
        if values.dtype != np.uint8:
            raise DataNotMatchException(
                message=f"binary vector expects an np.ndarray with dtype=uint8, got {values.dtype}"
            )
        return values.tobytes()
    try:
        return bytes(values)
    except (TypeError, ValueError) as e:
        raise DataNotMatchException(
            message=f"binary vector expects byte values in [0, 255], detail: {e!s}"
        ) from e
