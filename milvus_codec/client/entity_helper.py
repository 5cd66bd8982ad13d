import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence

import numpy as np
import orjson

from milvus_codec.exceptions import (
    DataNotMatchException,
    DecodeError,
    DimensionMismatchError,
    ExceptionsMessage,
    ParamError,
    SchemaError,
    UnknownFieldError,
)
from milvus_codec.grpc_gen import schema_pb2 as schema_types

from .abstract import FieldSchema
from .blob import binary_to_bytes, pack_float
from .constants import BITS_PER_BYTE, DIM
from .types import DataType, WireKey, wire_key_of

logger = logging.getLogger(__name__)

EMPTY_JSON = b"{}"

SCALAR_KEYS = (
    WireKey.BOOL,
    WireKey.INT,
    WireKey.LONG,
    WireKey.FLOAT,
    WireKey.DOUBLE,
    WireKey.STRING,
    WireKey.JSON,
    "bytes_data",
)


class ResolvedField(NamedTuple):
    name: str
    dtype: DataType
    dim: Optional[int] = None
    is_primary: bool = False

    @property
    def row_width(self) -> Optional[int]:
        """Number of wire elements one row of a vector field takes."""
        if self.dtype == DataType.BINARY_VECTOR:
            return self.dim // BITS_PER_BYTE
        return self.dim


def field_info(field: Any) -> Dict:
    if isinstance(field, schema_types.FieldSchema):
        field = FieldSchema(field)
    if isinstance(field, FieldSchema):
        return field.dict()
    if isinstance(field, Mapping):
        return field
    raise SchemaError(message=f"Unsupported field schema: {type(field).__name__}")


def _vector_dim(info: Dict, dtype: DataType) -> int:
    dim = info.get("params", {}).get(DIM)
    try:
        dim = int(dim)
    except (TypeError, ValueError):
        dim = 0
    if dim <= 0 or (dtype == DataType.BINARY_VECTOR and dim % BITS_PER_BYTE != 0):
        raise SchemaError(
            message=ExceptionsMessage.NoDimension % (info.get("name"), info.get("params", {}).get(DIM))
        )
    return dim


def resolve_fields(fields: Iterable[Any], skip_auto_id: bool = True) -> Dict[str, ResolvedField]:
    """Map field name to its type and dimension, in schema order.

    Primary key fields with auto-generated ids are left out unless
    ``skip_auto_id`` is False, their values are never part of an insert.
    """
    resolved = {}
    for field in fields:
        info = field_info(field)
        if skip_auto_id and info.get("is_primary") and info.get("auto_id"):
            continue
        resolved[info["name"]] = resolve_field(info)
    return resolved


def resolve_field(info: Dict) -> ResolvedField:
    dtype = DataType.resolve(info.get("type"))
    dim = _vector_dim(info, dtype) if dtype.is_vector else None
    return ResolvedField(
        name=info["name"],
        dtype=dtype,
        dim=dim,
        is_primary=bool(info.get("is_primary", False)),
    )


def convert_to_json(obj: Any) -> bytes:
    try:
        return orjson.dumps(obj, option=orjson.OPT_SERIALIZE_NUMPY)
    except TypeError as e:
        raise DataNotMatchException(message=f"Invalid JSON value: {e!s}") from e


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class FieldAccumulator:
    """Collects one field's values for every row, then emits the wire column.

    Every row slot starts as ``UNSET``; a slot left unset when the column is
    emitted is an error, except for JSON which falls back to an empty object.
    """

    def __init__(self, field: ResolvedField, num_rows: int):
        self.field = field
        self.wire_key = wire_key_of(field.dtype)
        self._slots: List[Any] = [UNSET] * num_rows

    def set(self, row_index: int, value: Any):
        dtype = self.field.dtype
        if dtype == DataType.BINARY_VECTOR:
            value = binary_to_bytes(value)
            self._check_dim(row_index, len(value), ExceptionsMessage.BinaryVectorDim)
        elif dtype == DataType.FLOAT_VECTOR:
            value = pack_float(value)
            self._check_dim(row_index, len(value), ExceptionsMessage.FloatVectorDim)
        elif dtype == DataType.JSON:
            value = EMPTY_JSON if value is None else convert_to_json(value)
        self._slots[row_index] = value

    def _check_dim(self, row_index: int, length: int, template: str):
        expect = self.field.row_width
        if length != expect:
            raise DimensionMismatchError(
                message=template % (self.field.name, expect, length, row_index)
            )

    def missing_rows(self) -> List[int]:
        return [i for i, v in enumerate(self._slots) if v is UNSET]

    def to_field_data(self) -> schema_types.FieldData:
        field = self.field
        missing = self.missing_rows()
        if missing and field.dtype == DataType.JSON:
            for i in missing:
                self._slots[i] = EMPTY_JSON
        elif missing:
            raise ParamError(message=ExceptionsMessage.InsertMissedField % (field.name, missing))

        field_data = schema_types.FieldData(type=int(field.dtype), field_name=field.name)
        try:
            if field.dtype == DataType.FLOAT_VECTOR:
                field_data.vectors.dim = field.dim
                field_data.vectors.float_vector.data.extend(
                    [f for vector in self._slots for f in vector]
                )
            elif field.dtype == DataType.BINARY_VECTOR:
                field_data.vectors.dim = field.dim
                field_data.vectors.binary_vector = b"".join(self._slots)
            else:
                getattr(field_data.scalars, self.wire_key).data.extend(self._slots)
        except (TypeError, ValueError) as e:
            raise DataNotMatchException(
                message=f"The data of field {field.name} doesn't match {field.dtype.name}, detail: {e!s}"
            ) from e
        return field_data


def rows_to_fields_data(
    rows: Sequence[Mapping], resolved: Dict[str, ResolvedField]
) -> List[schema_types.FieldData]:
    """Transpose rows into one wire column per resolved field, in schema order."""
    if not isinstance(rows, (list, tuple)) or len(rows) == 0:
        raise ParamError(message=ExceptionsMessage.InsertRowsRequired)

    accumulators = {name: FieldAccumulator(field, len(rows)) for name, field in resolved.items()}
    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise ParamError(message=ExceptionsMessage.InsertRowType % (i, type(row).__name__))
        for name, value in row.items():
            accumulator = accumulators.get(name)
            if accumulator is None:
                raise UnknownFieldError(message=ExceptionsMessage.InsertUnexpectedField % (i, name))
            accumulator.set(i, value)

    fields_data = [accumulator.to_field_data() for accumulator in accumulators.values()]
    logger.debug(f"encoded {len(rows)} rows into {len(fields_data)} columns")
    return fields_data


def _unflatten(field_name: str, flat: np.ndarray, width: int) -> List[List[Any]]:
    if flat.size == 0:
        return []
    if width <= 0 or flat.size % width != 0:
        raise DecodeError(message=ExceptionsMessage.VectorDimInvalid % (field_name, width, flat.size))
    return flat.reshape(-1, width).tolist()


def _decode_json(field_name: str, entries: Iterable[bytes]) -> List[Any]:
    decoded = []
    for i, entry in enumerate(entries):
        try:
            decoded.append(orjson.loads(entry))
        except orjson.JSONDecodeError as e:
            raise DecodeError(message=ExceptionsMessage.JSONDecodeFailed % (field_name, i, e)) from e
    return decoded


def extract_column(field_data: schema_types.FieldData) -> List[Any]:
    """Decode one wire column into a list holding one value per entity."""
    field_name = field_data.field_name
    which = field_data.WhichOneof("field")

    if which == "vectors":
        vectors = field_data.vectors
        key = vectors.WhichOneof("data")
        if key is None:
            return []
        if key == WireKey.FLOAT_VECTOR:
            flat = np.asarray(vectors.float_vector.data, dtype=np.float64)
            return _unflatten(field_name, flat, vectors.dim)
        if key == WireKey.BINARY_VECTOR:
            # dim of a binary vector counts bits, the data holds bytes
            flat = np.frombuffer(vectors.binary_vector, dtype=np.uint8)
            return _unflatten(field_name, flat, vectors.dim // BITS_PER_BYTE)
        raise DecodeError(message=ExceptionsMessage.UnknownDiscriminant % (field_name, key))

    if which == "scalars":
        key = field_data.scalars.WhichOneof("data")
        if key is None:
            return []
        if key not in SCALAR_KEYS:
            raise DecodeError(message=ExceptionsMessage.UnknownDiscriminant % (field_name, key))
        data = getattr(field_data.scalars, key).data
        if key == WireKey.JSON:
            return _decode_json(field_name, data)
        return list(data)

    raise DecodeError(message=ExceptionsMessage.UnknownDiscriminant % (field_name, which))


def fields_data_to_rows(fields_data: Iterable[schema_types.FieldData]) -> List[Dict[str, Any]]:
    # decode every column first so a bad column leaves no partial rows behind
    columns = [(field_data.field_name, extract_column(field_data)) for field_data in fields_data]

    num_rows = max((len(values) for _, values in columns), default=0)
    rows = [{} for _ in range(num_rows)]
    for field_name, values in columns:
        for i, value in enumerate(values):
            rows[i][field_name] = value
    return rows
