import logging
from enum import IntEnum
from typing import Any, Dict

from milvus_codec.exceptions import ExceptionsMessage, UnsupportedTypeError
from milvus_codec.grpc_gen import common_pb2, schema_pb2

logger = logging.getLogger(__name__)


class DataType(IntEnum):
    """
    String of DataType is str of its value, e.g.: str(DataType.BOOL) == "1"
    """

    NONE = 0  # schema_pb2.None, this is an invalid representation in python
    BOOL = schema_pb2.DataType.Value("Bool")
    INT8 = schema_pb2.DataType.Value("Int8")
    INT16 = schema_pb2.DataType.Value("Int16")
    INT32 = schema_pb2.DataType.Value("Int32")
    INT64 = schema_pb2.DataType.Value("Int64")

    FLOAT = schema_pb2.DataType.Value("Float")
    DOUBLE = schema_pb2.DataType.Value("Double")

    VARCHAR = schema_pb2.DataType.Value("VarChar")
    JSON = schema_pb2.DataType.Value("JSON")

    BINARY_VECTOR = schema_pb2.DataType.Value("BinaryVector")
    FLOAT_VECTOR = schema_pb2.DataType.Value("FloatVector")

    UNKNOWN = 999

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def resolve(cls, declared: Any) -> "DataType":
        """Normalize a declared type given as DataType, wire number or wire name."""
        dtype = None
        if isinstance(declared, str):
            # the server describes types by their wire names, e.g. "FloatVector"
            try:
                dtype = cls(schema_pb2.DataType.Value(declared))
            except ValueError:
                dtype = cls.__members__.get(declared.upper())
        elif isinstance(declared, int) and not isinstance(declared, bool):
            try:
                dtype = cls(declared)
            except ValueError:
                dtype = None

        if dtype is None or dtype not in WIRE_KEYS:
            raise UnsupportedTypeError(message=ExceptionsMessage.UnsupportedDataType % (declared,))
        return dtype

    @property
    def is_vector(self) -> bool:
        return self in (DataType.BINARY_VECTOR, DataType.FLOAT_VECTOR)


class PlaceholderType(IntEnum):
    NoneType = common_pb2.PlaceholderType.Value("None")
    BinaryVector = common_pb2.PlaceholderType.Value("BinaryVector")
    FloatVector = common_pb2.PlaceholderType.Value("FloatVector")


class WireKey:
    """Data key of a column on the wire, one per supported data type."""

    DOUBLE = "double_data"
    FLOAT = "float_data"
    LONG = "long_data"
    INT = "int_data"
    BOOL = "bool_data"
    STRING = "string_data"
    JSON = "json_data"
    FLOAT_VECTOR = "float_vector"
    BINARY_VECTOR = "binary_vector"


WIRE_KEYS: Dict[DataType, str] = {
    DataType.DOUBLE: WireKey.DOUBLE,
    DataType.FLOAT: WireKey.FLOAT,
    DataType.INT64: WireKey.LONG,
    DataType.INT32: WireKey.INT,
    DataType.INT16: WireKey.INT,
    DataType.INT8: WireKey.INT,
    DataType.BOOL: WireKey.BOOL,
    DataType.VARCHAR: WireKey.STRING,
    DataType.JSON: WireKey.JSON,
    DataType.FLOAT_VECTOR: WireKey.FLOAT_VECTOR,
    DataType.BINARY_VECTOR: WireKey.BINARY_VECTOR,
}

PLACEHOLDER_TYPES: Dict[DataType, PlaceholderType] = {
    DataType.BINARY_VECTOR: PlaceholderType.BinaryVector,
    DataType.FLOAT_VECTOR: PlaceholderType.FloatVector,
}


def wire_key_of(dtype: DataType) -> str:
    key = WIRE_KEYS.get(dtype)
    if key is None:
        raise UnsupportedTypeError(message=ExceptionsMessage.UnsupportedDataType % (dtype,))
    return key


def is_vector_type(declared: Any) -> bool:
    """Whether a declared type names a vector type, without rejecting unsupported scalars."""
    try:
        return DataType.resolve(declared).is_vector
    except UnsupportedTypeError:
        return False
