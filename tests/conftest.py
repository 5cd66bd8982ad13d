"""Shared fixtures for the codec and handler tests."""

from typing import Optional
from unittest.mock import MagicMock

import pytest
from milvus_codec.client.grpc_handler import GrpcHandler
from milvus_codec.client.types import DataType
from milvus_codec.grpc_gen import common_pb2, milvus_pb2, schema_pb2


def _field_schema(
    name: str,
    data_type: DataType,
    dim: Optional[int] = None,
    is_primary: bool = False,
    auto_id: bool = False,
) -> schema_pb2.FieldSchema:
    field = schema_pb2.FieldSchema(
        name=name,
        data_type=int(data_type),
        is_primary_key=is_primary,
        autoID=auto_id,
    )
    if dim is not None:
        field.type_params.append(common_pb2.KeyValuePair(key="dim", value=str(dim)))
    return field


@pytest.fixture
def make_field():
    return _field_schema


@pytest.fixture
def schema_fields():
    """Collection with an auto-id primary key, scalars, JSON and a float vector."""
    return [
        _field_schema("id", DataType.INT64, is_primary=True, auto_id=True),
        _field_schema("age", DataType.INT64),
        _field_schema("name", DataType.VARCHAR),
        _field_schema("vec", DataType.FLOAT_VECTOR, dim=2),
        _field_schema("meta", DataType.JSON),
    ]


@pytest.fixture
def describe_response(schema_fields):
    return milvus_pb2.DescribeCollectionResponse(
        status=common_pb2.Status(),
        schema=schema_pb2.CollectionSchema(name="coll", fields=schema_fields),
        collectionID=7,
    )


@pytest.fixture
def handler(describe_response):
    """Create a GrpcHandler with a mocked stub."""
    stub = MagicMock()
    stub.DescribeCollection.return_value = describe_response
    return GrpcHandler(stub=stub)


@pytest.fixture
def failed_status():
    return common_pb2.Status(error_code=common_pb2.UnexpectedError, reason="collection not loaded")
