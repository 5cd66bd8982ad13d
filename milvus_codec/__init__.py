# Copyright (C) 2019-2021 Zilliz. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

from .client import __version__
from .client.abstract import CollectionSchema, FieldSchema, MutationResult
from .client.blob import pack_binary, unpack_binary
from .client.entity_helper import (
    ResolvedField,
    fields_data_to_rows,
    resolve_fields,
    rows_to_fields_data,
)
from .client.grpc_handler import GrpcHandler
from .client.prepare import Prepare, SearchPlan
from .client.search_result import SearchResult, splice_topks
from .client.types import DataType
from .exceptions import (
    DataNotMatchException,
    DecodeError,
    DimensionMismatchError,
    ExceptionsMessage,
    MilvusException,
    MissingVectorFieldError,
    ParamError,
    ProtocolError,
    SchemaError,
    UnknownFieldError,
    UnsupportedTypeError,
    ValidationError,
)

# Compatiable
from .settings import Config as DefaultConfig

__all__ = [
    "CollectionSchema",
    "DataNotMatchException",
    "DataType",
    "DecodeError",
    "DefaultConfig",
    "DimensionMismatchError",
    "ExceptionsMessage",
    "FieldSchema",
    "GrpcHandler",
    "MilvusException",
    "MissingVectorFieldError",
    "MutationResult",
    "ParamError",
    "Prepare",
    "ProtocolError",
    "ResolvedField",
    "SchemaError",
    "SearchPlan",
    "SearchResult",
    "UnknownFieldError",
    "UnsupportedTypeError",
    "ValidationError",
    "__version__",
    "fields_data_to_rows",
    "pack_binary",
    "resolve_fields",
    "rows_to_fields_data",
    "splice_topks",
    "unpack_binary",
]
