import logging
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional

import numpy as np

from milvus_codec.exceptions import (
    DimensionMismatchError,
    ExceptionsMessage,
    MissingVectorFieldError,
    ParamError,
    UnknownFieldError,
)
from milvus_codec.grpc_gen import common_pb2 as common_types
from milvus_codec.grpc_gen import milvus_pb2 as milvus_types

from . import blob, check, entity_helper, utils
from .check import check_pass_param
from .constants import (
    ANNS_FIELD,
    DEFAULT_METRIC_TYPE,
    DEFAULT_TOPK,
    METRIC_TYPE,
    MILVUS_LIMIT,
    NO_ROUNDING,
    OFFSET,
    PARAMS,
    PLACEHOLDER_TAG,
    ROUND_DECIMAL,
    TOPK,
)
from .entity_helper import ResolvedField
from .types import PLACEHOLDER_TYPES, DataType, is_vector_type

logger = logging.getLogger(__name__)


class SearchPlan(NamedTuple):
    request: Any
    round_decimal: int
    output_fields: List[str]
    anns_field: str
    vector_type: DataType


class Prepare:
    @classmethod
    def describe_collection_request(cls, collection_name: str):
        check_pass_param(collection_name=collection_name)
        return milvus_types.DescribeCollectionRequest(collection_name=collection_name)

    @classmethod
    def row_insert_param(
        cls,
        collection_name: str,
        entities: List,
        partition_name: Optional[str],
        fields: Iterable[Any],
    ):
        check_pass_param(collection_name=collection_name)
        resolved = entity_helper.resolve_fields(fields)
        if not resolved:
            raise ParamError(message="Missing collection meta to validate entities")

        fields_data = entity_helper.rows_to_fields_data(entities, resolved)

        # insert_request.hash_keys won't be filled in client.
        p_name = partition_name if isinstance(partition_name, str) else ""
        request = milvus_types.InsertRequest(
            collection_name=collection_name,
            partition_name=p_name,
            num_rows=len(entities),
        )
        request.fields_data.extend(fields_data)
        return request

    @classmethod
    def delete_request(
        cls,
        collection_name: str,
        expr: str,
        partition_name: Optional[str] = None,
    ):
        if not check.is_legal_table_name(collection_name) or not expr or not isinstance(expr, str):
            raise ParamError(message=ExceptionsMessage.DeleteParams)
        if partition_name is not None:
            check_pass_param(partition_name=partition_name)

        return milvus_types.DeleteRequest(
            collection_name=collection_name,
            partition_name=partition_name or "",
            expr=expr,
        )

    @staticmethod
    def _classify_fields(schema_fields: Iterable[Any]):
        # only vector fields are resolved, any other type is an output candidate
        vector_fields, output_fields = [], []
        for field in schema_fields:
            info = entity_helper.field_info(field)
            if is_vector_type(info.get("type")):
                vector_fields.append(entity_helper.resolve_field(info))
            else:
                output_fields.append(info["name"])
        return vector_fields, output_fields

    @staticmethod
    def _anns_field_of(vector_fields: List[ResolvedField], anns_field: Optional[str]) -> ResolvedField:
        if not vector_fields:
            raise MissingVectorFieldError(message=ExceptionsMessage.NoVector)
        if anns_field is None:
            return vector_fields[0]
        for field in vector_fields:
            if field.name == anns_field:
                return field
        raise UnknownFieldError(message=f"`{anns_field}` is not a vector field of the collection")

    @classmethod
    def _placeholder_value(cls, field: ResolvedField, i: int, vector: Any) -> bytes:
        if field.dtype == DataType.FLOAT_VECTOR:
            values = blob.pack_float(vector)
            if len(values) != field.dim:
                raise DimensionMismatchError(
                    message=ExceptionsMessage.SearchVectorDim % (i, field.name, len(values), field.dim)
                )
            return blob.vector_float_to_bytes(values)

        # binary vectors come either packed, dim / 8 bytes, or as dim bits
        if not isinstance(vector, (bytes, bytearray)) and len(vector) == field.dim:
            return blob.pack_binary(vector)
        packed = blob.binary_to_bytes(vector)
        if len(packed) != field.row_width:
            raise DimensionMismatchError(
                message=ExceptionsMessage.SearchVectorDim
                % (i, field.name, len(packed), f"{field.row_width} bytes or {field.dim} bits")
            )
        return packed

    @classmethod
    def _prepare_placeholder_str(cls, field: ResolvedField, vectors: Iterable[Any]) -> bytes:
        pl_values = [cls._placeholder_value(field, i, v) for i, v in enumerate(vectors)]
        pl = common_types.PlaceholderValue(
            tag=PLACEHOLDER_TAG, type=int(PLACEHOLDER_TYPES[field.dtype]), values=pl_values
        )
        return common_types.PlaceholderGroup.SerializeToString(
            common_types.PlaceholderGroup(placeholders=[pl])
        )

    @staticmethod
    def _search_params(data: Mapping, anns_field: str) -> Dict[str, Any]:
        explicit = data.get("search_params")
        if explicit is not None:
            search_params = dict(explicit)
            search_params.setdefault(ANNS_FIELD, anns_field)
            return search_params

        return {
            ANNS_FIELD: anns_field,
            TOPK: data.get("limit") or data.get(TOPK) or DEFAULT_TOPK,
            OFFSET: data.get(OFFSET) or 0,
            METRIC_TYPE: data.get(METRIC_TYPE) or DEFAULT_METRIC_TYPE,
            PARAMS: utils.dumps(data.get(PARAMS) or {}),
        }

    @staticmethod
    def _round_decimal(data: Mapping) -> int:
        explicit = data.get("search_params") or {}
        params = data.get(PARAMS)
        round_decimal = explicit.get(ROUND_DECIMAL)
        if round_decimal is None and isinstance(params, Mapping):
            round_decimal = params.get(ROUND_DECIMAL)
        return NO_ROUNDING if round_decimal is None else round_decimal

    @classmethod
    def search_request(cls, schema_fields: Iterable[Any], data: Mapping) -> SearchPlan:
        check.check_search_params(data)

        vectors = data.get("vectors")
        if vectors is None:
            vectors = [data["vector"]]

        vector_fields, default_output_fields = cls._classify_fields(schema_fields)
        explicit = data.get("search_params") or {}
        field = cls._anns_field_of(vector_fields, explicit.get(ANNS_FIELD))

        search_params = cls._search_params(data, field.name)
        round_decimal = cls._round_decimal(data)
        check_pass_param(round_decimal=round_decimal)
        if data.get("search_params") is None:
            # explicit search_params pass through as given, e.g. topk "4"
            check_pass_param(topk=search_params[TOPK])

        output_fields = data.get("output_fields") or default_output_fields
        expr = data.get("expr") or data.get("filter") or ""
        nq = data.get("nq") or len(vectors)

        request = milvus_types.SearchRequest(
            collection_name=data["collection_name"],
            partition_names=data.get("partition_names") or [],
            output_fields=output_fields,
            dsl=expr,
            dsl_type=common_types.BoolExprV1,
            placeholder_group=cls._prepare_placeholder_str(field, vectors),
            nq=nq,
        )
        request.search_params.extend(
            [common_types.KeyValuePair(key=str(k), value=utils.dumps(v)) for k, v in search_params.items()]
        )

        logger.debug(
            f"search on {data['collection_name']}.{field.name}: nq={nq}, "
            f"output_fields={output_fields}, round_decimal={round_decimal}"
        )
        return SearchPlan(
            request=request,
            round_decimal=round_decimal,
            output_fields=list(output_fields),
            anns_field=field.name,
            vector_type=field.dtype,
        )

    @classmethod
    def query_request(
        cls,
        collection_name: str,
        expr: str,
        output_fields: Optional[List[str]] = None,
        partition_names: Optional[List[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ):
        check_pass_param(
            collection_name=collection_name,
            expr=expr,
            output_fields=output_fields,
            partition_name_array=partition_names,
        )
        req = milvus_types.QueryRequest(
            collection_name=collection_name,
            expr=expr or "",
            output_fields=output_fields or [],
            partition_names=partition_names or [],
        )

        if isinstance(limit, (int, np.integer)) and not isinstance(limit, bool):
            req.query_params.append(common_types.KeyValuePair(key=MILVUS_LIMIT, value=str(limit)))

        if isinstance(offset, (int, np.integer)) and not isinstance(offset, bool):
            req.query_params.append(common_types.KeyValuePair(key=OFFSET, value=str(offset)))

        return req

    @classmethod
    def flush_param(cls, collection_names: List[str]):
        if not isinstance(collection_names, (list, tuple)) or len(collection_names) == 0:
            raise ParamError(message=ExceptionsMessage.CollectionNamesRequired)
        for name in collection_names:
            check_pass_param(collection_name=name)
        return milvus_types.FlushRequest(collection_names=collection_names)

    @classmethod
    def get_flush_state_request(cls, segment_ids: List[int]):
        if not check.is_legal_segment_ids(segment_ids):
            raise ParamError(message=ExceptionsMessage.SegmentIDsRequired)
        return milvus_types.GetFlushStateRequest(segmentIDs=segment_ids)
