import json
import logging
import struct

import pytest
from milvus_codec.client.constants import DEFAULT_TOPK
from milvus_codec.client.prepare import Prepare
from milvus_codec.client.types import DataType
from milvus_codec.exceptions import (
    DimensionMismatchError,
    MilvusException,
    MissingVectorFieldError,
    ParamError,
    UnknownFieldError,
)
from milvus_codec.grpc_gen import common_pb2, schema_pb2

LOGGER = logging.getLogger(__name__)


def _search_params(request):
    return {kv.key: kv.value for kv in request.search_params}


def _placeholder(request):
    group = common_pb2.PlaceholderGroup.FromString(request.placeholder_group)
    assert len(group.placeholders) == 1
    return group.placeholders[0]


class TestSearchRequest:
    def test_simple_shape(self, schema_fields):
        data = {
            "collection_name": "coll",
            "vector": [1.0, 2.0],
            "limit": 5,
            "filter": "age > 1",
        }
        plan = Prepare.search_request(schema_fields, data)
        request = plan.request
        LOGGER.info(request.search_params)

        assert plan.anns_field == "vec"
        assert plan.vector_type is DataType.FLOAT_VECTOR
        assert plan.output_fields == ["id", "age", "name", "meta"]
        assert plan.round_decimal == -1
        assert request.collection_name == "coll"
        assert request.dsl == "age > 1"
        assert request.dsl_type == common_pb2.BoolExprV1
        assert request.nq == 1
        assert list(request.output_fields) == ["id", "age", "name", "meta"]
        assert _search_params(request) == {
            "anns_field": "vec",
            "topk": "5",
            "offset": "0",
            "metric_type": "L2",
            "params": "{}",
        }

    def test_simple_shape_defaults(self, schema_fields):
        plan = Prepare.search_request(schema_fields, {"collection_name": "coll", "vectors": [[1, 2]]})
        params = _search_params(plan.request)

        assert params["topk"] == str(DEFAULT_TOPK)
        assert params["metric_type"] == "L2"
        assert plan.request.dsl == ""

    def test_topk_fallback(self, schema_fields):
        data = {"collection_name": "coll", "vectors": [[1, 2]], "topk": 7, "offset": 3}
        params = _search_params(Prepare.search_request(schema_fields, data).request)
        assert params["topk"] == "7"
        assert params["offset"] == "3"

    def test_explicit_shape(self, schema_fields):
        data = {
            "collection_name": "coll",
            "vectors": [[1, 2], [3, 4]],
            "expr": "age in [1, 2]",
            "output_fields": ["name"],
            "partition_names": ["p1"],
            "search_params": {
                "anns_field": "vec",
                "topk": 10,
                "metric_type": "IP",
                "params": {"nprobe": 16},
                "round_decimal": 3,
            },
        }
        plan = Prepare.search_request(schema_fields, data)
        params = _search_params(plan.request)

        assert plan.round_decimal == 3
        assert plan.output_fields == ["name"]
        assert plan.request.nq == 2
        assert list(plan.request.partition_names) == ["p1"]
        assert plan.request.dsl == "age in [1, 2]"
        assert params["metric_type"] == "IP"
        assert params["topk"] == "10"
        assert json.loads(params["params"]) == {"nprobe": 16}

    def test_explicit_shape_passes_params_through(self, schema_fields):
        data = {
            "collection_name": "coll",
            "vectors": [[1.0, 2.0]],
            "search_params": {
                "anns_field": "vec",
                "topk": "4",
                "metric_type": "L2",
                "params": '{"nprobe": 10}',
            },
        }
        params = _search_params(Prepare.search_request(schema_fields, data).request)

        assert params == {
            "anns_field": "vec",
            "topk": "4",
            "metric_type": "L2",
            "params": '{"nprobe": 10}',
        }

    def test_unsupported_scalar_is_output_field(self, schema_fields):
        tags = schema_pb2.FieldSchema(name="tags", data_type=schema_pb2.DataType.Value("Array"))
        data = {"collection_name": "coll", "vector": [1.0, 2.0]}
        plan = Prepare.search_request(schema_fields + [tags], data)

        assert plan.anns_field == "vec"
        assert plan.output_fields == ["id", "age", "name", "meta", "tags"]

    def test_explicit_nq(self, schema_fields):
        data = {"collection_name": "coll", "vectors": [[1, 2], [3, 4]], "nq": 2}
        assert Prepare.search_request(schema_fields, data).request.nq == 2

    def test_expr_wins_over_filter(self, schema_fields):
        data = {"collection_name": "coll", "vector": [1, 2], "expr": "a", "filter": "b"}
        assert Prepare.search_request(schema_fields, data).request.dsl == "a"

    @pytest.mark.parametrize(
        "search_params,params,expect",
        [
            ({"round_decimal": 2}, {"round_decimal": 4}, 2),
            (None, {"round_decimal": 4}, 4),
            ({"topk": 3}, {"round_decimal": 4}, 4),
            (None, None, -1),
        ],
    )
    def test_round_decimal_precedence(self, schema_fields, search_params, params, expect):
        data = {"collection_name": "coll", "vector": [1, 2], "params": params}
        if search_params is not None:
            data["search_params"] = search_params
        assert Prepare.search_request(schema_fields, data).round_decimal == expect

    def test_float_placeholder(self, schema_fields):
        data = {"collection_name": "coll", "vectors": [[1.0, 2.0], [3.0, 4.0]]}
        placeholder = _placeholder(Prepare.search_request(schema_fields, data).request)

        assert placeholder.tag == "$0"
        assert placeholder.type == common_pb2.PlaceholderType.Value("FloatVector")
        assert list(placeholder.values) == [
            struct.pack("<2f", 1.0, 2.0),
            struct.pack("<2f", 3.0, 4.0),
        ]

    def test_binary_placeholder(self, make_field):
        fields = [
            make_field("id", DataType.INT64, is_primary=True),
            make_field("bin", DataType.BINARY_VECTOR, dim=16),
        ]
        bits = [1, 0, 0, 0, 0, 0, 0, 1] + [0] * 8
        data = {"collection_name": "coll", "vectors": [[1, 2], b"\x03\x04", bits]}
        plan = Prepare.search_request(fields, data)
        placeholder = _placeholder(plan.request)

        assert plan.vector_type is DataType.BINARY_VECTOR
        assert placeholder.type == common_pb2.PlaceholderType.Value("BinaryVector")
        assert list(placeholder.values) == [b"\x01\x02", b"\x03\x04", b"\x81\x00"]

    def test_binary_placeholder_dim_mismatch(self, make_field):
        fields = [make_field("bin", DataType.BINARY_VECTOR, dim=16)]
        with pytest.raises(DimensionMismatchError):
            Prepare.search_request(fields, {"collection_name": "coll", "vector": [1, 2, 3]})

    def test_float_placeholder_dim_mismatch(self, schema_fields):
        with pytest.raises(DimensionMismatchError) as e:
            Prepare.search_request(schema_fields, {"collection_name": "coll", "vectors": [[1, 2], [1]]})
        assert "Search vector 1" in e.value.message

    def test_no_vector_field(self, make_field):
        fields = [make_field("id", DataType.INT64, is_primary=True)]
        with pytest.raises(MissingVectorFieldError):
            Prepare.search_request(fields, {"collection_name": "coll", "vector": [1, 2]})

    def test_unknown_anns_field(self, schema_fields):
        data = {"collection_name": "coll", "vector": [1, 2], "search_params": {"anns_field": "age"}}
        with pytest.raises(UnknownFieldError):
            Prepare.search_request(schema_fields, data)

    @pytest.mark.parametrize(
        "data",
        [
            {"vector": [1, 2]},
            {"collection_name": "", "vector": [1, 2]},
            {"collection_name": "coll"},
            {"collection_name": "coll", "vectors": []},
            {"collection_name": "coll", "vectors": [1, 2]},
            {"collection_name": "coll", "vector": [1, 2], "search_params": "nprobe=1"},
            {"collection_name": "coll", "vector": [1, 2], "output_fields": "name"},
            {"collection_name": "coll", "vector": [1, 2], "limit": -1},
            {"collection_name": "coll", "vector": [1, 2], "topk": "4"},
            ["coll"],
        ],
    )
    def test_invalid_search_data(self, schema_fields, data):
        with pytest.raises(ParamError):
            Prepare.search_request(schema_fields, data)


class TestInsertParam:
    def test_row_insert_param(self, schema_fields):
        rows = [
            {"age": 1, "name": "a", "vec": [1, 2], "meta": {}},
            {"age": 2, "name": "b", "vec": [3, 4]},
        ]
        request = Prepare.row_insert_param("coll", rows, None, schema_fields)

        assert request.collection_name == "coll"
        assert request.partition_name == ""
        assert request.num_rows == 2
        assert [f.field_name for f in request.fields_data] == ["age", "name", "vec", "meta"]

    def test_partition_name(self, schema_fields):
        rows = [{"age": 1, "name": "a", "vec": [1, 2]}]
        request = Prepare.row_insert_param("coll", rows, "p1", schema_fields)
        assert request.partition_name == "p1"

    def test_no_insertable_fields(self, make_field):
        fields = [make_field("id", DataType.INT64, is_primary=True, auto_id=True)]
        with pytest.raises(ParamError):
            Prepare.row_insert_param("coll", [{}], None, fields)


class TestOtherRequests:
    def test_query_request(self):
        req = Prepare.query_request("coll", "age > 1", ["name"], ["p1"], limit=10, offset=5)

        assert req.expr == "age > 1"
        assert list(req.output_fields) == ["name"]
        assert list(req.partition_names) == ["p1"]
        assert [(kv.key, kv.value) for kv in req.query_params] == [("limit", "10"), ("offset", "5")]

    @pytest.mark.parametrize("limit,offset", [(None, None), ("10", "5"), (True, 1.5)])
    def test_query_request_skips_non_int_paging(self, limit, offset):
        req = Prepare.query_request("coll", "age > 1", limit=limit, offset=offset)
        assert len(req.query_params) == 0

    @pytest.mark.parametrize("coll_name", [None, "", -1, 1.1, []])
    @pytest.mark.parametrize("expr", [None, "", -1, 1.1, []])
    def test_delete_request_wrong_params(self, coll_name, expr):
        with pytest.raises(MilvusException):
            Prepare.delete_request(coll_name, expr, None)

    def test_delete_request(self):
        req = Prepare.delete_request("coll", "id in [1]", "p1")
        assert (req.collection_name, req.expr, req.partition_name) == ("coll", "id in [1]", "p1")

    @pytest.mark.parametrize("names", [None, [], "coll", [""]])
    def test_flush_param_wrong_names(self, names):
        with pytest.raises(ParamError):
            Prepare.flush_param(names)

    @pytest.mark.parametrize("segment_ids", [None, [], [1, "2"], [True]])
    def test_get_flush_state_request_wrong_ids(self, segment_ids):
        with pytest.raises(ParamError):
            Prepare.get_flush_state_request(segment_ids)

    def test_get_flush_state_request(self):
        assert list(Prepare.get_flush_state_request([1, 2]).segmentIDs) == [1, 2]
