import pytest
from milvus_codec.client.search_result import SearchResult, format_score, splice_topks
from milvus_codec.client.types import DataType
from milvus_codec.exceptions import DecodeError
from milvus_codec.grpc_gen import schema_pb2


def _result_data(topks, scores, int_ids=None, str_ids=None):
    res = schema_pb2.SearchResultData(
        num_queries=len(topks),
        top_k=max(topks, default=0),
        topks=topks,
        scores=scores,
    )
    if int_ids is not None:
        res.ids.int_id.data.extend(int_ids)
    if str_ids is not None:
        res.ids.str_id.data.extend(str_ids)
    return res


def _add_string_column(res, name, values):
    field_data = res.fields_data.add(type=int(DataType.VARCHAR), field_name=name)
    field_data.scalars.string_data.data.extend(values)


def _add_vector_column(res, name, dim, flat):
    field_data = res.fields_data.add(type=int(DataType.FLOAT_VECTOR), field_name=name)
    field_data.vectors.dim = dim
    field_data.vectors.float_vector.data.extend(flat)


class TestSpliceTopks:
    def test_windows(self):
        scores = [0.1, 0.2, 0.3, 0.4, 0.5]
        assert list(splice_topks([2, 3], scores)) == [
            (0, 0, 0, 0.1),
            (0, 1, 1, 0.2),
            (1, 0, 2, 0.3),
            (1, 1, 3, 0.4),
            (1, 2, 4, 0.5),
        ]

    def test_empty_window(self):
        assert [t[:3] for t in splice_topks([0, 2], [1.0, 2.0])] == [(1, 0, 0), (1, 1, 1)]

    def test_scores_exhausted(self):
        with pytest.raises(DecodeError):
            list(splice_topks([2, 3], [0.1, 0.2, 0.3]))


class TestFormatScore:
    @pytest.mark.parametrize(
        "score,round_decimal,expect",
        [
            (3.142000047683716, 3, 3.142),
            (3.142000047683716, -1, 3.142000047683716),
            (3.142000047683716, None, 3.142000047683716),
            (2.6, 0, 3.0),
        ],
    )
    def test_format_score(self, score, round_decimal, expect):
        assert format_score(score, round_decimal) == expect


class TestSearchResult:
    @pytest.fixture
    def result_data(self):
        res = _result_data([2, 3], [0.5, 0.25, 1.0, 2.0, 4.0], int_ids=[10, 11, 12, 13, 14])
        _add_string_column(res, "name", ["a", "b", "c", "d", "e"])
        _add_vector_column(res, "vec", 2, list(range(10)))
        return res

    def test_rows(self, result_data):
        res = SearchResult(result_data)

        assert len(res) == 5
        assert res.nq == 2
        assert res.topks == [2, 3]
        assert res[0] == {"score": 0.5, "id": 10, "name": "a", "vec": [0.0, 1.0]}
        assert res[2] == {"score": 1.0, "id": 12, "name": "c", "vec": [4.0, 5.0]}
        assert res[4]["vec"] == [8.0, 9.0]

    def test_by_query(self, result_data):
        grouped = SearchResult(result_data).by_query()
        assert [len(hits) for hits in grouped] == [2, 3]
        assert [hit["id"] for hit in grouped[1]] == [12, 13, 14]

    def test_projects_every_returned_column(self):
        res_data = _result_data([2], [1.0, 2.0], int_ids=[1, 2])
        res_data.output_fields.extend(["*"])
        _add_string_column(res_data, "name", ["a", "b"])
        meta = res_data.fields_data.add(type=int(DataType.JSON), field_name="$meta", is_dynamic=True)
        meta.scalars.json_data.data.extend([b'{"color": "red"}', b"{}"])

        res = SearchResult(res_data)

        assert res[0] == {"score": 1.0, "id": 1, "name": "a", "$meta": {"color": "red"}}
        assert res[1]["$meta"] == {}

    def test_round_decimal(self):
        res = SearchResult(_result_data([1], [3.142], int_ids=[1]), round_decimal=3)
        assert res[0]["score"] == 3.142

    def test_no_rounding_keeps_float32_score(self):
        res = SearchResult(_result_data([1], [3.142], int_ids=[1]))
        assert res[0]["score"] != 3.142
        assert res[0]["score"] == pytest.approx(3.142)

    def test_str_ids(self):
        res = SearchResult(_result_data([2], [1.0, 2.0], str_ids=["x", "y"]))
        assert [hit["id"] for hit in res] == ["x", "y"]

    def test_missing_ids_and_short_columns(self):
        res_data = _result_data([2], [1.0, 2.0])
        _add_string_column(res_data, "name", ["a"])
        res = SearchResult(res_data)

        assert res[0] == {"score": 1.0, "id": None, "name": "a"}
        assert res[1] == {"score": 2.0, "id": None, "name": None}

    def test_empty(self):
        res = SearchResult(None)
        assert res == []
        assert res.nq == 0
        assert res.by_query() == []

    def test_scores_exhausted(self):
        with pytest.raises(DecodeError):
            SearchResult(_result_data([3], [1.0], int_ids=[1, 2, 3]))

    def test_str_only_prints_ten(self):
        res = SearchResult(_result_data([12], [1.0] * 12, int_ids=list(range(12))))
        assert "2 results remaining" in str(res)
