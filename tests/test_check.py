import logging

import numpy as np
import pytest
from milvus_codec import DataType, ProtocolError, __version__
from milvus_codec.client.check import (
    check_pass_param,
    check_search_params,
    is_legal_round_decimal,
    is_legal_search_data,
)
from milvus_codec.client.utils import check_status, dumps
from milvus_codec.exceptions import ErrorCode, MilvusException, ParamError
from milvus_codec.grpc_gen import common_pb2
from milvus_codec.settings import init_log

log = logging.getLogger(__name__)


class TestChecks:
    @pytest.mark.parametrize("data", [
        [[1.0, 2.0]],
        [b"\x01"],
        np.array([[1.0, 2.0]]),
        [np.array([1.0, 2.0])],
        ([1, 2],),
    ])
    def test_legal_search_data(self, data):
        assert is_legal_search_data(data)

    @pytest.mark.parametrize("data", [None, [], [1, 2], "vec", [[1.0], "x"]])
    def test_illegal_search_data(self, data):
        assert not is_legal_search_data(data)

    @pytest.mark.parametrize("round_decimal,expect", [(-1, True), (6, True), (7, False), ("2", False)])
    def test_round_decimal(self, round_decimal, expect):
        assert is_legal_round_decimal(round_decimal) is expect

    def test_unknown_param(self):
        with pytest.raises(ParamError):
            check_pass_param(nprobe=10)

    def test_check_search_params_single_vector(self):
        check_search_params({"collection_name": "coll", "vector": np.array([1.0, 2.0])})


class TestUtils:
    def test_check_status(self):
        check_status(common_pb2.Status())

        status = common_pb2.Status(error_code=common_pb2.UnexpectedError, reason="server said no")
        with pytest.raises(ProtocolError) as e:
            check_status(status)
        assert e.value.message == "server said no"
        assert str(e.value) == "<ProtocolError: (code=1, message=server said no)>"

    def test_dumps(self):
        assert dumps({"nprobe": 10}) == '{"nprobe":10}'
        assert dumps(10) == "10"
        assert dumps("L2") == "L2"


class TestExceptions:
    def test_default_codes(self):
        assert MilvusException().code == ErrorCode.UNEXPECTED_ERROR
        assert ParamError().code == ErrorCode.ILLEGAL_ARGUMENT

    def test_package_exports(self):
        assert DataType.FLOAT_VECTOR == 101
        assert isinstance(__version__, str)

    def test_init_log(self):
        init_log("DEBUG", colorful=True)
        assert logging.getLogger("milvus_codec").level == logging.DEBUG
        init_log("WARNING")
        assert logging.getLogger("milvus_codec").level == logging.WARNING
