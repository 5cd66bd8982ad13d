from typing import Any, Union

import ujson

from milvus_codec.exceptions import ProtocolError
from milvus_codec.grpc_gen.common_pb2 import Status


def check_status(status: Status):
    if status.error_code != 0:
        raise ProtocolError(status.error_code, status.reason)


def dumps(v: Union[dict, Any]) -> str:
    return ujson.dumps(v) if isinstance(v, dict) else str(v)
