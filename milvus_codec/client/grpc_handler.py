import logging
import time
from typing import Any, Dict, List, Mapping, Optional

import grpc

from milvus_codec.decorators import error_handler
from milvus_codec.exceptions import ParamError
from milvus_codec.grpc_gen import milvus_pb2_grpc
from milvus_codec.settings import Config

from .abstract import CollectionSchema, MutationResult
from .check import check_search_params
from .entity_helper import fields_data_to_rows
from .prepare import Prepare
from .search_result import SearchResult
from .utils import check_status

logger = logging.getLogger(__name__)


class GrpcHandler:
    """Drives the codec against a Milvus service stub.

    The channel (or any object with the ``MilvusServiceStub`` call surface)
    is owned by the caller; connection setup, authentication and retries
    happen outside of this class.
    """

    def __init__(
        self,
        channel: Optional[grpc.Channel] = None,
        stub: Optional[Any] = None,
    ) -> None:
        if stub is None and channel is None:
            raise ParamError(message="GrpcHandler requires a channel or a stub")
        self._channel = channel
        self._stub = stub if stub is not None else milvus_pb2_grpc.MilvusServiceStub(channel)

    @error_handler()
    def describe_collection(self, collection_name: str, timeout: Optional[float] = None):
        request = Prepare.describe_collection_request(collection_name)
        response = self._stub.DescribeCollection(request, timeout=timeout)
        check_status(response.status)
        return CollectionSchema(raw=response)

    @error_handler(func_name="insert")
    def insert(
        self,
        collection_name: str,
        rows: List[Dict],
        partition_name: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        # schema is fetched on every call, never cached
        schema = self.describe_collection(collection_name, timeout=timeout)
        request = Prepare.row_insert_param(collection_name, rows, partition_name, schema.fields)
        response = self._stub.Insert(request, timeout=timeout)
        check_status(response.status)
        m = MutationResult(response)
        logger.debug(f"inserted into {collection_name}: {m}")
        return m

    @error_handler()
    def delete(
        self,
        collection_name: str,
        expr: str,
        partition_name: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        request = Prepare.delete_request(collection_name, expr, partition_name)
        response = self._stub.Delete(request, timeout=timeout)
        check_status(response.status)
        return MutationResult(response)

    @error_handler()
    def search(self, data: Mapping, timeout: Optional[float] = None):
        check_search_params(data)
        schema = self.describe_collection(data["collection_name"], timeout=timeout)
        plan = Prepare.search_request(schema.fields, data)

        response = self._stub.Search(plan.request, timeout=timeout)
        check_status(response.status)
        results = response.results if response.HasField("results") else None
        return SearchResult(results, round_decimal=plan.round_decimal)

    @error_handler()
    def query(
        self,
        collection_name: str,
        expr: str,
        output_fields: Optional[List[str]] = None,
        partition_names: Optional[List[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        request = Prepare.query_request(
            collection_name, expr, output_fields, partition_names, limit=limit, offset=offset
        )
        response = self._stub.Query(request, timeout=timeout)
        check_status(response.status)

        rows = fields_data_to_rows(response.fields_data)
        logger.debug(f"query on {collection_name} decoded {len(rows)} rows")
        return rows

    @error_handler()
    def flush(self, collection_names: List[str], timeout: Optional[float] = None):
        request = Prepare.flush_param(collection_names)
        response = self._stub.Flush(request, timeout=timeout)
        check_status(response.status)
        return response

    @error_handler()
    def get_flush_state(self, segment_ids: List[int], timeout: Optional[float] = None) -> bool:
        request = Prepare.get_flush_state_request(segment_ids)
        response = self._stub.GetFlushState(request, timeout=timeout)
        check_status(response.status)
        return response.flushed

    def _wait_for_flushed(self, segment_ids: List[int], timeout: Optional[float] = None):
        flush_ret = False
        while not flush_ret:
            flush_ret = self.get_flush_state(segment_ids, timeout=timeout)
            if not flush_ret:
                time.sleep(Config.FlushPollInterval)

    @error_handler()
    def flush_sync(self, collection_names: List[str], timeout: Optional[float] = None):
        """Flush and block until every returned segment reports flushed.

        There is no overall deadline, ``timeout`` bounds each single call.
        """
        response = self.flush(collection_names, timeout=timeout)

        segment_ids = []
        for collection_name in response.coll_segIDs:
            segment_ids.extend(response.coll_segIDs[collection_name].data)

        if segment_ids:
            self._wait_for_flushed(segment_ids, timeout=timeout)
        return response
