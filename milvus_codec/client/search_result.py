import logging
from collections import deque
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from milvus_codec.exceptions import DecodeError, ExceptionsMessage
from milvus_codec.grpc_gen import schema_pb2

from .constants import NO_ROUNDING
from .entity_helper import extract_column

logger = logging.getLogger(__name__)


def splice_topks(
    topks: Iterable[int], scores: Iterable[float]
) -> Iterator[Tuple[int, int, int, float]]:
    """Walk the flat score list window by window.

    Yields ``(query_index, rank, cursor, score)`` where ``cursor`` is the
    absolute position of the hit in the flat id, score and column arrays.
    """
    queue = deque(scores)
    cursor = 0
    for query_index, topk in enumerate(topks):
        for rank in range(topk):
            if not queue:
                raise DecodeError(message=ExceptionsMessage.ScoresExhausted % (cursor, query_index))
            yield query_index, rank, cursor, queue.popleft()
            cursor += 1


def format_score(score: float, round_decimal: Optional[int] = NO_ROUNDING) -> float:
    if round_decimal is None or round_decimal == NO_ROUNDING:
        return score
    return round(score, round_decimal)


def _ids_of(res: schema_pb2.SearchResultData) -> List[Union[int, str]]:
    which = res.ids.WhichOneof("id_field")
    if which == "int_id":
        return list(res.ids.int_id.data)
    if which == "str_id":
        return list(res.ids.str_id.data)
    return []


class SearchResult(list):
    """A flat list of hits, nq * topk dicts in query then rank order.

    Examples:
        >>> res = handler.search(data)
        >>> res[0]
        {"score": 0.1, "id": 1, "name": "a", "vector": [1.0, 2.0]}

        >>> res.topks
        [2, 3]

        >>> res.by_query()[1]
        [{"score": ...}, {"score": ...}, {"score": ...}]
    """

    def __init__(
        self,
        res: Optional[schema_pb2.SearchResultData],
        round_decimal: Optional[int] = NO_ROUNDING,
    ):
        self.topks: List[int] = list(res.topks) if res is not None else []
        super().__init__(self._parse_search_result_data(res, round_decimal))

    @property
    def nq(self) -> int:
        return len(self.topks)

    def by_query(self) -> List[List[Dict[str, Any]]]:
        grouped, start = [], 0
        for topk in self.topks:
            grouped.append(list(self[start : start + topk]))
            start += topk
        return grouped

    def __str__(self) -> str:
        """Only print at most 10 results"""
        reminder = f" ... and {len(self) - 10} results remaining" if len(self) > 10 else ""
        return f"data: {list(self[:10])}{reminder}"

    __repr__ = __str__

    @staticmethod
    def _parse_search_result_data(
        res: Optional[schema_pb2.SearchResultData],
        round_decimal: Optional[int],
    ) -> List[Dict[str, Any]]:
        if res is None:
            return []

        all_pks = _ids_of(res)
        # every returned column is projected, "*" and dynamic fields included
        columns = [(field_data.field_name, extract_column(field_data)) for field_data in res.fields_data]

        hits = []
        for _, _, cursor, score in splice_topks(res.topks, res.scores):
            hit = {
                "score": format_score(score, round_decimal),
                "id": all_pks[cursor] if cursor < len(all_pks) else None,
            }
            for name, values in columns:
                hit[name] = values[cursor] if cursor < len(values) else None
            hits.append(hit)

        logger.debug(f"decoded {len(hits)} hits for {len(res.topks)} queries")
        return hits
