from collections.abc import Mapping
from typing import Any, Callable

import numpy as np

from milvus_codec.exceptions import ExceptionsMessage, ParamError


def is_legal_table_name(table_name: Any) -> bool:
    return table_name and isinstance(table_name, str)


def is_legal_field_name(field_name: Any) -> bool:
    return field_name and isinstance(field_name, str)


def is_legal_partition_name(tag: Any) -> bool:
    return tag is not None and isinstance(tag, str)


def is_legal_partition_name_array(tag_array: Any) -> bool:
    if tag_array is None:
        return True

    if not isinstance(tag_array, list):
        return False

    return all(is_legal_partition_name(tag) for tag in tag_array)


def is_legal_output_fields(output_fields: Any) -> bool:
    if output_fields is None:
        return True

    if not isinstance(output_fields, list):
        return False

    return all(is_legal_field_name(field) for field in output_fields)


def is_legal_topk(topk: Any) -> bool:
    return topk is None or (isinstance(topk, int) and not isinstance(topk, bool) and topk > 0)


def is_legal_round_decimal(round_decimal: Any) -> bool:
    return round_decimal is None or (isinstance(round_decimal, int) and -2 < round_decimal < 7)


def is_legal_expr(expr: Any) -> bool:
    return expr is None or isinstance(expr, str)


def is_legal_search_data(data: Any) -> bool:
    if not isinstance(data, (list, tuple, np.ndarray)) or len(data) == 0:
        return False

    return all(isinstance(vector, (list, tuple, bytes, bytearray, np.ndarray)) for vector in data)


def is_legal_segment_ids(segment_ids: Any) -> bool:
    if not isinstance(segment_ids, (list, tuple)) or len(segment_ids) == 0:
        return False
    return all(isinstance(i, int) and not isinstance(i, bool) for i in segment_ids)


def _raise_param_error(param_name: str, param_value: Any) -> None:
    raise ParamError(message=f"`{param_name}` value {param_value} is illegal")


class ParamChecker:
    def __init__(self) -> None:
        self.check_dict = {
            "collection_name": is_legal_table_name,
            "field_name": is_legal_field_name,
            "partition_name": is_legal_partition_name,
            "partition_name_array": is_legal_partition_name_array,
            "output_fields": is_legal_output_fields,
            "topk": is_legal_topk,
            "round_decimal": is_legal_round_decimal,
            "expr": is_legal_expr,
            "search_data": is_legal_search_data,
            "segment_ids": is_legal_segment_ids,
        }

    def check(self, key: str, value: Callable):
        if key in self.check_dict:
            if not self.check_dict[key](value):
                _raise_param_error(key, value)
        else:
            raise ParamError(message=f"unknown param `{key}`")


_checker = ParamChecker()


def check_pass_param(*_args: Any, **kwargs: Any) -> None:
    for key, value in kwargs.items():
        _checker.check(key, value)


def check_search_params(data: Any) -> None:
    """Validate the caller-facing part of a search before the schema is fetched."""
    if not isinstance(data, Mapping):
        raise ParamError(message=f"Search data must be a dict, got {type(data).__name__}")

    if not is_legal_table_name(data.get("collection_name")):
        raise ParamError(message=ExceptionsMessage.CollectionNameRequired)

    vectors = data.get("vectors")
    if vectors is None and data.get("vector") is not None:
        vectors = [data["vector"]]
    if vectors is None:
        raise ParamError(message=ExceptionsMessage.SearchVectorRequired)

    search_params = data.get("search_params")
    if search_params is not None and not isinstance(search_params, Mapping):
        raise ParamError(message=f"Search params must be a dict, got {type(search_params)}")

    check_pass_param(
        search_data=vectors,
        output_fields=data.get("output_fields"),
        partition_name_array=data.get("partition_names"),
    )
