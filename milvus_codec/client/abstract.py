import logging
from typing import Any, Dict, List

import ujson

from .constants import DIM
from .types import DataType

logger = logging.getLogger(__name__)


class FieldSchema:
    def __init__(self, raw: Any):
        self._raw = raw

        self.field_id = 0
        self.name = None
        self.is_primary = False
        self.description = None
        self.auto_id = False
        self.type = DataType.UNKNOWN
        self.params = {}
        self.__pack(self._raw)

    def __pack(self, raw: Any):
        self.field_id = raw.fieldID
        self.name = raw.name
        self.is_primary = raw.is_primary_key
        self.description = raw.description
        self.auto_id = raw.autoID
        # kept as the raw wire number, resolving happens when the codec needs it
        self.type = raw.data_type

        for type_param in raw.type_params:
            if type_param.key == "params":
                try:
                    self.params[type_param.key] = ujson.loads(type_param.value)
                except Exception as e:
                    logger.error(
                        f"FieldSchema::__pack::Failed to load JSON type_param.value: {e}, original data: {type_param.value}"
                    )
                    raise
            elif type_param.key == DIM:
                try:
                    self.params[DIM] = int(type_param.value)
                except ValueError:
                    # left as is, schema resolution reports it
                    self.params[DIM] = type_param.value
            else:
                self.params[type_param.key] = type_param.value

    def dict(self):
        _dict = {
            "field_id": self.field_id,
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "params": self.params or {},
        }
        if self.auto_id:
            _dict["auto_id"] = True
        if self.is_primary:
            _dict["is_primary"] = self.is_primary
        return _dict


class CollectionSchema:
    def __init__(self, raw: Any):
        self._raw = raw

        self.collection_name = None
        self.description = None
        self.fields: List[FieldSchema] = []
        self.auto_id = False
        self.collection_id = 0
        self.enable_dynamic_field = False

        if self._raw is not None:
            self.__pack(self._raw)

    def __pack(self, raw: Any):
        self.collection_name = raw.schema.name
        self.description = raw.schema.description
        self.auto_id = raw.schema.autoID
        self.collection_id = raw.collectionID
        self.enable_dynamic_field = raw.schema.enable_dynamic_field
        self.fields = [FieldSchema(f) for f in raw.schema.fields]

    def dict(self):
        if self._raw is None:
            return {}
        return {
            "collection_name": self.collection_name,
            "auto_id": self.auto_id,
            "description": self.description,
            "fields": [f.dict() for f in self.fields],
            "collection_id": self.collection_id,
            "enable_dynamic_field": self.enable_dynamic_field,
        }

    def __repr__(self) -> str:
        return str(self.dict())


class MutationResult:
    def __init__(self, raw: Any):
        self._raw = raw
        self._primary_keys = []
        self._insert_cnt = 0
        self._delete_cnt = 0
        self._timestamp = 0
        self._succ_index = []
        self._err_index = []

        self._pack(raw)

    @property
    def primary_keys(self):
        return self._primary_keys

    @property
    def insert_count(self):
        return self._insert_cnt

    @property
    def delete_count(self):
        return self._delete_cnt

    @property
    def timestamp(self):
        return self._timestamp

    @property
    def succ_count(self):
        return len(self._succ_index)

    @property
    def err_count(self):
        return len(self._err_index)

    @property
    def succ_index(self):
        return self._succ_index

    @property
    def err_index(self):
        return self._err_index

    def __str__(self):
        return (
            f"(insert count: {self._insert_cnt}, delete count: {self._delete_cnt}, "
            f"timestamp: {self._timestamp}, success count: {self.succ_count}, "
            f"err count: {self.err_count})"
        )

    __repr__ = __str__

    def _pack(self, raw: Any):
        which = raw.IDs.WhichOneof("id_field")
        if which == "int_id":
            self._primary_keys = list(raw.IDs.int_id.data)
        elif which == "str_id":
            self._primary_keys = list(raw.IDs.str_id.data)

        self._insert_cnt = raw.insert_cnt
        self._delete_cnt = raw.delete_cnt
        self._timestamp = raw.timestamp
        self._succ_index = list(raw.succ_index)
        self._err_index = list(raw.err_index)

    def dict(self) -> Dict[str, Any]:
        return {
            "insert_count": self.insert_count,
            "delete_count": self.delete_count,
            "primary_keys": self.primary_keys,
            "succ_index": self.succ_index,
            "err_index": self.err_index,
        }
