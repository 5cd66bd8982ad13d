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

from enum import IntEnum


class ErrorCode(IntEnum):
    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    ILLEGAL_ARGUMENT = 5
    ILLEGAL_DIMENSION = 7
    DECODE_ERROR = 13


class MilvusException(Exception):
    def __init__(
        self,
        code: int = ErrorCode.UNEXPECTED_ERROR,
        message: str = "",
    ) -> None:
        super().__init__()
        self._code = code
        self._message = message

    @property
    def code(self):
        return self._code

    @property
    def message(self):
        return self._message

    def __str__(self) -> str:
        return f"<{type(self).__name__}: (code={self.code}, message={self.message})>"


class ParamError(MilvusException):
    """Raise when params are incorrect"""

    def __init__(self, code: int = ErrorCode.ILLEGAL_ARGUMENT, message: str = "") -> None:
        super().__init__(code=code, message=message)


class ValidationError(ParamError):
    """Raise when rows, vectors or schema fail validation before any wire call"""


class SchemaError(ValidationError):
    """Raise when the collection schema cannot drive the codec"""


class UnknownFieldError(ValidationError):
    """Raise when a row references a field the schema doesn't have"""


class DimensionMismatchError(ValidationError):
    """Raise when a vector length doesn't agree with the field dimension"""

    def __init__(self, code: int = ErrorCode.ILLEGAL_DIMENSION, message: str = "") -> None:
        super().__init__(code=code, message=message)


class UnsupportedTypeError(ValidationError):
    """Raise when a declared data type has no wire encoding"""


class MissingVectorFieldError(ValidationError):
    """Raise when a search targets a collection without vector field"""


class DataNotMatchException(MilvusException):
    """Raise when insert data isn't match with schema"""


class ProtocolError(MilvusException):
    """Raise when the server answers with a non-zero error code"""


class DecodeError(MilvusException):
    """Raise when a response column can't be decoded"""

    def __init__(self, code: int = ErrorCode.DECODE_ERROR, message: str = "") -> None:
        super().__init__(code=code, message=message)


class ExceptionsMessage:
    CollectionNameRequired = "Collection name is required."
    CollectionNamesRequired = "Collection name list can not be None or empty."
    InsertRowsRequired = "Insert rows must be a non-empty list of dict."
    InsertRowType = "Insert row %d must be a dict, got %s."
    InsertUnexpectedField = "Insert row %d has field `%s` which is not in the collection schema."
    InsertMissedField = "Insert missed field `%s` at rows %s, every row must set it."
    BinaryVectorDim = (
        "The length of binary vector field `%s` must be dimension / 8 = %d, got %d at row %d."
    )
    FloatVectorDim = "The length of float vector field `%s` must be dimension = %d, got %d at row %d."
    SearchVectorDim = "Search vector %d of field `%s` has length %d, expect %s."
    PackBinaryLength = "Binary vector bits must be a multiple of 8, got %d."
    NoDimension = "Vector field `%s` must have a positive integer `dim` type param, got %r."
    UnsupportedDataType = "Data type is not support: %r."
    NoVector = "No vector field is found."
    SearchVectorRequired = "Search requires `vector` or `vectors`."
    DeleteParams = "Delete requires collection_name and expr."
    SegmentIDsRequired = "Segment ids are required to get flush state."
    JSONDecodeFailed = "Failed to decode JSON of field `%s` at entry %d: %s"
    UnknownDiscriminant = "Field `%s` has unexpected data key %r."
    VectorDimInvalid = "Vector field `%s` has invalid dimension %d for %d elements."
    ScoresExhausted = "Search result holds %d scores, but topks require more at query %d."
