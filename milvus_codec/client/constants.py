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

from milvus_codec.settings import Config

DEFAULT_TOPK = Config.DEFAULT_TOPK
DEFAULT_METRIC_TYPE = Config.DEFAULT_METRIC_TYPE

# tag $0 is hard coded in the server when dsl type is BoolExprV1
PLACEHOLDER_TAG = "$0"

DIM = "dim"
BITS_PER_BYTE = 8

ANNS_FIELD = "anns_field"
TOPK = "topk"
OFFSET = "offset"
METRIC_TYPE = "metric_type"
PARAMS = "params"
ROUND_DECIMAL = "round_decimal"
NO_ROUNDING = -1

MILVUS_LIMIT = "limit"
