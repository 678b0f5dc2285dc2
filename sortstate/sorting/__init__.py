# Copyright 2019-2025 SURF, GÉANT, ESnet.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from sortstate.sorting.definitions import (
    AttributeDefinition,
    PlainAttribute,
    SortSpecification,
    VirtualAttribute,
    normalize_attributes,
)
from sortstate.sorting.directions import direction_of, parse_directions
from sortstate.sorting.links import create_url, encode_directions, next_state, resolve_label
from sortstate.sorting.order import Selectable, append_order, apply_order, build_order_clause
from sortstate.sorting.sort import SortRequest
from sortstate.types import SortOrder

__all__ = [
    "AttributeDefinition",
    "PlainAttribute",
    "Selectable",
    "SortOrder",
    "SortRequest",
    "SortSpecification",
    "VirtualAttribute",
    "append_order",
    "apply_order",
    "build_order_clause",
    "create_url",
    "direction_of",
    "encode_directions",
    "next_state",
    "normalize_attributes",
    "parse_directions",
    "resolve_label",
]
