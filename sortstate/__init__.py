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

"""Sort state resolution and ordering translation for list views."""

__version__ = "1.0.0"

from sortstate.settings import sort_settings
from sortstate.sorting import (
    PlainAttribute,
    SortOrder,
    SortRequest,
    SortSpecification,
    VirtualAttribute,
    build_order_clause,
    encode_directions,
    next_state,
    parse_directions,
)
from sortstate.utils.errors import SortConfigurationError, VirtualAttributeError

__all__ = [
    "sort_settings",
    "PlainAttribute",
    "VirtualAttribute",
    "SortOrder",
    "SortRequest",
    "SortSpecification",
    "SortConfigurationError",
    "VirtualAttributeError",
    "build_order_clause",
    "encode_directions",
    "next_state",
    "parse_directions",
]
