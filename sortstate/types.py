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
from collections.abc import Mapping
from enum import Enum
from typing import Any


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_descending(cls, descending: bool) -> "SortOrder":
        return cls.DESC if descending else cls.ASC


DirectionMap = Mapping[str, bool]
QueryParams = Mapping[str, Any]
QueryItems = list[tuple[str, Any]]
HtmlOptions = dict[str, str]
