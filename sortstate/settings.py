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

from pydantic_settings import BaseSettings


class SortSettings(BaseSettings):
    SORT_VAR: str = "sort"
    DESC_TAG: str = "desc"
    ATTRIBUTE_SEPARATOR: str = "-"
    DIRECTION_SEPARATOR: str = "."
    MULTI_SORT: bool = False
    DEFAULT_DIALECT: str = "postgresql"
    LOG_LEVEL: str = "DEBUG"


sort_settings = SortSettings()
