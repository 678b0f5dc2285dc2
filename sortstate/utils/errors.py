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
from typing import Any


class SortConfigurationError(ValueError):
    """A sort specification is inconsistent with how it is being used.

    These errors point at a developer misconfiguration and never at user input; requested attributes that can not be
    sorted on are dropped instead.
    """

    message: str
    details: dict[str, Any]

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class VirtualAttributeError(SortConfigurationError):
    def __init__(self, attribute: str) -> None:
        super().__init__(f'Virtual attribute {attribute} must specify "asc" and "desc" options.', attribute=attribute)
        self.attribute = attribute
