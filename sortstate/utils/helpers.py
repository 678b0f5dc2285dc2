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
import re


def camel_to_snake(s: str) -> str:
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", s)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def humanize(name: str) -> str:
    """Turn an attribute name into a label.

    >>> humanize("first_name")
    'First Name'

    >>> humanize("createTime")
    'Create Time'

    >>> humanize("author.name")
    'Author Name'
    """
    words = camel_to_snake(name).replace(".", "_").replace("-", "_").split("_")
    return " ".join(word.capitalize() for word in words if word)
