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
from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from sortstate.sorting.definitions import SortSpecification
from sortstate.types import DirectionMap

if TYPE_CHECKING:
    from sortstate.schema import Schema

logger = structlog.get_logger(__name__)


def parse_directions(spec: SortSpecification, raw_token: str | None, schema: "Schema | None" = None) -> DirectionMap:
    """Parse an encoded sort request into sort directions.

    The token lists attributes separated by the attribute separator; an attribute may be followed by the direction
    separator and the desc tag to request a descending sort, e.g. ``name-created.desc``.

    Attributes that can not be sorted on are dropped. Only the first sortable attribute is used unless the
    specification allows multi sort. A repeated attribute keeps its first position but takes its last direction.

    Args:
        spec: the sort specification
        raw_token: the value of the sort request parameter, if any
        schema: the schema of the sorted entity

    Returns a read-only mapping of attribute name to a descending flag, ordered by sort priority.
    """
    directions: dict[str, bool] = {}
    if not raw_token:
        return MappingProxyType(directions)

    for token in raw_token.split(spec.attribute_separator):
        attribute, separator, tag = token.partition(spec.direction_separator)
        descending = bool(separator) and tag == spec.desc_tag

        if spec.resolve_attribute(attribute, schema) is None:
            logger.debug("Ignoring unsortable attribute", attribute=attribute)
            continue

        directions[attribute] = descending
        if not spec.multi_sort:
            break

    return MappingProxyType(directions)


def direction_of(directions: DirectionMap, attribute: str) -> bool | None:
    """Return True for descending, False for ascending and None when the attribute is not sorted on."""
    return directions.get(attribute)
