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

from starlette.datastructures import ImmutableMultiDict

from sortstate.sorting.definitions import SortSpecification, VirtualAttribute
from sortstate.types import DirectionMap, QueryItems, QueryParams

if TYPE_CHECKING:
    from sortstate.routing import UrlBuilder
    from sortstate.schema import Schema


def next_state(directions: DirectionMap, attribute: str, multi_sort: bool) -> DirectionMap:
    """Return the sort directions after the user toggles an attribute.

    A sorted attribute flips direction, an unsorted one becomes ascending. With multi sort the toggled attribute
    becomes the primary sort and the other attributes keep their relative order after it.

    >>> dict(next_state({"a": False}, "a", multi_sort=False))
    {'a': True}

    >>> dict(next_state({"a": False, "b": True}, "b", multi_sort=True))
    {'b': False, 'a': False}
    """
    descending = not directions[attribute] if attribute in directions else False
    if not multi_sort:
        return MappingProxyType({attribute: descending})

    remaining = {key: value for key, value in directions.items() if key != attribute}
    return MappingProxyType({attribute: descending} | remaining)


def encode_directions(spec: SortSpecification, directions: DirectionMap) -> str:
    """Encode sort directions into the value of the sort request parameter."""
    descending_suffix = f"{spec.direction_separator}{spec.desc_tag}"
    return spec.attribute_separator.join(
        f"{attribute}{descending_suffix}" if descending else attribute for attribute, descending in directions.items()
    )


def _query_items(params: QueryParams | None) -> QueryItems:
    if params is None:
        return []
    if isinstance(params, ImmutableMultiDict):
        return params.multi_items()
    return list(params.items())


def replace_param(items: QueryItems, name: str, value: str) -> QueryItems:
    """Replace all values of a query parameter with a single value.

    >>> replace_param([("status", "open"), ("sort", "a"), ("status", "closed"), ("sort", "b")], "sort", "c")
    [('status', 'open'), ('sort', 'c'), ('status', 'closed')]

    >>> replace_param([("page", "2")], "sort", "c")
    [('page', '2'), ('sort', 'c')]
    """
    names = [key for key, _ in items]
    position = names.index(name) if name in names else len(items)
    replaced = [(key, item_value) for key, item_value in items if key != name]
    replaced.insert(position, (name, value))
    return replaced


def create_url(
    spec: SortSpecification,
    directions: DirectionMap,
    url_builder: "UrlBuilder",
    request_params: QueryParams | None = None,
) -> str:
    """Create a URL that requests the given sort directions.

    The sort parameter is merged into the fixed ``params`` of the specification or, when those are not set, into a
    copy of the parameters of the current request. Repeated parameters are kept, the sort parameter keeps its
    position.
    """
    base_params = request_params if spec.params is None else spec.params
    params = replace_param(_query_items(base_params), spec.sort_var, encode_directions(spec, directions))
    return url_builder.build_url(spec.route, params)


def resolve_label(spec: SortSpecification, attribute: str, schema: "Schema | None" = None) -> str:
    """Return the label for an attribute.

    A virtual attribute with a label uses that label, other sortable attributes are labelled by the schema using the
    name they resolve to. Attributes that can not be sorted on are returned unchanged.
    """
    definition = spec.resolve_attribute(attribute, schema)
    if definition is None:
        return attribute

    if isinstance(definition, VirtualAttribute):
        if definition.label is not None:
            return definition.label
        name = attribute
    else:
        name = definition.name

    return schema.attribute_label(name) if schema is not None else name
