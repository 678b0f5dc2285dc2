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
from typing import TYPE_CHECKING

from sortstate.rendering import HtmlLinkRenderer, LinkRenderer
from sortstate.sorting import links, order
from sortstate.sorting.definitions import AttributeDefinition, SortSpecification
from sortstate.sorting.directions import direction_of, parse_directions
from sortstate.sorting.order import Selectable
from sortstate.types import DirectionMap, HtmlOptions, QueryParams, SortOrder
from sortstate.utils.errors import SortConfigurationError

if TYPE_CHECKING:
    from sortstate.routing import UrlBuilder
    from sortstate.schema import Schema


class SortRequest:
    """The sort state of a single request.

    The sort directions are parsed once from the query parameters when the object is created and are shared by the
    order clause and the sort links.

    Args:
        spec: the sort specification
        query_params: the query parameters of the current request
        schema: the schema of the sorted entity
        url_builder: builds the URLs of sort links
        renderer: renders sort links, defaults to `HtmlLinkRenderer`
    """

    def __init__(
        self,
        spec: SortSpecification,
        query_params: QueryParams | None = None,
        schema: "Schema | None" = None,
        url_builder: "UrlBuilder | None" = None,
        renderer: LinkRenderer | None = None,
    ) -> None:
        self.spec = spec
        self.query_params = query_params or {}
        self.schema = schema
        self.url_builder = url_builder
        self.renderer = renderer or HtmlLinkRenderer()
        self._directions = parse_directions(spec, self.query_params.get(spec.sort_var), schema)

    @property
    def directions(self) -> DirectionMap:
        return self._directions

    def direction(self, attribute: str) -> bool | None:
        return direction_of(self._directions, attribute)

    def resolve_attribute(self, attribute: str) -> AttributeDefinition | None:
        return self.spec.resolve_attribute(attribute, self.schema)

    def order_by(self) -> str | None:
        return order.build_order_clause(self.spec, self._directions, self.schema)

    def append_order(self, existing: str | None) -> str | None:
        return order.append_order(existing, self.order_by())

    def apply_order(self, query: Selectable) -> Selectable:
        return order.apply_order(query, self.order_by())

    def next_state(self, attribute: str) -> DirectionMap:
        return links.next_state(self._directions, attribute, self.spec.multi_sort)

    def create_url(self, directions: DirectionMap) -> str:
        if self.url_builder is None:
            raise SortConfigurationError("A url builder is required to create sort URLs")
        return links.create_url(self.spec, directions, self.url_builder, self.query_params)

    def url_for(self, attribute: str) -> str:
        return self.create_url(self.next_state(attribute))

    def resolve_label(self, attribute: str) -> str:
        return links.resolve_label(self.spec, attribute, self.schema)

    def link(self, attribute: str, label: str | None = None, html_options: HtmlOptions | None = None) -> str:
        """Generate a link that toggles the sort on an attribute.

        The link carries a css class ``asc`` or ``desc`` with the current direction of the attribute, while its URL
        requests the toggled direction. Attributes that can not be sorted on are returned as their label.

        Args:
            attribute: the attribute name as used in the sort request
            label: the link label, resolved with `resolve_label` when omitted
            html_options: additional attributes of the link element
        """
        if label is None:
            label = self.resolve_label(attribute)
        if self.resolve_attribute(attribute) is None:
            return label

        options = dict(html_options or {})
        if (descending := self.direction(attribute)) is not None:
            css_class = SortOrder.from_descending(descending).value
            options["class"] = f"{options['class']} {css_class}" if options.get("class") else css_class

        return self.renderer.render_link(label, self.url_for(attribute), options)
