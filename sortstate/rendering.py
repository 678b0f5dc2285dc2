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
from typing import Protocol

from markupsafe import Markup


class LinkRenderer(Protocol):
    def render_link(self, label: str, url: str, attributes: Mapping[str, str]) -> str: ...


class HtmlLinkRenderer:
    """Render sort links as html anchors.

    Labels, URLs and attribute values are escaped unless they are already `Markup`.

    >>> HtmlLinkRenderer().render_link("Name", "/users?sort=name&page=2", {"class": "asc"})
    Markup('<a href="/users?sort=name&amp;page=2" class="asc">Name</a>')
    """

    def render_link(self, label: str, url: str, attributes: Mapping[str, str]) -> Markup:
        html_attributes = {"href": url} | dict(attributes)
        rendered = Markup("").join(Markup(' {}="{}"').format(name, value) for name, value in html_attributes.items())
        return Markup("<a{}>{}</a>").format(rendered, label)
