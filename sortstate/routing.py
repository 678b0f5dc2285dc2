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
from typing import Protocol

from starlette.datastructures import QueryParams as StarletteQueryParams
from starlette.requests import Request

from sortstate.rendering import LinkRenderer
from sortstate.schema import Schema
from sortstate.sorting import SortRequest, SortSpecification
from sortstate.types import QueryItems


class UrlBuilder(Protocol):
    def build_url(self, route: str, params: QueryItems) -> str: ...


class StarletteUrlBuilder:
    """Build sort URLs relative to a Starlette request.

    An empty route refers to the URL of the request itself, any other route is looked up by name on the router.
    """

    def __init__(self, request: Request) -> None:
        self.request = request

    def build_url(self, route: str, params: QueryItems) -> str:
        url = self.request.url_for(route) if route else self.request.url
        return str(url.replace(query=str(StarletteQueryParams(params))))


def sort_request_from_request(
    request: Request,
    spec: SortSpecification,
    schema: Schema | None = None,
    renderer: LinkRenderer | None = None,
) -> SortRequest:
    """Create the sort state for a Starlette (or FastAPI) request."""
    return SortRequest(
        spec,
        query_params=request.query_params,
        schema=schema,
        url_builder=StarletteUrlBuilder(request),
        renderer=renderer,
    )
