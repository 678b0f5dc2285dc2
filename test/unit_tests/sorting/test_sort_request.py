import pytest
from markupsafe import Markup
from sqlalchemy import select

from sortstate.sorting import SortRequest, SortSpecification
from sortstate.utils.errors import SortConfigurationError


@pytest.fixture
def sort_request(user_sort_spec, user_schema, url_builder):
    def _sort_request(query_params=None, spec=None):
        return SortRequest(
            spec or user_sort_spec, query_params=query_params, schema=user_schema, url_builder=url_builder
        )

    return _sort_request


def test_directions_are_parsed_once(sort_request):
    sort = sort_request({"sort": "first_name.desc-name"})

    assert sort.directions is sort.directions
    assert sort.directions == {"first_name": True, "name": False}
    assert sort.direction("first_name") is True
    assert sort.direction("name") is False
    assert sort.direction("last_name") is None


def test_without_query_params(sort_request):
    sort = sort_request()

    assert sort.directions == {}
    assert sort.order_by() == "user_id"


def test_order_by(sort_request):
    sort = sort_request({"sort": "last_name.desc-name-password"})

    assert sort.order_by() == '"last_name" DESC, first_name, last_name'
    assert sort.append_order("user_id") == 'user_id, "last_name" DESC, first_name, last_name'


def test_apply_order(sort_request, user_table):
    sort = sort_request({"sort": "created.desc"})

    assert str(sort.apply_order(select(user_table.user_id))).endswith('ORDER BY "created_at" DESC')


def test_next_state_promotes_attribute(sort_request):
    sort = sort_request({"sort": "first_name-last_name.desc"})

    assert list(sort.next_state("last_name").items()) == [("last_name", False), ("first_name", False)]
    assert sort.directions == {"first_name": False, "last_name": True}


def test_url_for(sort_request, url_builder):
    sort = sort_request({"sort": "first_name", "page": "3"})

    assert sort.url_for("first_name") == "/current?sort=first_name.desc&page=3"
    assert sort.url_for("created") == "/current?sort=created-first_name&page=3"
    assert url_builder.calls[0] == ("", {"sort": "first_name.desc", "page": "3"})


def test_url_for_requires_url_builder(user_sort_spec):
    sort = SortRequest(user_sort_spec, query_params={"sort": "first_name"})

    with pytest.raises(SortConfigurationError, match="url builder"):
        sort.url_for("first_name")


def test_link_of_ascending_attribute(sort_request):
    sort = sort_request({"sort": "first_name"})

    link = sort.link("first_name")

    assert isinstance(link, Markup)
    assert link == '<a href="/current?sort=first_name.desc" class="asc">First name</a>'


def test_link_of_descending_attribute(sort_request):
    sort = sort_request({"sort": "name.desc"})

    assert sort.link("name") == '<a href="/current?sort=name" class="desc">Full name</a>'


def test_link_of_unsorted_attribute(sort_request):
    sort = sort_request({"sort": "name.desc"})

    assert sort.link("last_name") == '<a href="/current?sort=last_name-name.desc">Last Name</a>'


def test_link_merges_html_options(sort_request):
    sort = sort_request({"sort": "first_name.desc"})

    link = sort.link("first_name", label="First", html_options={"class": "sortable", "title": "Sort"})

    assert link == '<a href="/current?sort=first_name" class="sortable desc" title="Sort">First</a>'


def test_link_does_not_modify_html_options(sort_request):
    html_options = {"class": "sortable"}

    sort_request({"sort": "first_name"}).link("first_name", html_options=html_options)

    assert html_options == {"class": "sortable"}


def test_link_of_unsortable_attribute(sort_request, url_builder):
    sort = sort_request({"sort": "first_name"})

    assert sort.link("password") == "password"
    assert sort.link("password", label="Password") == "Password"
    assert url_builder.calls == []


def test_single_sort_link(sort_request, user_schema):
    spec = SortSpecification(attributes=["first_name", "last_name"], multi_sort=False)
    sort = sort_request({"sort": "first_name.desc-last_name"}, spec=spec)

    assert sort.directions == {"first_name": True}
    assert sort.link("last_name") == '<a href="/current?sort=last_name">Last Name</a>'


class TextRenderer:
    def render_link(self, label, url, attributes):
        return f"{label} -> {url} {sorted(attributes.items())}"


def test_custom_renderer(user_sort_spec, url_builder):
    sort = SortRequest(user_sort_spec, {"sort": "name"}, url_builder=url_builder, renderer=TextRenderer())

    assert sort.link("name") == "Full name -> /current?sort=name.desc [('class', 'asc')]"
