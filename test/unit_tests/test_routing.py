import pytest
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from sortstate.routing import StarletteUrlBuilder, sort_request_from_request
from sortstate.schema import SqlAlchemySchema
from sortstate.sorting import SortSpecification


def test_build_url_for_current_request(request_factory):
    builder = StarletteUrlBuilder(request_factory("sort=a&page=2"))

    assert builder.build_url("", {"sort": "a.desc", "page": "2"}) == "http://testserver/users?sort=a.desc&page=2"


def test_build_url_replaces_query(request_factory):
    builder = StarletteUrlBuilder(request_factory("sort=a&page=2"))

    assert builder.build_url("", {"sort": "b"}) == "http://testserver/users?sort=b"


def test_sort_request_from_request(request_factory, user_schema):
    spec = SortSpecification(attributes=["first_name", "last_name"], multi_sort=True)
    sort = sort_request_from_request(request_factory("page=2&sort=first_name.desc-password"), spec, user_schema)

    assert sort.directions == {"first_name": True}
    assert sort.order_by() == '"first_name" DESC'
    assert sort.link("last_name") == (
        '<a href="http://testserver/users?page=2&amp;sort=last_name-first_name.desc">Last Name</a>'
    )


@pytest.fixture
def test_client(user_table):
    spec = SortSpecification(
        attributes=["first_name", {"name": {"asc": "first_name, last_name", "desc": "first_name DESC, last_name DESC"}}],
        route="users",
        default_order="user_id",
    )
    schema = SqlAlchemySchema(user_table)

    async def list_users(request):
        sort = sort_request_from_request(request, spec, schema)
        return JSONResponse(
            {
                "order_by": sort.order_by(),
                "first_name": str(sort.link("first_name")),
                "name": str(sort.link("name", label="Name")),
            }
        )

    app = Starlette(routes=[Route("/users", list_users, name="users")])
    return TestClient(app)


def test_sort_links_in_application(test_client):
    response = test_client.get("/users", params={"sort": "name.desc", "q": "doe"})

    assert response.status_code == 200
    assert response.json() == {
        "order_by": "first_name DESC, last_name DESC",
        "first_name": '<a href="http://testserver/users?sort=first_name&amp;q=doe">First name</a>',
        "name": '<a href="http://testserver/users?sort=name&amp;q=doe" class="desc">Name</a>',
    }


def test_default_order_in_application(test_client):
    response = test_client.get("/users")

    assert response.json()["order_by"] == "user_id"
    assert response.json()["first_name"] == '<a href="http://testserver/users?sort=first_name">First name</a>'


def test_repeated_query_params_are_kept(request_factory):
    spec = SortSpecification(attributes=["a", "b"])
    sort = sort_request_from_request(request_factory("status=open&status=closed&sort=a"), spec)

    url = sort.url_for("a")

    assert url == "http://testserver/users?status=open&status=closed&sort=a.desc"


def test_repeated_sort_params_are_replaced(request_factory):
    spec = SortSpecification(attributes=["a", "b"])
    sort = sort_request_from_request(request_factory("sort=b&tag=x&sort=a&tag=y"), spec)

    assert sort.url_for("b") == "http://testserver/users?sort=b&tag=x&tag=y"
