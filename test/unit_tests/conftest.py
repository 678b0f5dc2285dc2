from datetime import datetime
from urllib.parse import urlencode

import pytest
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from starlette.requests import Request

from sortstate.schema import SqlAlchemySchema
from sortstate.sorting import SortSpecification


class BaseModel(DeclarativeBase):
    pass


class UserTable(BaseModel):
    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String, info={"label": "First name"})
    last_name: Mapped[str] = mapped_column(String)
    created_at: Mapped[datetime] = mapped_column(DateTime)


class RecordingUrlBuilder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []

    def build_url(self, route, params):
        self.calls.append((route, dict(params)))
        return f"/{route or 'current'}?{urlencode(params)}"


def make_request(query_string: str = "", path: str = "/users", router=None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "query_string": query_string.encode(),
        "headers": [(b"host", b"testserver")],
    }
    if router is not None:
        scope["router"] = router
    return Request(scope)


@pytest.fixture
def user_schema():
    return SqlAlchemySchema(UserTable)


@pytest.fixture
def url_builder():
    return RecordingUrlBuilder()


@pytest.fixture
def user_sort_spec():
    return SortSpecification(
        attributes=[
            "first_name",
            "last_name",
            {"created": "created_at"},
            {"author": "author.name"},
            {
                "name": {
                    "asc": "first_name, last_name",
                    "desc": "first_name DESC, last_name DESC",
                    "label": "Full name",
                }
            },
        ],
        multi_sort=True,
        default_order="user_id",
    )


@pytest.fixture
def user_table():
    return UserTable


@pytest.fixture
def request_factory():
    return make_request
