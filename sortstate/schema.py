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
from collections.abc import Collection
from typing import Any, Protocol

from sqlalchemy import Table, inspect
from sqlalchemy.dialects import registry
from sqlalchemy.engine import Dialect

from sortstate.settings import sort_settings
from sortstate.utils.helpers import humanize


class Schema(Protocol):
    """Schema information of the entity that is being sorted."""

    def attribute_names(self) -> Collection[str]: ...

    def quote_column(self, name: str) -> str: ...

    def quote_table(self, name: str) -> str: ...

    def attribute_label(self, name: str) -> str: ...


def default_dialect() -> Dialect:
    return registry.load(sort_settings.DEFAULT_DIALECT)()


class SqlAlchemySchema:
    """Schema information of a mapped SQLAlchemy model or a `Table`.

    Identifiers are always quoted with the identifier preparer of the dialect. Labels are taken from the
    ``label`` entry of a column's ``info`` and otherwise derived from the attribute name.

    Example::

        class UserTable(BaseModel):
            __tablename__ = "users"

            user_id = mapped_column(Integer, primary_key=True)
            first_name = mapped_column(String, info={"label": "First name"})

        schema = SqlAlchemySchema(UserTable)
    """

    def __init__(self, model: type | Table, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or default_dialect()
        self.preparer = self.dialect.identifier_preparer
        columns = model.columns if isinstance(model, Table) else inspect(model).columns
        self.columns: dict[str, Any] = dict(columns.items())

    def attribute_names(self) -> Collection[str]:
        return self.columns.keys()

    def quote_column(self, name: str) -> str:
        return self.preparer.quote_identifier(name)

    def quote_table(self, name: str) -> str:
        return ".".join(self.preparer.quote_identifier(part) for part in name.split("."))

    def attribute_label(self, name: str) -> str:
        if (column := self.columns.get(name)) is not None and "label" in column.info:
            return column.info["label"]
        return humanize(name)
