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
from typing import TYPE_CHECKING, TypeVar

import structlog
from sqlalchemy import GenerativeSelect, literal_column

from sortstate.sorting.definitions import SortSpecification, VirtualAttribute
from sortstate.types import DirectionMap
from sortstate.utils.errors import VirtualAttributeError

if TYPE_CHECKING:
    from sortstate.schema import Schema

logger = structlog.get_logger(__name__)

Selectable = TypeVar("Selectable", bound=GenerativeSelect)


def _quote_attribute(name: str, schema: "Schema | None") -> str:
    if schema is None:
        return name
    relation, dot, column = name.partition(".")
    if dot:
        return f"{schema.quote_table(relation)}.{schema.quote_column(column)}"
    return schema.quote_column(name)


def build_order_clause(
    spec: SortSpecification, directions: DirectionMap, schema: "Schema | None" = None
) -> str | None:
    """Translate sort directions into an ORDER BY clause.

    Plain attributes are quoted with the schema (``author.name`` becomes ``"author"."name"``), virtual attributes
    contribute their ``asc`` or ``desc`` expression verbatim.

    Args:
        spec: the sort specification
        directions: the sort directions, see `parse_directions`
        schema: the schema of the sorted entity, used for quoting

    Returns the clause, or the default order of the specification when there are no directions.

    Raises:
        VirtualAttributeError: a virtual attribute does not define both an ``asc`` and a ``desc`` expression.
    """
    if not directions:
        return spec.default_order

    orders = []
    for attribute, descending in directions.items():
        definition = spec.resolve_attribute(attribute, schema)
        if isinstance(definition, VirtualAttribute):
            if definition.asc is None or definition.desc is None:
                logger.error("Virtual attribute is missing an order expression", attribute=attribute)
                raise VirtualAttributeError(attribute)
            orders.append(definition.desc if descending else definition.asc)
        elif definition is not None:
            column = _quote_attribute(definition.name, schema)
            orders.append(f"{column} DESC" if descending else column)

    clause = ", ".join(orders)
    logger.debug("Built order clause", clause=clause)
    return clause


def append_order(existing: str | None, clause: str | None) -> str | None:
    """Append an order clause to an existing one.

    >>> append_order("id", "name DESC")
    'id, name DESC'

    >>> append_order(None, "name")
    'name'

    >>> append_order("id", "")
    'id'
    """
    if not clause:
        return existing
    if existing:
        return f"{existing}, {clause}"
    return clause


def apply_order(query: Selectable, clause: str | None) -> Selectable:
    """Append an order clause to the ORDER BY of a statement.

    Args:
        query: The sqlalchemy statement (e.g. a Select) to order.
        clause: the order clause, see `build_order_clause`.

    returns the statement with the clause added after any existing ordering.
    """
    if not clause:
        return query
    return query.order_by(literal_column(clause))
