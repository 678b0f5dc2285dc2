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
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sortstate.settings import sort_settings

if TYPE_CHECKING:
    from sortstate.schema import Schema


class PlainAttribute(BaseModel):
    """A sortable attribute backed by a single (optionally relation qualified) column."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str


class VirtualAttribute(BaseModel):
    """A sortable attribute backed by literal ordering expressions.

    The expressions are used verbatim, for example::

        VirtualAttribute(asc="first_name, last_name", desc="first_name DESC, last_name DESC", label="Name")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    asc: str | None = None
    desc: str | None = None
    label: str | None = None


AttributeDefinition = Union[PlainAttribute, VirtualAttribute]


def _to_definition(definition: Any) -> AttributeDefinition:
    if isinstance(definition, (PlainAttribute, VirtualAttribute)):
        return definition
    if isinstance(definition, str):
        return PlainAttribute(name=definition)
    if isinstance(definition, Mapping):
        return VirtualAttribute.model_validate(definition)
    raise ValueError(f"Unsupported attribute definition: {definition!r}")


def _attribute_items(attributes: Any) -> Iterable[tuple[str, Any]]:
    if isinstance(attributes, Mapping):
        for key, definition in attributes.items():
            if isinstance(key, str):
                yield key, definition
            elif isinstance(definition, str):
                # a positional entry declares an attribute under its own name
                yield definition, definition
            else:
                raise ValueError(f"Unsupported attribute declaration: {key!r}: {definition!r}")
        return

    for item in attributes:
        if isinstance(item, str):
            yield item, item
        elif isinstance(item, PlainAttribute):
            yield item.name, item
        elif isinstance(item, Mapping):
            yield from item.items()
        else:
            raise ValueError(f"Unsupported attribute declaration: {item!r}")


def normalize_attributes(attributes: Any) -> dict[str, AttributeDefinition]:
    """Normalize loose attribute declarations to a mapping of attribute key to definition.

    >>> normalize_attributes(["user_id", {"user": "author.name"}])
    {'user_id': PlainAttribute(name='user_id'), 'user': PlainAttribute(name='author.name')}
    """
    if attributes is None:
        return {}
    if isinstance(attributes, str):
        raise ValueError("Sortable attributes must be declared as a list or a mapping, not a string")
    return {key: _to_definition(definition) for key, definition in _attribute_items(attributes)}


class SortSpecification(BaseModel):
    """Describes which attributes of an entity can be sorted and how a sort request is encoded.

    An empty ``attributes`` mapping means every attribute known to the schema can be sorted under its own name.
    Entries of a mapping with a non-string key, such as ``{0: "first_name", "created": "created_at"}``, declare an
    attribute under its own name.
    """

    model_config = ConfigDict(frozen=True)

    attributes: dict[str, AttributeDefinition] = Field(default_factory=dict)
    multi_sort: bool = Field(default_factory=lambda: sort_settings.MULTI_SORT)
    sort_var: str = Field(default_factory=lambda: sort_settings.SORT_VAR)
    desc_tag: str = Field(default_factory=lambda: sort_settings.DESC_TAG)
    separators: tuple[str, str] = Field(
        default_factory=lambda: (sort_settings.ATTRIBUTE_SEPARATOR, sort_settings.DIRECTION_SEPARATOR)
    )
    default_order: str | None = None
    route: str = ""
    params: dict[str, Any] | None = None

    @field_validator("attributes", mode="before")
    @classmethod
    def normalize_attribute_declarations(cls, value: Any) -> dict[str, AttributeDefinition]:
        return normalize_attributes(value)

    @field_validator("separators")
    @classmethod
    def validate_separators(cls, value: tuple[str, str]) -> tuple[str, str]:
        if any(len(separator) != 1 for separator in value):
            raise ValueError("separators must be single characters")
        if value[0] == value[1]:
            raise ValueError("attribute and direction separators must differ")
        return value

    @model_validator(mode="after")
    def validate_attribute_keys(self) -> "SortSpecification":
        if not self.desc_tag or self.attribute_separator in self.desc_tag:
            msg = f"desc_tag {self.desc_tag!r} must be non-empty and not contain {self.attribute_separator!r}"
            raise ValueError(msg)
        for key in self.attributes:
            if self.attribute_separator in key or self.direction_separator in key:
                raise ValueError(f"Attribute name {key!r} must not contain any of the separators {self.separators!r}")
        return self

    @property
    def attribute_separator(self) -> str:
        return self.separators[0]

    @property
    def direction_separator(self) -> str:
        return self.separators[1]

    def resolve_attribute(self, attribute: str, schema: "Schema | None" = None) -> AttributeDefinition | None:
        """Return the definition of a requested sort attribute.

        Args:
            attribute: the attribute name as it appears in the sort request
            schema: the schema of the sorted entity, used when no attributes are declared

        Returns the declared definition, or a plain attribute when the name is a known schema attribute and no
        attributes are declared. None means the attribute can not be sorted on.
        """
        if self.attributes:
            return self.attributes.get(attribute)
        if schema is not None and attribute in schema.attribute_names():
            return PlainAttribute(name=attribute)
        return None
