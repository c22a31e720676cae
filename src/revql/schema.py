"""Models for GraphQL introspection results.

The models mirror the JSON returned by the standard introspection query:

```
{ "data": { "__schema": { "types": [
  { "name": ..., "kind": ..., "fields": [ { "name": ..., "type": TypeRef } ] | null }
] } } | null }
```

Keys the search does not need (descriptions, arguments, interfaces, ...) are
ignored when parsing.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field as PydanticField, ValidationError

from revql.errors import InvalidSchema, InvalidSchemaJson

OBJECT_KIND = "OBJECT"


class IntrospectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class TypeRef(IntrospectionModel):
    """A possibly wrapped (LIST / NON_NULL) reference to a named type."""

    name: str | None = None
    kind: str
    of_type: "TypeRef | None" = PydanticField(None, alias="ofType")

    def deepest(self) -> "TypeRef":
        """Return a copy of the innermost reference of the ofType chain."""
        current = self
        while current.of_type is not None:
            current = current.of_type
        return current.model_copy(deep=True)

    def is_object(self) -> bool:
        return self.kind == OBJECT_KIND


class Field(IntrospectionModel):
    name: str
    type: TypeRef

    def type_name(self) -> str:
        """Return the name of the field's unwrapped type.

        Raises:
            InvalidSchema: If the innermost type reference has no name.
        """
        deepest = self.type.deepest()
        if deepest.name is None:
            raise InvalidSchema(f"Field {self.name} doesn't have a type - invalid schema?")
        return deepest.name


class Type(IntrospectionModel):
    name: str
    kind: str
    fields: list[Field] | None = None

    def is_object(self) -> bool:
        return self.kind == OBJECT_KIND

    def field_map(self) -> dict[str, Field]:
        """Return the fields keyed by name, in declaration order."""
        if not self.fields:
            return {}
        return {field.name: field for field in self.fields}

    def get_field(self, field_name: str, containing: bool = False) -> Field | None:
        """Find a field by exact name, or the first field whose name contains `field_name`."""
        for field in self.fields or []:
            if (containing and field_name in field.name) or field.name == field_name:
                return field
        return None

    def is_relay(self) -> bool:
        """Check whether this type is Relay pagination scaffolding.

        Matches `PageInfo` (with hasNextPage/hasPreviousPage), `*Connection`
        (with edges/pageInfo) and `*Edge` (with cursor/node).
        """
        if not self.fields:
            return False

        names = {field.name for field in self.fields}
        if self.name == "PageInfo" and {"hasNextPage", "hasPreviousPage"} <= names:
            return True
        if self.name.endswith("Connection") and {"edges", "pageInfo"} <= names:
            return True
        if self.name.endswith("Edge") and {"cursor", "node"} <= names:
            return True
        return False


class Schema(IntrospectionModel):
    types: list[Type]


class Data(IntrospectionModel):
    schema_: Schema = PydanticField(alias="__schema")

    @property
    def schema(self) -> Schema:
        return self.schema_


class Root(IntrospectionModel):
    data: Data | None = None

    @classmethod
    def from_json(cls, document: str | bytes) -> "Root":
        """Parse an introspection JSON document.

        Raises:
            InvalidSchemaJson: If the document is not JSON or has the wrong shape.
        """
        try:
            return cls.model_validate_json(document)
        except ValidationError as e:
            raise InvalidSchemaJson(str(e)) from e

    @classmethod
    def from_dict(cls, document: Any) -> "Root":
        """Build the model from an already decoded introspection document."""
        try:
            return cls.model_validate(document)
        except ValidationError as e:
            raise InvalidSchemaJson(str(e)) from e


def parse(document: str | bytes) -> Root:
    return Root.from_json(document)


def type_map(schema: Schema) -> dict[str, Type]:
    """Return the schema's types keyed by name. Later duplicates win."""
    return {t.name: t for t in schema.types}


def filter_type_map(types: Mapping[str, Type], kind: str) -> dict[str, Type]:
    """Return the entries of a type map whose kind matches `kind`."""
    return {name: t for name, t in types.items() if t.kind == kind}
