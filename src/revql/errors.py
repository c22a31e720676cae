class RevqlError(Exception):
    """Base class for all revql errors."""


class InvalidSchemaJson(RevqlError):
    """The document is not valid JSON or does not have the introspection shape."""


class InvalidSchema(RevqlError):
    """The document parsed but describes a schema that cannot be searched."""


class SchemaLoadError(RevqlError):
    """The schema file could not be read."""
