from pathlib import Path

from graphql import GraphQLError, build_schema, introspection_from_schema

from revql import log
from revql.errors import InvalidSchemaJson, SchemaLoadError
from revql.schema import Root

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}


def is_sdl_file(path: Path) -> bool:
    return path.suffix.lower() in SDL_SUFFIXES


def introspect_sdl(sdl: str) -> Root:
    """Build an introspection result from GraphQL SDL.

    Args:
        sdl: Schema definition language source

    Returns:
        The parsed introspection root

    Raises:
        InvalidSchemaJson: If the SDL cannot be built into a schema
    """
    try:
        schema = build_schema(sdl)
    except (GraphQLError, TypeError) as e:
        raise InvalidSchemaJson(f"Invalid GraphQL SDL: {e}") from e
    return Root.from_dict({"data": introspection_from_schema(schema)})


def load_document(path: Path) -> Root:
    """Load a schema file as an introspection root.

    Files with a GraphQL suffix are read as SDL, everything else as an
    introspection JSON document.

    Raises:
        SchemaLoadError: If the file cannot be read
        InvalidSchemaJson: If the content cannot be parsed
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Cannot read {path}: {e}") from e

    if is_sdl_file(path):
        log.debug(f"Loading GraphQL SDL from {path}")
        root = introspect_sdl(content)
    else:
        log.debug(f"Loading introspection JSON from {path}")
        root = Root.from_json(content)

    if root.data is not None:
        log.debug(f"Loaded {len(root.data.schema.types)} types")
    return root
