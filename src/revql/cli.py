import logging
import sys
from pathlib import Path

import rich_click as click
import yaml
from pydantic import ValidationError
from rich.traceback import install

from revql import __version__, log
from revql.config import RevqlConfig, load_config
from revql.errors import InvalidSchema, RevqlError
from revql.formatting import path_to_dict, render_path
from revql.loader import load_document
from revql.schema import type_map
from revql.search import PathResult, SearchMode, TypeMap, run_search


def configure_logging(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


def select_mode(type_only: bool, field_only: bool) -> SearchMode:
    if type_only:
        return SearchMode.TYPE
    if field_only:
        return SearchMode.FIELD
    return SearchMode.ALL


def print_results(
    search: str,
    results: list[PathResult],
    types: TypeMap,
    show_relay: bool,
    config: RevqlConfig,
    as_json: bool,
) -> None:
    if as_json:
        log.print_dict(
            {
                "search": search,
                "results": [path_to_dict(result, types, show_relay) for result in results],
            }
        )
        return

    if not results:
        log.warning(f"No paths found for '{search}'")
        return

    for result in results:
        log.print(render_path(result, types, show_relay, config.colors))


@click.command(context_settings={"auto_envvar_prefix": "REVQL"})
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("search")
@click.option("--containing", "-c", is_flag=True, default=False, help="Match names containing SEARCH.")
@click.option("--type", "-t", "type_only", is_flag=True, default=False, help="Search for types only.")
@click.option("--field", "-f", "field_only", is_flag=True, default=False, help="Search for fields only.")
@click.option("--show-relay", is_flag=True, default=False, help="Show Relay pagination types.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the paths as a JSON document.")
@click.option(
    "--config",
    "config_path",
    envvar="REVQL_CONFIG",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file containing revql configuration",
)
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(
    file: Path,
    search: str,
    containing: bool,
    type_only: bool,
    field_only: bool,
    show_relay: bool,
    as_json: bool,
    config_path: Path | None,
    log_level: str,
    log_file: Path | None,
) -> None:
    """Find the field paths leading from Query and Mutation to a type or field.

    FILE is a GraphQL introspection result (JSON) or a GraphQL SDL file.
    """
    configure_logging(log_level, log_file)

    try:
        config = load_config(config_path)
    except (OSError, yaml.YAMLError, TypeError, ValidationError) as e:
        log.error(f"Invalid config: {e}")
        sys.exit(1)

    try:
        root = load_document(file)
    except RevqlError as e:
        log.error(f"Invalid schema: {e}")
        sys.exit(1)

    if root.data is None:
        if as_json:
            print_results(search, [], {}, show_relay, config, as_json)
        else:
            log.print("Empty schema")
        return

    types = type_map(root.data.schema)
    show_relay = show_relay or config.show_relay
    mode = select_mode(type_only, field_only)
    log.info(f"Searching {len(types)} types for '{search}' ({mode.value} search)")

    try:
        results = run_search(
            search,
            types,
            mode=mode,
            containing=containing,
            show_relay=show_relay,
            root_types=config.root_types,
        )
    except InvalidSchema as e:
        log.error(str(e))
        sys.exit(1)

    print_results(search, results, types, show_relay, config, as_json)


if __name__ == "__main__":
    cli()
