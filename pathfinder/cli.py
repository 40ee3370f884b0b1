import logging
import sys
from collections.abc import Mapping
from datetime import date
from enum import StrEnum
from pathlib import Path
from typing import Any, NotRequired, TypedDict

import click

from pathfinder.coercion import COERCIONS, Coercion, get_coercion
from pathfinder.dates import DMY_DATE, open_document
from pathfinder.errors import FieldError, InvalidPathError
from pathfinder.finder import PathFinder
from pathfinder.node import debug_repr
from pathfinder.path import FieldPaths
from pathfinder.utils import json_dumps, load_document_file

logging.basicConfig(format="%(levelname)s: %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)

DATE_PARSING_ENV_VAR = "PATHFINDER_DATE_PARSING"
RECURSIVE_MARKER = "<recursive>"

ALL_COERCIONS: dict[str, Coercion] = COERCIONS | {DMY_DATE.name: DMY_DATE}


class LookupStatus(StrEnum):
    OK = "OK"
    ERROR = "ERROR"


class _LookupResult(TypedDict):
    summary: str
    status: LookupStatus
    value: NotRequired[Any]
    reason: NotRequired[str]
    error: NotRequired[str]


class LookupResult(TypedDict):
    path: str
    type: str
    result: _LookupResult


def to_json_value(value: Any, _parents: frozenset[int] = frozenset()) -> Any:  # noqa: ANN401
    match value:
        case date():
            return value.isoformat()
        case Mapping() | list() | tuple() if id(value) in _parents:
            return RECURSIVE_MARKER
        case Mapping():
            parents = _parents | {id(value)}
            return {str(k): to_json_value(v, parents) for k, v in value.items()}
        case list() | tuple():
            parents = _parents | {id(value)}
            return [to_json_value(v, parents) for v in value]
        case str() | int() | float() | None:
            return value
    return debug_repr(value)


def lookup(finder: PathFinder, paths: FieldPaths, coercion: Coercion) -> LookupResult:
    path = paths.to_expression()
    try:
        value = finder.get_as(paths, coercion)
    except FieldError as e:
        logger.info("lookup failed: %s", e)
        return LookupResult(
            path=path,
            type=coercion.name,
            result=_LookupResult(
                status=LookupStatus.ERROR,
                summary=f"ERROR: {path}",
                reason=e.kind,
                error=str(e),
            ),
        )
    return LookupResult(
        path=path,
        type=coercion.name,
        result=_LookupResult(
            status=LookupStatus.OK,
            summary=f"OK: {path} ({coercion.name})",
            value=to_json_value(value),
        ),
    )


def parse_paths(
    ctx: click.Context,
    param: click.Parameter,
    value: tuple[str, ...],
) -> list[FieldPaths]:
    try:
        return [FieldPaths.parse(expression) for expression in value]
    except InvalidPathError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@click.command()
@click.option(
    "--type",
    "type_name",
    type=click.Choice(sorted(ALL_COERCIONS)),
    default="string",
    show_default=True,
    help="Type the found values are coerced to",
)
@click.option(
    "--date-parsing/--no-date-parsing",
    default=False,
    envvar=DATE_PARSING_ENV_VAR,
    help="Enable dd.mm.YYYY date lookups",
)
@click.option("--only-errors", is_flag=True, help="Print only errors")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("paths", nargs=-1, required=True, callback=parse_paths)
def main(
    *,
    type_name: str,
    date_parsing: bool,
    only_errors: bool,
    verbose: bool,
    document: Path,
    paths: list[FieldPaths],
) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    coercion = get_coercion(type_name, ALL_COERCIONS)
    if coercion is DMY_DATE and not date_parsing:
        raise click.UsageError("date lookups require --date-parsing")

    logger.debug("loading document: %s", document)
    finder = open_document(load_document_file(document), date_parsing=date_parsing)

    results = [lookup(finder, field_paths, coercion) for field_paths in paths]

    # Calculate errors
    errors = [r for r in results if r["result"]["status"] == LookupStatus.ERROR]

    # Output
    if only_errors:
        sys.stdout.write(json_dumps(errors, indent=2) + "\n")
    else:
        sys.stdout.write(json_dumps(results, indent=2) + "\n")

    if len(errors) > 0:
        sys.exit(1)
