from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from pathfinder.coercion import Coercion
from pathfinder.finder import Document, PathFinder, PathLike
from pathfinder.node import NodeKind, node_kind

DMY_DATE_FORMAT = "%d.%m.%Y"


def parse_dmy_date(value: str) -> date | None:
    """Parse a `dd.mm.YYYY` date, e.g. `07.11.2019`."""
    try:
        return datetime.strptime(value, DMY_DATE_FORMAT).date()
    except ValueError:
        return None


@dataclass(frozen=True)
class DmyDateCoercion(Coercion[date]):
    name: str = "date"
    error_label: str = "not a date"

    def coerce(self, node: Any) -> date | None:  # noqa: ANN401
        if node_kind(node) == NodeKind.STRING:
            return parse_dmy_date(node)
        return None


DMY_DATE = DmyDateCoercion()


class DmyDatePathFinder(PathFinder):
    def get_dmy(self, path: PathLike) -> date:
        """Gets a date in `dd.mm.YYYY` format."""
        return self.get_as(path, DMY_DATE)


@dataclass(frozen=True)
class DatedDocument(DmyDatePathFinder, Document):
    pass


def open_document(tree: Any, *, date_parsing: bool = False) -> Document:  # noqa: ANN401
    if date_parsing:
        return DatedDocument(tree=tree)
    return Document(tree=tree)
