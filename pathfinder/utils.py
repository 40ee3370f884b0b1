import json
import re
from enum import StrEnum
from pathlib import Path, PurePath
from typing import Any

import yaml

NULL_TAG = "tag:yaml.org,2002:null"
MERGE_TAG = "tag:yaml.org,2002:merge"
BOOL_TAG = "tag:yaml.org,2002:bool"
INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"

# YAML 1.2 core schema, no `yes`/`on`, no sexagesimals, no timestamps
CORE_SCHEMA_RESOLVERS = [
    (
        BOOL_TAG,
        re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
        list("tTfF"),
    ),
    (
        INT_TAG,
        re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
        list("-+0123456789"),
    ),
    (
        FLOAT_TAG,
        re.compile(
            r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
            |[-+]?\.(?:inf|Inf|INF)
            |\.(?:nan|NaN|NAN))$""",
            re.X,
        ),
        list("-+.0123456789"),
    ),
]


class FileType(StrEnum):
    YAML = "yaml"
    JSON = "json"


SUPPORTED_EXTENSIONS = {
    ".yaml": FileType.YAML,
    ".yml": FileType.YAML,
    ".json": FileType.JSON,
}


def _construct_core_int(loader: Any, node: yaml.ScalarNode) -> int:  # noqa: ANN401
    value = loader.construct_scalar(node)
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value)


def _core_schema(loader: type) -> type:
    core_loader = type(
        loader.__name__,
        (loader,),
        {
            "yaml_implicit_resolvers": {
                first: [
                    (tag, regexp)
                    for tag, regexp in resolvers
                    if tag in {NULL_TAG, MERGE_TAG}
                ]
                for first, resolvers in loader.yaml_implicit_resolvers.items()
            }
        },
    )
    for tag, regexp, first in CORE_SCHEMA_RESOLVERS:
        core_loader.add_implicit_resolver(tag, regexp, first)
    core_loader.add_constructor(INT_TAG, _construct_core_int)
    return core_loader


SafeLoader = _core_schema(yaml.SafeLoader)
CSafeLoader = _core_schema(yaml.CSafeLoader) if hasattr(yaml, "CSafeLoader") else None


def get_file_type(path: PurePath) -> FileType | None:
    return SUPPORTED_EXTENSIONS.get(path.suffix)


def load_yaml(data: str | bytes) -> Any:  # noqa: ANN401
    if CSafeLoader is not None:
        return yaml.load(data, Loader=CSafeLoader)
    return yaml.load(data, Loader=SafeLoader)


def load_document(data: str | bytes) -> Any:  # noqa: ANN401
    # JSON is parsed by the YAML loader as well
    return load_yaml(data)


def json_dumps(data: Any, *, indent: int | None = None) -> str:  # noqa: ANN401
    return json.dumps(data, indent=indent)


def load_document_file(path: Path) -> Any:  # noqa: ANN401
    match get_file_type(path):
        case FileType.YAML:
            return load_yaml(path.read_bytes())
        case FileType.JSON:
            return json.loads(path.read_bytes())
        case _:
            msg = f"markup parsing for extension {path.suffix} is not implemented"
            raise NotImplementedError(msg)
