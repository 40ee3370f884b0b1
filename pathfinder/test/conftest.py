from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pathfinder.finder import Document
from pathfinder.test.fixtures import Fixtures


@pytest.fixture
def fixture_factory() -> Callable[[str, str], Any]:
    def _fixture_factory(base_path: str, fixture: str) -> Any:
        return Fixtures(base_path).get_document(fixture)

    return _fixture_factory


@pytest.fixture
def fixture_path_factory() -> Callable[[str, str], Path]:
    def _fixture_path_factory(base_path: str, fixture: str) -> Path:
        return Fixtures(base_path).path(fixture)

    return _fixture_path_factory


@pytest.fixture
def document_factory() -> Callable[[str], Document]:
    def _document_factory(src: str) -> Document:
        return Document.loads(src)

    return _document_factory


@pytest.fixture
def document_fixture_factory(
    fixture_factory: Callable[[str, str], Any],
) -> Callable[[str, str], Document]:
    def _document_fixture_factory(base_path: str, fixture: str) -> Document:
        return Document(tree=fixture_factory(base_path, fixture))

    return _document_fixture_factory
