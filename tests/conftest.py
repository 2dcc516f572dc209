import shutil
from pathlib import Path

import pytest

from react_named_imports.models import TransformOptions
from react_named_imports.transform.pipeline import transform_source
from react_named_imports.utils.ast_parser import parse_source


@pytest.fixture
def fixtures_dir():
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def read_fixture(fixtures_dir):
    def _read(name: str) -> str:
        return (fixtures_dir / name).read_bytes().decode("utf-8")
    return _read


@pytest.fixture
def project_dir(fixtures_dir, tmp_path):
    """Writable copy of the sample project."""
    target = tmp_path / "project"
    shutil.copytree(fixtures_dir / "project", target)
    return target


@pytest.fixture
def run():
    """Transform a source string and return the output text."""
    def _run(source: str, language: str = "tsx", **options) -> str:
        return transform_source(source, language, TransformOptions(**options)).output
    return _run


@pytest.fixture
def parse():
    def _parse(source: str, language: str = "tsx"):
        return parse_source(source.encode("utf-8"), language)
    return _parse
