"""Shared fixtures for schema_compare tests."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from samples import NEW_SCHEMA_XML, OLD_SCHEMA_XML


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a zip archive with the given members into tmp_path."""

    def _make(name: str, members: dict[str, str | bytes]) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            for member, content in members.items():
                archive.writestr(member, content)
        return path

    return _make


@pytest.fixture
def old_archive(make_archive: Callable[..., Path]) -> Path:
    return make_archive(
        "sales_v1.zip",
        {"readme.txt": "export v1", "sales_schema.xml": OLD_SCHEMA_XML},
    )


@pytest.fixture
def new_archive(make_archive: Callable[..., Path]) -> Path:
    return make_archive("sales_v2.zip", {"export/sales_schema.xml": NEW_SCHEMA_XML})
