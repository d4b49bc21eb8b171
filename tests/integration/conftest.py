"""Fixtures for integration tests."""

import os
import stat
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

FakeExecutableFn: TypeAlias = Callable[[str, str], Path]


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a directory prepended to PATH."""
    directory = tmp_path / "bin"
    directory.mkdir()
    monkeypatch.setenv("PATH", str(directory), prepend=os.pathsep)
    return directory


@pytest.fixture
def fake_executable(bin_dir: Path) -> FakeExecutableFn:
    """Return a function creating executable shell scripts on PATH."""

    def _create(name: str, script: str) -> Path:
        path = bin_dir / name
        path.write_text(f"#!/bin/sh\n{script}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _create


@pytest.fixture
def xcresult_path(tmp_path: Path) -> Path:
    """Create an empty .xcresult bundle directory."""
    path = tmp_path / "Test.xcresult"
    path.mkdir()
    return path
