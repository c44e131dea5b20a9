"""Shared fakes: in-memory git and filesystem capabilities."""

from __future__ import annotations

import pytest

from ghmirror.core.types import RepositoryDescriptor


class FakeGit:
    """Records calls; `fail` maps a path to the error message it should produce."""

    def __init__(self, fs: FakeFileSystem | None = None, fail: dict[str, str] | None = None):
        self.fs = fs
        self.fail = fail or {}
        self.calls: list[tuple[str, str]] = []

    def initialize_mirror(self, remote_url, path, *, bare):
        self.calls.append(("initialize", path))
        if path in self.fail:
            return False, self.fail[path]
        if self.fs is not None:
            self.fs.paths.add(path)
        return True, None

    def refresh_mirror(self, path, *, bare):
        self.calls.append(("refresh", path))
        if path in self.fail:
            return False, self.fail[path]
        return True, None


class FakeFileSystem:
    def __init__(self, paths=(), readonly=False):
        self.paths: set[str] = set(paths)
        self.descriptions: dict[str, str] = {}
        self.readonly = readonly

    def mirror_exists(self, path):
        return path in self.paths

    def write_description(self, path, description):
        if self.readonly:
            raise PermissionError(13, "Permission denied", path)
        self.descriptions[path] = description


def repo(name: str, description: str = "") -> RepositoryDescriptor:
    return RepositoryDescriptor(name=name, remote_url=f"https://host/alice/{name}", description=description)


@pytest.fixture
def fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def git(fs) -> FakeGit:
    return FakeGit(fs)
