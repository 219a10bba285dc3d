"""Shared fixtures: throwaway git repositories with a configured identity."""

from __future__ import annotations

from pathlib import Path

import pytest
from git import Repo


def _init_repo(path: Path) -> Repo:
    repo = Repo.init(path)
    with repo.config_writer() as cw:
        cw.set_value("user", "name", "Tester")
        cw.set_value("user", "email", "test@example.com")
        cw.set_value("commit", "gpgsign", "false")
    return repo


@pytest.fixture
def git_repo(tmp_path: Path) -> Repo:
    return _init_repo(tmp_path / "repo")


@pytest.fixture
def git_repo_with_remote(tmp_path: Path) -> tuple[Repo, Repo]:
    """Working repository tracking a bare ``origin`` that already has one commit."""
    remote = Repo.init(tmp_path / "remote.git", bare=True)
    repo = _init_repo(tmp_path / "work")

    (Path(repo.working_tree_dir) / "README.md").write_text("seed\n")
    repo.index.add(["README.md"])
    repo.git.commit("-m", "init")
    repo.create_remote("origin", str(tmp_path / "remote.git"))
    repo.git.push("-u", "origin", "HEAD")
    return repo, remote


@pytest.fixture(autouse=True)
def _clear_fabricator_env(monkeypatch):
    for var in [
        "FABRICATOR_REPO",
        "FABRICATOR_COMMITS",
        "FABRICATOR_START",
        "FABRICATOR_END",
        "FABRICATOR_PUSH",
        "FABRICATOR_SORT",
        "FABRICATOR_PAYLOAD",
        "FABRICATOR_SEED",
    ]:
        monkeypatch.delenv(var, raising=False)
