"""Shared test fixtures for git-distance tests."""

import os
import shutil
import subprocess

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep user config files and GIT_DISTANCE_* variables out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for key in list(os.environ):
        if key.startswith("GIT_DISTANCE_"):
            monkeypatch.delenv(key)


def _git(repo, *args):
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=repo,
        check=True,
        capture_output=True,
    )


def _write(repo, name, content):
    (repo / name).write_bytes(content.encode("utf-8"))


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """Repository with ``main`` and ``feature`` branches; ``feature`` is checked out.

    main:    a.txt, b.txt, gone.txt
    feature: a.txt (edited), b.txt (one more line), new.txt; gone.txt deleted
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not found")

    repo = tmp_path / "repo"
    repo.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "core.autocrlf", "false")

    _write(repo, "a.txt", "hello world\n")
    _write(repo, "b.txt", "line1\nline2")
    _write(repo, "gone.txt", "bye")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "initial")

    _git(repo, "checkout", "-q", "-b", "feature")
    _write(repo, "a.txt", "hello brave world\n")
    _write(repo, "b.txt", "line1\nline2\nline3")
    _write(repo, "new.txt", "fresh")
    _git(repo, "rm", "-q", "gone.txt")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "feature work")

    return repo


@pytest.fixture
def commit_file():
    """Commit one file with exact bytes on the current branch."""

    def _commit(repo, name, content):
        _write(repo, name, content)
        _git(repo, "add", name)
        _git(repo, "commit", "-q", "-m", f"add {name}")

    return _commit
