from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from everyone_north import command

GIT_SUBCOMMANDS = ("config", "rev-parse", "shortlog")


class FakeGit:
    """Stands in for subprocess.run, answering git calls by subcommand."""

    def __init__(self):
        self.responses = {
            "config": (0, "git@github.com:acme/widget.git\n", ""),
            "rev-parse": (0, "main\n", ""),
            "shortlog": (0, "    42\tAda Lovelace\n     7\tGrace Hopper\n", ""),
        }
        self.calls: list[list[str]] = []

    def set(self, subcommand: str, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.responses[subcommand] = (returncode, stdout, stderr)

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        subcommand = next(a for a in args if a in GIT_SUBCOMMANDS)
        returncode, stdout, stderr = self.responses[subcommand]
        return subprocess.CompletedProcess(args, returncode, stdout, stderr)

    def called(self, subcommand: str) -> bool:
        return any(subcommand in call for call in self.calls)


@pytest.fixture
def fake_git(monkeypatch) -> FakeGit:
    fake = FakeGit()
    monkeypatch.setattr(command.subprocess, "run", fake)
    return fake


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(repo: Path, *args: str, env: dict | None = None) -> None:
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=repo,
        env=env,
        check=True,
        capture_output=True,
        text=True,
    )


def commit_as(repo: Path, author: str, message: str) -> None:
    email = author.lower().replace(" ", ".") + "@example.com"
    env = dict(os.environ)
    env.update(
        GIT_AUTHOR_NAME=author,
        GIT_AUTHOR_EMAIL=email,
        GIT_COMMITTER_NAME=author,
        GIT_COMMITTER_EMAIL=email,
    )
    _git(repo, "commit", "--allow-empty", "-q", "-m", message, env=env)


@pytest.fixture
def git_repo(tmp_path, monkeypatch) -> Path:
    """A real repository "widget" on branch main with three commits."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    repo = tmp_path / "widget"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo, "remote", "add", "origin", "https://github.com/acme/widget.git")
    commit_as(repo, "Ada Lovelace", "first")
    commit_as(repo, "Ada Lovelace", "second")
    commit_as(repo, "Grace Hopper", "third")
    return repo
