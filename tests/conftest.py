"""Shared test fixtures."""

import asyncio
import io
import random
import threading
from pathlib import Path

import pytest
from rich.console import Console

from repo_cloner._clone import CloneFailure
from repo_cloner.config import CloneConfig


class FakeExecutor:
    """Stands in for `git clone`; fails every url containing `fail_marker`."""

    def __init__(self, fail_marker: str = "broken", max_delay: float = 0.0):
        self.fail_marker = fail_marker
        self.max_delay = max_delay
        self.calls: list[tuple[str, Path]] = []
        self.in_flight = 0
        self.peak_in_flight = 0
        self._lock = threading.Lock()

    async def __call__(self, url: str, target: Path) -> None:
        with self._lock:
            self.calls.append((url, target))
            self.in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if self.max_delay > 0:
                await asyncio.sleep(random.uniform(0, self.max_delay))
            if self.fail_marker in url:
                raise CloneFailure(url, "exit 128: repository not found")
        finally:
            with self._lock:
                self.in_flight -= 1


@pytest.fixture
def make_executor():
    return FakeExecutor


@pytest.fixture
def executor(make_executor):
    return make_executor()


@pytest.fixture
def config(tmp_path):
    """Concurrent, ssh, real (not dry) run into a temporary directory."""
    return CloneConfig(
        destination=str(tmp_path / "clones"),
        repo_list=str(tmp_path / "repo_list.txt"),
    )


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=False)


@pytest.fixture
def repo_list(tmp_path):
    path = tmp_path / "repo_list.txt"
    path.write_text(
        "\n".join(
            [
                "# my repos",
                "https://github.com/octocat/hello-world",
                "",
                "   git@github.com:torvalds/linux.git   ",
                "  # indented comment",
                "notaurl",
                "https://github.com/octocat/broken-repo.git",
            ]
        ),
        encoding="utf-8",
    )
    return path
