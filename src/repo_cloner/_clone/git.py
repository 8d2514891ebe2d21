import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Sequence, TypeAlias

logger = logging.getLogger(__name__)


class CloneFailure(Exception):
    def __init__(self, url: str, detail: str = ""):
        super().__init__(f"failed to clone {url}: {detail}" if detail else url)
        self.url = url
        self.detail = detail


# clone `url` into `target`, raise CloneFailure if it does not work out
Executor: TypeAlias = Callable[[str, Path], Awaitable[None]]


async def git_clone(url: str, target: Path, git_config: Sequence[str] = ()) -> None:
    cmd = ["git", "clone", url, str(target), *git_config]
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CloneFailure(url, str(e)) from e

    _, stderr = await proc.communicate()
    if proc.returncode != 0:
        detail = stderr.decode(errors="replace").strip()
        raise CloneFailure(url, f"exit {proc.returncode}: {detail}")


def git_executor(git_config: Sequence[str] = ()) -> Executor:
    async def inner(url: str, target: Path) -> None:
        await git_clone(url, target, git_config)

    return inner
