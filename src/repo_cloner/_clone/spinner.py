import asyncio
from typing import Sequence

from rich.console import Console

POLL_INTERVAL = 0.1  # seconds


def _running(tasks: Sequence[asyncio.Future]) -> bool:
    return any(not task.done() for task in tasks)


async def watch(
    tasks: Sequence[asyncio.Future],
    console: Console | None = None,
    interval: float = POLL_INTERVAL,
) -> None:
    """spin until every task is done

    Only looks at task liveness, never at results, so it is safe to leave out.
    """
    if not _running(tasks):
        return

    if console is None:
        console = Console(stderr=True)

    # rich's "line" spinner cycles through - \ | /
    with console.status("Cloning repositories...", spinner="line"):
        while _running(tasks):
            await asyncio.sleep(interval)

    console.print("Cloning complete.")
