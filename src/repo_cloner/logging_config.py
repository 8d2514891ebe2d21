import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(debug: bool = False, console: Console | None = None) -> None:
    level = logging.DEBUG if debug else logging.INFO

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=debug,
        show_path=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("repo_cloner")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
