import threading
from typing import Sequence

from .job import Failure, Outcome, Success


class Results:
    """outcomes of every clone job in a run

    `record` is safe from any number of tasks or threads,
    read `succeeded`/`failed` only after every job has finished
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._succeeded: list[Success] = []
        self._failed: list[Failure] = []

    def record(self, outcome: Outcome) -> None:
        with self._lock:
            match outcome:
                case Success():
                    self._succeeded.append(outcome)
                case Failure():
                    self._failed.append(outcome)
                case _:
                    raise TypeError(f"not an outcome: {outcome!r}")

    @property
    def succeeded(self) -> Sequence[Success]:
        with self._lock:
            return list(self._succeeded)

    @property
    def failed(self) -> Sequence[Failure]:
        with self._lock:
            return list(self._failed)

    @property
    def has_failures(self) -> bool:
        with self._lock:
            return len(self._failed) > 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._succeeded) + len(self._failed)
