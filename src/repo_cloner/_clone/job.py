from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from ..parser import Repo


@dataclass(frozen=True)
class Success:
    index: int
    label: str


@dataclass(frozen=True)
class Failure:
    index: int
    reference: str


Outcome: TypeAlias = Success | Failure


@dataclass
class CloneJob:
    """one repo to clone

    index is the position of the reference in the repo list, reference is the
    line as it was written there.
    """

    index: int
    reference: str
    repo: Repo
    target: Path
    outcome: Outcome | None = field(default=None, init=False)

    @classmethod
    def create(cls, index: int, reference: str, repo: Repo, destination: str):
        target = Path(destination) / repo.label
        return cls(index, reference, repo, target)

    def settle(self, outcome: Outcome) -> Outcome:
        if self.outcome is not None:
            raise RuntimeError(f"{self.repo} already settled as {self.outcome}")
        self.outcome = outcome
        return outcome

    def succeed(self) -> Outcome:
        return self.settle(Success(self.index, self.repo.label))

    def fail(self) -> Outcome:
        return self.settle(Failure(self.index, self.reference))
