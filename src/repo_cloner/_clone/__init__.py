from .dispatch import clone_repos
from .git import CloneFailure, Executor, git_clone
from .job import CloneJob, Failure, Outcome, Success
from .report import Summary, build_summary, render_summary
from .results import Results

__all__ = [
    "CloneFailure",
    "CloneJob",
    "Executor",
    "Failure",
    "Outcome",
    "Results",
    "Success",
    "Summary",
    "build_summary",
    "clone_repos",
    "git_clone",
    "render_summary",
]
