from dataclasses import dataclass, field
from typing import Sequence

from mashumaro.mixins.orjson import DataClassORJSONMixin

from .results import Results

TITLE = "================ Clone Summary ================"
RULE = "=" * len(TITLE)


@dataclass
class Summary(DataClassORJSONMixin):
    succeeded: Sequence[str] = field(default_factory=list)
    failed: Sequence[str] = field(default_factory=list)

    def __str__(self) -> str:
        return render_summary(self)


def build_summary(results: Results) -> Summary:
    # completion order differs between runs, input order does not
    succeeded = sorted(results.succeeded, key=lambda s: s.index)
    failed = sorted(results.failed, key=lambda f: f.index)
    return Summary(
        succeeded=[s.label for s in succeeded],
        failed=[f.reference for f in failed],
    )


def render_summary(summary: Summary) -> str:
    lines = [TITLE, f"Successful: {len(summary.succeeded)}"]
    lines.extend(f"  - {label}" for label in summary.succeeded)

    if len(summary.failed) > 0:
        lines.append("")
        lines.append(f"Failed: {len(summary.failed)}")
        lines.extend(f"  - {reference}" for reference in summary.failed)

    lines.append(RULE)
    return "\n".join(lines)
