from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Iterator

DEFAULT_HOST = "github.com"


class Scheme(StrEnum):
    SSH = "ssh"
    HTTPS = "https"

    def prefix(self, host: str) -> str:
        # ssh separates host and path with ':', https with '/'
        if self is Scheme.SSH:
            return f"git@{host}:"
        return f"https://{host}/"


class MalformedReference(ValueError):
    def __init__(self, reference: str):
        super().__init__(f"malformed repo url: {reference}")
        self.reference = reference


@dataclass(frozen=True)
class Repo:
    url: str
    owner: str
    name: str

    @property
    def label(self) -> str:
        return f"{self.owner}-{self.name}"

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


def normalize_url(reference: str, scheme: Scheme, host: str = DEFAULT_HOST) -> str:
    """rewrite a known-host reference into `scheme`

    only `https://<host>/...` and `git@<host>:...` are recognized,
    anything else is returned untouched
    """
    for known in Scheme:
        prefix = known.prefix(host)
        if reference.startswith(prefix):
            return scheme.prefix(host) + reference.removeprefix(prefix)
    return reference


def parse_reference(
    reference: str, scheme: Scheme, host: str = DEFAULT_HOST
) -> Repo:
    url = normalize_url(reference, scheme, host)

    parts = url.replace(":", "/").rstrip("/").split("/")
    if len(parts) < 2:
        raise MalformedReference(reference)

    owner = parts[-2]
    name = parts[-1].removesuffix(".git")
    if not owner or not name:
        raise MalformedReference(reference)

    return Repo(url=url, owner=owner, name=name)


# repo list file format:
#    # comment
#    https://github.com/owner1/name1
#    git@github.com:owner2/name2.git
#    ...
def read_references(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield line
