import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from mashumaro.exceptions import InvalidFieldValue, MissingField
from mashumaro.mixins.toml import DataClassTOMLMixin

from .parser import DEFAULT_HOST, Scheme, read_references

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    pass


@dataclass(frozen=True)
class CloneConfig:
    destination: str = field(default=".")
    repo_list: str = field(default="./repo_list.txt")
    scheme: Scheme = field(default=Scheme.SSH)
    host: str = field(default=DEFAULT_HOST)
    sequential: bool = field(default=False)
    dry_run: bool = field(default=False)
    # None means one clone in flight per repo
    max_jobs: int | None = field(default=None)
    git_config: Sequence[str] = field(default_factory=tuple)


@dataclass
class Config(DataClassTOMLMixin):
    clone: CloneConfig = field(default_factory=CloneConfig)

    @classmethod
    def __pre_deserialize__(cls, d: dict[Any, Any]) -> dict[Any, Any]:
        # git_config is a toml array, a string is not split into arguments
        clone = d.get("clone")
        git_config = clone.get("git_config", []) if isinstance(clone, dict) else []
        if not isinstance(git_config, list):
            raise ValueError(
                f"git_config must be a list of arguments, got {git_config!r}"
            )
        return d


CONFIG_FILE_PATH = Path("repo-cloner.toml")


def load_config(cfg_path: Path | None = None) -> Config:
    if cfg_path is None:
        cfg_path = CONFIG_FILE_PATH
    elif not cfg_path.exists():
        raise ConfigurationError(f"Config file not found: {cfg_path}")

    if not cfg_path.exists():
        logger.info(f"not found {cfg_path}, use default config")
        return Config()
    content = cfg_path.read_text(encoding="utf-8")
    logger.info(f"use config from {cfg_path}")
    try:
        config = Config.from_toml(content)
    except (ValueError, MissingField, InvalidFieldValue) as e:
        raise ConfigurationError(f"invalid config file {cfg_path}: {e}") from e

    max_jobs = config.clone.max_jobs
    if max_jobs is not None and max_jobs < 1:
        raise ConfigurationError(f"max_jobs must be at least 1, got {max_jobs}")
    logger.debug(f"{config=}")
    return config


def load_references(repo_list: str | Path) -> Sequence[str]:
    path = Path(repo_list)
    if not path.is_file():
        raise ConfigurationError(f"Repo list file not found: {path}")

    lines = path.read_text(encoding="utf-8").splitlines()
    references = list(read_references(lines))
    logger.debug(f"read {len(references)} repo urls from {path}")
    return references
