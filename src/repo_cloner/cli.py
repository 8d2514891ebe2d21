"""clone every repo in a repo list

repo list: one url per line, blank lines and lines starting with # are skipped
config: repo-cloner.toml, [clone] table, flags below override it
"""

import dataclasses
import logging
from pathlib import Path
from typing import Sequence

from ._clone import build_summary, clone_repos, render_summary
from .config import CloneConfig, ConfigurationError, load_config, load_references
from .logging_config import setup_logging
from .parser import Scheme

logger = logging.getLogger(__name__)


def prepare_destination(config: CloneConfig) -> None:
    dest = Path(config.destination)

    if config.dry_run:
        logger.info(f"[DRY RUN] Would create {dest}")
    elif dest.is_dir():
        logger.info(f"Clone destination: {dest}")
    else:
        logger.info(f"Directory does not exist. Creating: {dest}")
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Failed to create directory: {dest}") from e


def clone(config: CloneConfig, *, json_path: str | None = None, progress=True) -> bool:
    """clone the repo list of `config`

    return True if every repo was cloned
    """

    prepare_destination(config)
    references = load_references(config.repo_list)
    if len(references) == 0:
        logger.info("no repo to clone")

    results = clone_repos(references, config, progress=progress)
    summary = build_summary(results)

    print()
    print(render_summary(summary))

    if json_path is not None:
        Path(json_path).write_text(summary.to_json(), encoding="utf-8")
        logger.info(f"summary written to {json_path}")

    if config.dry_run:
        print()
        print("Dry run complete. No repositories were actually cloned.")

    return not results.has_failures


def _path_arg(value: str) -> str:
    # also accept the `-d=DIR` spelling
    return value.removeprefix("=")


def _override(config: CloneConfig, args) -> CloneConfig:
    changes = {}
    if args.destination is not None:
        changes["destination"] = args.destination
    if args.repo_list is not None:
        changes["repo_list"] = args.repo_list
    if args.https:
        changes["scheme"] = Scheme.HTTPS
    if args.sequential:
        changes["sequential"] = True
    if args.dry_run:
        changes["dry_run"] = True
    if args.jobs is not None:
        changes["max_jobs"] = args.jobs
    return dataclasses.replace(config, **changes)


def main(argv: Sequence[str] | None = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description=__doc__, formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-d", "--destination", type=_path_arg, help="Directory to clone into"
    )
    parser.add_argument(
        "-r", "--repo-list", type=_path_arg, help="File with the list of repos"
    )
    parser.add_argument(
        "-H",
        "--https",
        "--HTTPS",
        action="store_true",
        help="Clone with https:// instead of git@ (ssh key)",
    )
    parser.add_argument(
        "-s", "--sequential", action="store_true", help="Clone one repo at a time"
    )
    parser.add_argument(
        "-p", "--dry-run", action="store_true", help="Show what would be cloned"
    )
    parser.add_argument(
        "-j", "--jobs", type=int, help="Max clones in flight (default: no limit)"
    )
    parser.add_argument("--json", metavar="FILE", help="Also write summary as JSON")
    parser.add_argument("--config", type=Path, help="Config file path")
    parser.add_argument(
        "--no-progress", action="store_true", help="Do not show the spinner"
    )
    parser.add_argument("--debug", action="store_true", help="Set log level as DEBUG")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    logger.debug(f"{args=}")

    if args.jobs is not None and args.jobs < 1:
        parser.error("--jobs must be at least 1")

    try:
        config = _override(load_config(args.config).clone, args)
        ok = clone(config, json_path=args.json, progress=not args.no_progress)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        return 1

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
