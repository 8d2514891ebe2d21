import asyncio
import logging
from typing import Iterable, Iterator

from rich.console import Console

from ..config import CloneConfig
from ..parser import MalformedReference, parse_reference
from .git import CloneFailure, Executor, git_executor
from .job import CloneJob, Failure, Outcome
from .results import Results
from .spinner import watch

logger = logging.getLogger(__name__)


def clone_repos(
    references: Iterable[str],
    config: CloneConfig,
    *,
    executor: Executor | None = None,
    console: Console | None = None,
    progress: bool = True,
) -> Results:
    """clone every reference, one outcome per reference

    malformed references fail without a clone
    sequential: one job after another, in input order
    concurrent: a task per job right away, `progress` spins until all are done
    """
    if executor is None:
        executor = git_executor(config.git_config)

    logger.debug("into asyncio runtime")
    return asyncio.run(
        _clone_repos(references, config, executor, console=console, progress=progress)
    )


async def _clone_repos(
    references: Iterable[str],
    config: CloneConfig,
    executor: Executor,
    *,
    console: Console | None,
    progress: bool,
) -> Results:
    results = Results()
    jobs = _build_jobs(references, config, results)

    if config.sequential:
        for job in jobs:
            logger.info(f"Cloning {job.repo}...")
            await _run_job(job, config, executor, results)
        return results

    semaphore = None
    if config.max_jobs is not None:
        semaphore = asyncio.Semaphore(config.max_jobs)

    tasks = [
        asyncio.create_task(_run_job(job, config, executor, results, semaphore))
        for job in jobs
    ]
    if len(tasks) == 0:
        return results

    logger.debug(f"launched {len(tasks)} clone jobs")
    if progress:
        await watch(tasks, console)
    await asyncio.gather(*tasks)

    return results


def _build_jobs(
    references: Iterable[str],
    config: CloneConfig,
    results: Results,
) -> Iterator[CloneJob]:
    for index, reference in enumerate(references):
        try:
            repo = parse_reference(reference, config.scheme, config.host)
        except MalformedReference as e:
            logger.warning(f"Skipping {e}")
            results.record(Failure(index, reference))
            continue

        yield CloneJob.create(index, reference, repo, config.destination)


async def _run_job(
    job: CloneJob,
    config: CloneConfig,
    executor: Executor,
    results: Results,
    semaphore: asyncio.Semaphore | None = None,
) -> None:
    if config.dry_run:
        logger.info(f"[DRY RUN] Would clone {job.repo.url} into {job.target}")
        results.record(job.succeed())
        return

    if semaphore is None:
        outcome = await _execute(job, executor)
    else:
        async with semaphore:
            outcome = await _execute(job, executor)

    results.record(outcome)


async def _execute(job: CloneJob, executor: Executor) -> Outcome:
    try:
        await executor(job.repo.url, job.target)
    except CloneFailure as e:
        logger.debug(str(e))
        return job.fail()
    except Exception as e:
        logger.error(f"clone of {job.reference} raised {e!r}")
        return job.fail()

    logger.debug(f"cloned {job.repo} into {job.target}")
    return job.succeed()
