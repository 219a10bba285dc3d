#!/usr/bin/env python3
"""
Drive a fabrication run: sample dates, write backdated commits, push.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from git import Repo

from history_fabricator.sampler import sample_timestamps
from history_fabricator.utils.config import FabricatorConfig
from history_fabricator.writer import CommitRecord, create_commit

logger = logging.getLogger(__name__)


def open_repository(path: str | Path) -> Repo:
    """Open the git working tree containing ``path``."""
    return Repo(path, search_parent_directories=True)


def push_to_remote(repo: Repo) -> None:
    """Push the current branch with git's default push behaviour (configured upstream)."""
    repo.git.push()


def make_commits_in_range(
    config: FabricatorConfig,
    repo: Repo | None = None,
    rng: random.Random | None = None,
) -> list[CommitRecord]:
    """Create ``config.commit_count`` backdated commits, then optionally push.

    Args:
        config: Run settings
        repo: Repository to commit into; opened from ``config.repo_path`` if omitted
        rng: Random source; seeded from ``config.seed`` if omitted

    Returns:
        The created commits in the order they were written
    """
    if config.commit_count <= 0 and not config.push:
        return []

    if repo is None:
        repo = open_repository(config.repo_path)

    if config.commit_count <= 0:
        logger.info("No commits requested; pushing to remote...")
        push_to_remote(repo)
        logger.info("Push complete.")
        return []

    if rng is None:
        rng = random.Random(config.seed)

    timestamps = sample_timestamps(config.start_date, config.end_date, config.commit_count, rng=rng)
    if config.sort_dates:
        timestamps.sort()

    payload_path = Path(config.payload_path).absolute()
    logger.info(
        "Creating %d commits between %s and %s in %s",
        len(timestamps),
        config.start_date,
        config.end_date,
        repo.working_tree_dir,
    )

    records: list[CommitRecord] = []
    for index, timestamp in enumerate(timestamps, start=1):
        records.append(create_commit(repo, payload_path, timestamp, index))

    if config.push:
        logger.info("Pushing to remote...")
        push_to_remote(repo)
        logger.info("Push complete.")
    else:
        logger.info("Done. Not pushed (push disabled).")
    return records
