from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from git import Repo

from history_fabricator.constants import COMMIT_MESSAGE_TEMPLATE, PAYLOAD_INDENT
from history_fabricator.sampler import format_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitRecord:
    sequence_index: int
    timestamp: datetime
    hexsha: str | None = None

    @property
    def iso_date(self) -> str:
        return format_timestamp(self.timestamp)

    def to_payload(self) -> dict[str, str | int]:
        return {"date": self.iso_date, "commitIndex": self.sequence_index}

    @property
    def message(self) -> str:
        return COMMIT_MESSAGE_TEMPLATE.format(index=self.sequence_index, timestamp=self.iso_date)


def write_payload(payload_path: str | Path, record: CommitRecord) -> None:
    """Overwrite the payload file with the record of the latest commit."""
    Path(payload_path).write_text(
        json.dumps(record.to_payload(), indent=PAYLOAD_INDENT), encoding="utf-8"
    )


def commit_with_date(repo: Repo, message: str, when: datetime) -> str:
    """Commit the staged index with author and committer dates forced to ``when``.

    Runs ``git commit`` so the usual failures surface as ``GitCommandError``:
    nothing staged, missing identity, or a date git refuses.
    """
    iso = format_timestamp(when)
    with repo.git.custom_environment(GIT_AUTHOR_DATE=iso, GIT_COMMITTER_DATE=iso):
        repo.git.commit("-m", message)
    return repo.head.commit.hexsha


def create_commit(
    repo: Repo, payload_path: str | Path, timestamp: datetime, index: int
) -> CommitRecord:
    """Write the payload, stage it and create one backdated commit.

    Errors propagate as-is; commits created before the failure stay in history.
    """
    record = CommitRecord(sequence_index=index, timestamp=timestamp)
    write_payload(payload_path, record)

    repo.index.add([str(payload_path)])
    hexsha = commit_with_date(repo, record.message, timestamp)
    logger.info("Committed %d - %s", index, record.iso_date)
    return CommitRecord(sequence_index=index, timestamp=timestamp, hexsha=hexsha)
