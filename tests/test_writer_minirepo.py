#!/usr/bin/env python3

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from git.exc import GitCommandError

from history_fabricator.sampler import format_timestamp
from history_fabricator.writer import CommitRecord, commit_with_date, create_commit


@pytest.mark.unit
def test_commit_record_payload_and_message():
    ts = datetime(2025, 1, 1, 8, 30, 0, tzinfo=timezone.utc)
    record = CommitRecord(sequence_index=4, timestamp=ts)

    assert record.to_payload() == {"date": "2025-01-01T08:30:00+00:00", "commitIndex": 4}
    assert record.message == "chore: dummy commit 4 (2025-01-01T08:30:00+00:00)"


@pytest.mark.integration
def test_commits_carry_forced_dates(git_repo):
    payload = Path(git_repo.working_tree_dir) / "data.json"
    stamps = [
        datetime(2023, 4, 1, 9, 0, 0, tzinfo=timezone.utc),
        datetime(2023, 6, 15, 17, 45, 12, tzinfo=timezone.utc),
        datetime(2024, 9, 30, 23, 59, 59, tzinfo=timezone.utc),
    ]

    records = [create_commit(git_repo, payload, ts, i) for i, ts in enumerate(stamps, start=1)]

    history = list(reversed(list(git_repo.iter_commits())))
    assert len(history) == 3
    for commit, ts, record in zip(history, stamps, records):
        assert commit.authored_datetime == ts
        assert commit.committed_datetime == ts
        assert commit.hexsha == record.hexsha
        assert format_timestamp(ts) in commit.message

    # Each commit touches only the payload file
    assert set(history[-1].stats.files) == {"data.json"}
    assert json.loads(payload.read_text()) == {"date": format_timestamp(stamps[-1]), "commitIndex": 3}


@pytest.mark.integration
def test_commit_with_date_sets_parent_to_previous_head(git_repo):
    workdir = Path(git_repo.working_tree_dir)
    (workdir / "a.txt").write_text("one")
    git_repo.index.add(["a.txt"])
    first = commit_with_date(git_repo, "first", datetime(2020, 1, 1, tzinfo=timezone.utc))
    (workdir / "a.txt").write_text("two")
    git_repo.index.add(["a.txt"])
    second = commit_with_date(git_repo, "second", datetime(2019, 1, 1, tzinfo=timezone.utc))

    head = git_repo.commit(second)
    assert [p.hexsha for p in head.parents] == [first]
    assert head.authored_datetime == datetime(2019, 1, 1, tzinfo=timezone.utc)


@pytest.mark.integration
def test_nothing_staged_raises_and_keeps_history(git_repo):
    payload = Path(git_repo.working_tree_dir) / "data.json"
    ts = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    create_commit(git_repo, payload, ts, 1)

    # Identical payload leaves nothing to commit
    with pytest.raises(GitCommandError):
        create_commit(git_repo, payload, ts, 1)

    assert len(list(git_repo.iter_commits())) == 1


@pytest.mark.integration
def test_unwritable_payload_path_raises(git_repo):
    missing_dir = Path(git_repo.working_tree_dir) / "missing" / "data.json"
    with pytest.raises(OSError):
        create_commit(git_repo, missing_dir, datetime(2025, 1, 1, tzinfo=timezone.utc), 1)
