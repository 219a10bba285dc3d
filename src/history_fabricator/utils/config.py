from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from history_fabricator.constants import (
    DEFAULT_COMMIT_COUNT,
    DEFAULT_END_DATE,
    DEFAULT_PAYLOAD_NAME,
    DEFAULT_PUSH,
    DEFAULT_SORT_DATES,
    DEFAULT_START_DATE,
    FALSY,
    TRUTHY,
)
from history_fabricator.sampler import parse_date

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class FabricatorConfig:
    """Settings for a single fabrication run."""

    repo_path: Path = Path(".")
    payload_name: str = DEFAULT_PAYLOAD_NAME
    commit_count: int = DEFAULT_COMMIT_COUNT
    start_date: date = parse_date(DEFAULT_START_DATE)
    end_date: date = parse_date(DEFAULT_END_DATE)
    push: bool = DEFAULT_PUSH
    sort_dates: bool = DEFAULT_SORT_DATES
    seed: int | None = None

    @property
    def payload_path(self) -> Path:
        return Path(self.repo_path) / self.payload_name


def _env(name: str) -> str | None:
    # Treat empty strings as absent so blank CI secrets fall back to defaults
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _to_int(name: str, value: str | int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _to_bool(name: str, value: str | bool) -> bool:
    if isinstance(value, bool):
        return value
    flag = value.lower().strip()
    if flag in TRUTHY:
        return True
    if flag in FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {value!r}")


def _to_date(name: str, value: str | date) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        raise ConfigError(f"{name} must be an ISO date (YYYY-MM-DD), got {value!r}") from e


def get_fabricator_config() -> FabricatorConfig:
    """Return run settings after loading environment variables.

    Values from a ``.env`` file are loaded first; real environment variables
    win over the file.
    """
    from dotenv import find_dotenv, load_dotenv

    env_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path=env_path if env_path else None, override=False)

    config = FabricatorConfig()
    repo = _env("FABRICATOR_REPO")
    commits = _env("FABRICATOR_COMMITS")
    start = _env("FABRICATOR_START")
    end = _env("FABRICATOR_END")
    push = _env("FABRICATOR_PUSH")
    sort_dates = _env("FABRICATOR_SORT")
    payload = _env("FABRICATOR_PAYLOAD")
    seed = _env("FABRICATOR_SEED")

    if repo:
        config = replace(config, repo_path=Path(repo))
    if payload:
        config = replace(config, payload_name=payload)
    if commits:
        config = replace(config, commit_count=_to_int("FABRICATOR_COMMITS", commits))
    if start:
        config = replace(config, start_date=_to_date("FABRICATOR_START", start))
    if end:
        config = replace(config, end_date=_to_date("FABRICATOR_END", end))
    if push:
        config = replace(config, push=_to_bool("FABRICATOR_PUSH", push))
    if sort_dates:
        config = replace(config, sort_dates=_to_bool("FABRICATOR_SORT", sort_dates))
    if seed:
        config = replace(config, seed=_to_int("FABRICATOR_SEED", seed))
    return config


def resolve_fabricator_args(args: argparse.Namespace) -> FabricatorConfig:
    """Resolve final run settings from explicit args over env/.env.

    - Reads defaults via get_fabricator_config()
    - Overrides each field if an explicit value is provided
    """
    config = get_fabricator_config()
    if getattr(args, "repo", None):
        config = replace(config, repo_path=Path(args.repo))
    if getattr(args, "payload", None):
        config = replace(config, payload_name=args.payload)
    if getattr(args, "commits", None) is not None:
        config = replace(config, commit_count=_to_int("--commits", args.commits))
    if getattr(args, "start", None):
        config = replace(config, start_date=_to_date("--start", args.start))
    if getattr(args, "end", None):
        config = replace(config, end_date=_to_date("--end", args.end))
    if getattr(args, "no_push", False):
        config = replace(config, push=False)
    if getattr(args, "no_sort", False):
        config = replace(config, sort_dates=False)
    if getattr(args, "seed", None) is not None:
        config = replace(config, seed=_to_int("--seed", args.seed))

    if config.start_date > config.end_date:
        logger.warning(
            "Start date %s is after end date %s; every commit will land on %s",
            config.start_date,
            config.end_date,
            config.start_date,
        )
    return config
