#!/usr/bin/env python3
"""
Centralized constants for history-fabricator.

Defaults describe the no-argument run: 70 commits between
2023-04-01 and 2024-09-30, sorted, pushed at the end.
"""

# Run defaults
DEFAULT_COMMIT_COUNT = 70
DEFAULT_START_DATE = "2023-04-01"
DEFAULT_END_DATE = "2024-09-30"
DEFAULT_PUSH = True
DEFAULT_SORT_DATES = True

# Payload
DEFAULT_PAYLOAD_NAME = "data.json"
PAYLOAD_INDENT = 2
COMMIT_MESSAGE_TEMPLATE = "chore: dummy commit {index} ({timestamp})"

# Time-of-day ranges (inclusive upper bounds)
MAX_HOUR = 23
MAX_MINUTE = 59
MAX_SECOND = 59

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Accepted spellings for boolean environment flags
TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off"}
