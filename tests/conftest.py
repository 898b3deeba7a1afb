"""Shared test fixtures for the jdi test suite.

WHY: Most test modules need the same per-file Configuration, a fixed
footer timestamp, and a quick way to create source files on disk.
Centralizing them keeps expected output reproducible across modules.

HOW: Pytest fixtures provide a JS Configuration, a timezone-aware fixed
instant, and a factory that writes source files into tmp_path.

RULES:
- FIXED_NOW is timezone-aware so the rendered footer is deterministic
- All file I/O fixtures write into tmp_path (no shared state on disk)
"""

from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from jdi.core.state import ClassifierState, Configuration

FIXED_NOW = datetime(2026, 10, 17, 9, 30, 0, tzinfo=timezone(timedelta(hours=2), "CEST"))
FIXED_DATE = "Sat Oct 17 2026 09:30:00 GMT+0200 (CEST)"

# Scenario from the jdi README: shebang, heading, blank separator, code.
TITLE_SOURCE: List[str] = [
    "#!/usr/bin/env node",
    "// # Title",
    "",
    "const x = 1",
]


def footer(name: str) -> List[str]:
    """Expected footer lines for FIXED_NOW."""
    return [
        "------------------------",
        'Generated _{}_ from [&#x24C8; {}]({} "View in source")'.format(FIXED_DATE, name, name),
        "",
    ]


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def js_config():
    return Configuration(language_tag="js", display_name="index.js")


@pytest.fixture
def fresh_state():
    return ClassifierState()


@pytest.fixture
def write_source(tmp_path):
    """Factory: write_source("index.js", ["line", ...]) → Path."""

    def _write(name: str, lines: List[str], newline: str = "\n"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes((newline.join(lines) + newline).encode("utf-8"))
        return path

    return _write
