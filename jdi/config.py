"""Configuration constants, protocol markers, and .env loading.

WHY: Centralizes every configurable value and every fixed marker of the
generated Markdown so they are easy to find and impossible to drift apart
between the classifier, the finalizer, and the tests.

HOW: python-dotenv loads the .env file on import. Defaults that users may
reasonably change (fallback fence tag, output suffix, worker count) read
environment variables; the textual protocol is plain module constants.

RULES:
- DEFAULT_LANGUAGE_TAG is used when a source file has no extension
- DEFAULT_JOBS is always at least 1
- OUTPUT_SUFFIX is appended to the full source file name (index.js → index.js.md)
- Protocol constants (markers, fences, footer rule) are NOT overridable;
  downstream renderers depend on them byte for byte
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# User-overridable defaults
# ---------------------------------------------------------------------------

DEFAULT_LANGUAGE_TAG = os.getenv("JDI_DEFAULT_LANGUAGE", "js")
OUTPUT_SUFFIX = os.getenv("JDI_OUTPUT_SUFFIX", ".md")


def _env_jobs(default: int = 4) -> int:
    """Read JDI_JOBS as a worker count of at least 1.

    WHY: ThreadPoolExecutor rejects a count below 1, and a typo in .env
    should not stop the CLI from starting.

    RULES:
    - Unset or non-integer values fall back to the default
    - Values below 1 are raised to 1
    """
    try:
        jobs = int(os.getenv("JDI_JOBS", str(default)))
    except ValueError:
        return default
    return max(1, jobs)


DEFAULT_JOBS = _env_jobs()

# ---------------------------------------------------------------------------
# Fixed textual protocol
# ---------------------------------------------------------------------------

COMMENT_MARKER = "//"
"""Single-line comment marker; lines starting with it become prose."""

SHEBANG = "#!"
"""Interpreter directive, dropped when it is the very first line."""

IGNORE_DIRECTIVE = "jdi-disable-line"
"""Trailing token that removes a line from the output (cf. eslint-disable-line)."""

FENCE = "```"
FOOTER_RULE = "------------------------"
