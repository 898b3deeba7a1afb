"""Per-line classification into prose, code, fences, or nothing.

WHY: A source file interleaves comments and code. The generated Markdown
shows comments as narrative text and wraps runs of code in fenced blocks,
so every line must be sorted into one of those roles and the fence edges
must be emitted exactly where the role changes.

HOW: classify() applies four rules in a fixed order and returns the
emitted output lines together with the new ClassifierState:
  1. first-line shebang      → nothing
  2. blank / whitespace-only → the line itself, mode unchanged
  3. trailing ignore token   → nothing, mode unchanged
  4. comment vs. code        → optional fence edge, then the content

RULES:
- Rule order matters: a blank line can never be suppressed, and neither a
  blank nor a suppressed line can open or close a fence
- A documentation line starts with "//" after leading whitespace; the
  whitespace, the marker and ONE following whitespace character are removed
- Code lines are emitted verbatim, indentation included
- Every string (including "") is classified; there is no error path
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Tuple

from jdi.config import COMMENT_MARKER, FENCE, IGNORE_DIRECTIVE, SHEBANG
from jdi.core.state import ClassifierState, Configuration


def is_blank(line: str) -> bool:
    """True for the empty string and whitespace-only lines."""
    return not line.strip()


def is_shebang(line: str) -> bool:
    return line.startswith(SHEBANG)


def is_ignored(line: str) -> bool:
    """True if the line ends with the exact, case-sensitive ignore token."""
    return line.endswith(IGNORE_DIRECTIVE)


def is_doc(line: str) -> bool:
    """True if the line is a ``//`` comment, ignoring leading whitespace."""
    return line.lstrip().startswith(COMMENT_MARKER)


def strip_doc(line: str) -> str:
    """Turn a comment line into prose.

    ``"  // # Title"`` becomes ``"# Title"``; ``"//  indented"`` keeps one
    space (``" indented"``) so Markdown indentation can still be expressed.
    """
    text = line.lstrip()[len(COMMENT_MARKER):]
    if text[:1].isspace():
        text = text[1:]
    return text


def fence_open(config: Configuration) -> str:
    return FENCE + config.language_tag


def classify(
    line: str,
    state: ClassifierState,
    config: Configuration,
) -> Tuple[List[str], ClassifierState]:
    """Decide the fate of one input line.

    Args:
        line: One source line without its terminator.
        state: Mode after the previous line (a fresh state for the first).
        config: Per-file settings; only the language tag is used here.

    Returns:
        Tuple of (output lines, new state). Zero, one, or two output lines
        are produced: nothing, the content alone, or a fence plus content.
    """
    first_line = not state.seen_first_line
    state = replace(state, seen_first_line=True)

    if first_line and is_shebang(line):
        return [], state

    if is_blank(line):
        return [line], state

    if is_ignored(line):
        return [], state

    was_code = state.in_code_block
    now_code = not is_doc(line)
    output: List[str] = []

    if now_code and not was_code:
        output.append(fence_open(config))
    elif was_code and not now_code:
        output.append(FENCE)

    output.append(line if now_code else strip_doc(line))
    return output, replace(state, in_code_block=now_code)
