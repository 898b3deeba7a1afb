"""Per-file value types shared by the classifier and the finalizer.

WHY: The classifier needs to remember two facts between lines (have we
seen the first line yet, are we inside a code fence) and both steps need
the file's fence tag and display name. Keeping these as explicit values
means each transition can be tested by constructing a state directly.

HOW: Two frozen dataclasses:
  Configuration   — immutable per-file settings, built before the first line
  ClassifierState — the mode after the most recently processed line

RULES:
- A fresh ClassifierState (both flags False) is created for every file
- States are never mutated; classify() returns a new one
- in_code_block is read before it is updated so edges are detectable
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Configuration:
    """Immutable settings for one source file.

    Attributes:
        language_tag: Annotation written after the opening fence, e.g. ``"js"``.
                      May be empty, which yields a bare fence.
        display_name: File name shown in the footer backlink, used verbatim.
    """

    language_tag: str = ""
    display_name: str = ""


@dataclass(frozen=True)
class ClassifierState:
    """Mode of the classifier after the most recently processed line.

    Attributes:
        seen_first_line: True once any line has been processed. Only used
                         to recognize a leading shebang.
        in_code_block: True while the last classified line was code. Blank,
                       shebang and suppressed lines leave it untouched.
    """

    seen_first_line: bool = False
    in_code_block: bool = False
