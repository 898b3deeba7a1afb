"""jdi — literate documentation generated from source files.

WHY: Developers comment their code as they write it. Turning those comments
into narrative Markdown (and the code around them into fenced blocks) gives
a readable documentation page per source file without a separate docs
toolchain, comment grammar, or AST.

HOW: Two-stage pipeline: a pure per-line classifier plus a one-shot
finalizer (``jdi.core``), wrapped by a thin streaming file layer
(``jdi.runner``) and a command-line interface (``jdi.cli``).

RULES:
- ``//`` comment lines become prose, everything else becomes fenced code
- Output order always equals input order; files are streamed line by line
- The core never touches the filesystem; the runner never classifies lines
"""

from jdi.core.state import ClassifierState, Configuration
from jdi.core.stream import Transform, transform
from jdi.runner import doc, run, write_doc

__version__ = "0.1.0"

__all__ = [
    "ClassifierState",
    "Configuration",
    "Transform",
    "doc",
    "run",
    "transform",
    "write_doc",
]
