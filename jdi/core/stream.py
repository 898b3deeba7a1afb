"""Drivers that thread ClassifierState through a sequence of lines.

WHY: classify() and finalize() are pure, so somebody has to own the state
between calls and guarantee that finalize() runs exactly once, after the
last line. Making that the job of one small module keeps the ordering
contract explicit instead of relying on incidental call order.

HOW: Two equivalent front ends:
  transform()  — pull style: lazily maps an iterable of lines to output lines
  Transform    — push style: feed() one line at a time, then finish()

RULES:
- Lines must be supplied in file order, each exactly once
- finalize() is called once, after the input is exhausted
- Output is yielded as soon as each line is classified (no buffering)
- A Transform cannot be fed or finished again after finish()
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Iterator, List, Optional

from jdi.core.classifier import classify
from jdi.core.finalizer import finalize
from jdi.core.state import ClassifierState, Configuration


def transform(
    lines: Iterable[str],
    config: Configuration,
    now: Optional[datetime] = None,
) -> Iterator[str]:
    """Lazily convert source lines into document lines.

    Args:
        lines: Finite iterable of lines without terminators, in file order.
        config: Per-file settings.
        now: Optional fixed footer timestamp (for reproducible output).

    Yields:
        Output lines without terminators, ending with the footer.
    """
    state = ClassifierState()
    for line in lines:
        output, state = classify(line, state, config)
        yield from output
    yield from finalize(state, config, now=now)


class Transform:
    """Push-style classifier for callers that receive lines one by one.

    Example::

        t = Transform(Configuration("py", "tool.py"))
        for line in source:
            sink.extend(t.feed(line))
        sink.extend(t.finish())
    """

    def __init__(self, config: Configuration) -> None:
        self.config = config
        self.state = ClassifierState()
        self.finished = False

    def feed(self, line: str) -> List[str]:
        """Classify one line and return the output lines it produced."""
        self._check_open()
        output, self.state = classify(line, self.state, self.config)
        return output

    def finish(self, now: Optional[datetime] = None) -> List[str]:
        """Close the stream and return the closing fence and footer."""
        self._check_open()
        self.finished = True
        return finalize(self.state, self.config, now=now)

    def _check_open(self) -> None:
        if self.finished:
            raise ValueError(
                "Transform for {!r} is already finished".format(self.config.display_name)
            )
