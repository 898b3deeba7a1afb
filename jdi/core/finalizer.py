"""One-shot stream termination: close the fence, append the footer.

WHY: No sentinel line follows the last line of a file, so a trailing code
block would stay open forever. The finalizer also stamps every generated
document with when it was built and which source file it documents.

HOW: finalize() emits a closing fence if the state says a block is still
open, then the three footer lines. The timestamp is taken when finalize()
runs unless a fixed instant is injected.

RULES:
- Exactly one closing fence if and only if state.in_code_block
- Footer: rule line, "Generated _<date>_ from [&#x24C8; name](name ...)", blank
- The display name is used verbatim, no path handling
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from jdi.config import FENCE, FOOTER_RULE
from jdi.core.state import ClassifierState, Configuration


def format_timestamp(moment: datetime) -> str:
    """Render an instant like ``Sat Oct 17 2026 09:30:00 GMT+0200 (CEST)``.

    Naive datetimes are rendered without an offset.
    """
    text = moment.strftime("%a %b %d %Y %H:%M:%S GMT%z")
    zone = moment.tzname()
    if zone:
        text += " ({})".format(zone)
    return text


def footer_lines(display_name: str, moment: datetime) -> List[str]:
    return [
        FOOTER_RULE,
        'Generated _{date}_ from [&#x24C8; {name}]({name} "View in source")'.format(
            date=format_timestamp(moment), name=display_name,
        ),
        "",
    ]


def finalize(
    state: ClassifierState,
    config: Configuration,
    now: Optional[datetime] = None,
) -> List[str]:
    """Produce the lines that terminate a document.

    Args:
        state: State after the last input line.
        config: Per-file settings; only the display name is used here.
        now: Instant to stamp into the footer. Defaults to the current
             local time with its UTC offset.

    Returns:
        The closing fence (if a block is open) followed by the footer.
    """
    if now is None:
        now = datetime.now().astimezone()

    output: List[str] = []
    if state.in_code_block:
        output.append(FENCE)
    output.extend(footer_lines(config.display_name, now))
    return output
