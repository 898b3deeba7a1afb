"""Unit tests for the finalizer.

WHY: The finalizer is the only way a trailing code block gets closed and
the only place the footer is produced. A missing fence leaves the rest of
a rendered page inside a code block.

HOW: Tests call finalize() with constructed states and a fixed instant,
then check the closing fence and every footer line.

RULES:
- Timestamps are injected via FIXED_NOW unless the test is about "now"
"""

from datetime import datetime, timedelta, timezone

from conftest import FIXED_DATE, footer

from jdi.core.finalizer import finalize, format_timestamp
from jdi.core.state import ClassifierState, Configuration


class TestClosingFence:
    """An open block is closed exactly once."""

    def test_closes_open_block(self, js_config, fixed_now):
        state = ClassifierState(seen_first_line=True, in_code_block=True)
        output = finalize(state, js_config, now=fixed_now)
        assert output[0] == "```"
        assert output[1:] == footer("index.js")

    def test_no_fence_when_block_closed(self, js_config, fixed_now):
        state = ClassifierState(seen_first_line=True, in_code_block=False)
        output = finalize(state, js_config, now=fixed_now)
        assert output == footer("index.js")

    def test_empty_file(self, js_config, fixed_now):
        assert finalize(ClassifierState(), js_config, now=fixed_now) == footer("index.js")


class TestFooter:
    """Footer: rule, generation line with backlink, blank line."""

    def test_display_name_used_verbatim(self, fixed_now):
        config = Configuration(language_tag="js", display_name="filename.js")
        output = finalize(ClassifierState(), config, now=fixed_now)
        assert output[1] == (
            'Generated _{}_ from [&#x24C8; filename.js](filename.js "View in source")'.format(FIXED_DATE)
        )

    def test_footer_ends_with_blank_line(self, js_config, fixed_now):
        output = finalize(ClassifierState(), js_config, now=fixed_now)
        assert output[0] == "------------------------"
        assert output[-1] == ""
        assert len(output) == 3

    def test_timestamp_taken_at_finalize_time(self, js_config):
        before = datetime.now().astimezone().replace(microsecond=0)
        line = finalize(ClassifierState(), js_config)[1]
        after = datetime.now().astimezone()
        stamp = line.split("_")[1]
        parsed = datetime.strptime(stamp.split(" (")[0], "%a %b %d %Y %H:%M:%S GMT%z")
        assert before <= parsed <= after


class TestFormatTimestamp:
    """Human-readable date-time with offset and zone name."""

    def test_aware_datetime(self, fixed_now):
        assert format_timestamp(fixed_now) == FIXED_DATE

    def test_utc(self):
        moment = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "Thu Jan 01 2026 00:00:00 GMT+0000 (UTC)"

    def test_naive_datetime_has_no_offset(self):
        moment = datetime(2026, 1, 1, 12, 0, 0)
        assert format_timestamp(moment) == "Thu Jan 01 2026 12:00:00 GMT"

    def test_negative_offset(self):
        moment = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert format_timestamp(moment).startswith("Thu Jan 01 2026 12:00:00 GMT-0500")
