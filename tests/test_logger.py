"""Tests for the structured event logger."""

import io
import json

import pytest

from apsp.logger import StdLogger


class TestStdLogger:
    def test_text_format(self):
        stream = io.StringIO()
        StdLogger(level="info", stream=stream).info("solved", n=3, m=4)
        assert stream.getvalue() == "info solved n=3 m=4\n"

    def test_json_format_stringifies_unknown_values(self):
        stream = io.StringIO()
        StdLogger(level="debug", json_fmt=True, stream=stream).debug("edge", e=(0, 1), s={1})
        assert json.loads(stream.getvalue()) == {
            "level": "debug",
            "event": "edge",
            "e": [0, 1],
            "s": "{1}",
        }

    def test_level_filtering(self):
        stream = io.StringIO()
        log = StdLogger(level="info", stream=stream)
        log.debug("hidden")
        log.warning("shown")
        assert stream.getvalue() == "warning shown\n"

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            StdLogger(level="trace")
