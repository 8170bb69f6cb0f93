"""Tests for the timing decorator."""

import logging

import pytest

from ddg_answers.utils.observability import timed


class TestTimed:
    def test_sync_logs_duration(self, caplog):
        @timed
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG, logger="ddg_answers.utils.observability"):
            assert add(1, 2) == 3
        assert "add took" in caplog.text

    def test_logs_when_raising(self, caplog):
        @timed(level=logging.INFO)
        def fail():
            raise ValueError("boom")

        with caplog.at_level(logging.INFO, logger="ddg_answers.utils.observability"):
            with pytest.raises(ValueError):
                fail()
        assert "fail took" in caplog.text

    @pytest.mark.asyncio
    async def test_async_logs_duration(self, caplog):
        @timed
        async def fetch():
            return "ok"

        with caplog.at_level(logging.DEBUG, logger="ddg_answers.utils.observability"):
            assert await fetch() == "ok"
        assert "fetch took" in caplog.text

    def test_preserves_name(self):
        @timed
        def execute():
            pass

        assert execute.__name__ == "execute"
