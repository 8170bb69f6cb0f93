"""
Contract tests against the live Instant Answer API.

These make real HTTP requests to verify the response schema still decodes.
Run only via: DDG_RUN_INTEGRATION=1 pytest -m integration
"""

import pytest

from ddg_answers import AnswerType, Query, TopicGroup, TopicResult

pytestmark = [pytest.mark.integration, pytest.mark.network]

APP_NAME = "ddg_answers_tests"


class TestInstantAnswerContract:
    def test_article_decodes(self):
        answer = Query("Rust programming language", APP_NAME).execute(timeout=30.0)
        assert answer.heading
        assert answer.type is not None

    def test_bang_query_never_redirects(self):
        """no_redirect=1 returns the bang target in Redirect instead of a 3xx."""
        answer = Query("!crates tokei", APP_NAME).execute(timeout=30.0)
        assert answer.redirect

    def test_disambiguation_topics(self):
        answer = Query("Mercury", APP_NAME).no_html().execute(timeout=30.0)
        if answer.type is AnswerType.DISAMBIGUATION:
            assert answer.related_topics
            for topic in answer.related_topics:
                assert isinstance(topic, (TopicResult, TopicGroup))
