"""Typed client for the DuckDuckGo Instant Answer API.

Example:
    from ddg_answers import Query

    answer = Query("Rust", "my_app").no_html().execute()
    print(answer.heading, answer.abstract_text)
"""

from ddg_answers.decoder import decode_answer, parse_answer
from ddg_answers.errors import (
    DdgError,
    JsonSyntaxError,
    SchemaDecodeError,
    TransportError,
    UrlConstructionError,
)
from ddg_answers.models import (
    AnswerResponse,
    AnswerType,
    ExternalResult,
    Icon,
    RelatedTopic,
    TopicGroup,
    TopicResult,
)
from ddg_answers.query import Query

__all__ = [
    "Query",
    "AnswerResponse",
    "AnswerType",
    "ExternalResult",
    "Icon",
    "RelatedTopic",
    "TopicGroup",
    "TopicResult",
    "decode_answer",
    "parse_answer",
    "DdgError",
    "TransportError",
    "UrlConstructionError",
    "JsonSyntaxError",
    "SchemaDecodeError",
]
