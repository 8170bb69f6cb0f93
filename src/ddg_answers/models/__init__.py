"""Typed Instant Answer models."""

from .answer import (
    AnswerResponse,
    AnswerType,
    ExternalResult,
    Icon,
    RelatedTopic,
    TopicGroup,
    TopicResult,
)

__all__ = [
    "AnswerResponse",
    "AnswerType",
    "ExternalResult",
    "Icon",
    "RelatedTopic",
    "TopicGroup",
    "TopicResult",
]
