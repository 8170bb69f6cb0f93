"""Shared Instant Answer payload factories."""

from tests.fixtures.data import (
    DISAMBIGUATION_RESPONSE,
    make_group,
    make_icon,
    make_response,
    make_topic,
)

__all__ = [
    "DISAMBIGUATION_RESPONSE",
    "make_group",
    "make_icon",
    "make_response",
    "make_topic",
]
