"""Typed model of a DuckDuckGo Instant Answer.

All types are frozen and built once by ``ddg_answers.decoder``. Sequences are
tuples, so equal documents decode to equal values.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Tuple, Union


class AnswerType(Enum):
    """The service's one-letter result type."""
    ARTICLE = "A"
    DISAMBIGUATION = "D"
    CATEGORY = "C"
    NAME = "N"
    EXCLUSIVE = "E"
    UNSPECIFIED = ""


@dataclass(frozen=True)
class Icon:
    """Image attached to an answer or topic. Unknown dimensions are 0."""
    url: str = ""
    height: int = 0
    width: int = 0


@dataclass(frozen=True)
class TopicResult:
    """A single related link."""
    text: str
    first_url: str
    icon: Optional[Icon] = None
    result: Optional[str] = None  # HTML anchor, as sent


@dataclass(frozen=True)
class TopicGroup:
    """A named cluster of related links (one level deep)."""
    name: str
    topics: Tuple[TopicResult, ...] = ()


RelatedTopic = Union[TopicResult, TopicGroup]


@dataclass(frozen=True)
class ExternalResult:
    """A ranked external link from the ``Results`` key."""
    text: str
    first_url: str
    icon: Optional[Icon] = None
    result: Optional[str] = None


@dataclass(frozen=True)
class AnswerResponse:
    """One decoded Instant Answer."""
    heading: str = ""
    type: AnswerType = AnswerType.UNSPECIFIED
    abstract: Optional[str] = None
    abstract_text: Optional[str] = None
    abstract_source: Optional[str] = None
    abstract_url: Optional[str] = None
    image: Optional[Icon] = None
    answer: Optional[str] = None
    answer_type: Optional[str] = None
    definition: Optional[str] = None
    definition_source: Optional[str] = None
    definition_url: Optional[str] = None
    related_topics: Tuple[RelatedTopic, ...] = ()
    results: Tuple[ExternalResult, ...] = ()
    redirect: Optional[str] = None
    entity: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        data = asdict(self)
        data["type"] = self.type.name.lower()
        return data
