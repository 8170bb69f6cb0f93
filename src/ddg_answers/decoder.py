"""
Instant Answer Decoder

Turns the generic JSON value returned by the API into an ``AnswerResponse``.

The service schema is loose:
- ``Height``/``Width`` are integers, or ``""`` when unknown
- ``RelatedTopics`` mixes single links and named groups under one key
- most keys are optional and depend on the answer type

Decoding is a single strict pass. The first violation raises
``SchemaDecodeError`` carrying the path of the offending value; no partial
answer is ever returned.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from ddg_answers.errors import JsonSyntaxError, SchemaDecodeError
from ddg_answers.models.answer import (
    AnswerResponse,
    AnswerType,
    ExternalResult,
    Icon,
    RelatedTopic,
    TopicGroup,
    TopicResult,
)

logger = logging.getLogger(__name__)

_MISSING = object()

# Exhaustive code table; anything else is UNSPECIFIED so new codes never break
# older clients.
TYPE_CODES: Dict[str, AnswerType] = {
    "A": AnswerType.ARTICLE,
    "D": AnswerType.DISAMBIGUATION,
    "C": AnswerType.CATEGORY,
    "N": AnswerType.NAME,
    "E": AnswerType.EXCLUSIVE,
}


def _join(path: str, key: Union[str, int]) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    if path == "$":
        return key
    return f"{path}.{key}"


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def decode_text(obj: Dict[str, Any], key: str, path: str = "$") -> Optional[str]:
    """Read an optional text field. Absent and null both mean None."""
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaDecodeError(
            f"expected string or null, got {_type_name(value)}", _join(path, key)
        )
    return value


def _require_text(obj: Dict[str, Any], key: str, path: str) -> str:
    value = decode_text(obj, key, path)
    if value is None:
        raise SchemaDecodeError("required string is missing", _join(path, key))
    return value


def decode_dimension(value: Any, path: str) -> int:
    """Decode a numeric-or-empty-string field.

    ``50`` -> 50, ``""`` -> 0. Any other string, a negative or non-integer
    number, null, or any other JSON type is an error.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise SchemaDecodeError(f"expected unsigned integer, got {value}", path)
        return value
    if isinstance(value, str):
        if value == "":
            return 0
        raise SchemaDecodeError(f"expected integer or empty string, got {value!r}", path)
    raise SchemaDecodeError(
        f"expected integer or empty string, got {_type_name(value)}", path
    )


def _dimension_field(obj: Dict[str, Any], key: str, path: str) -> int:
    # An absent key takes the default; an explicit null does not.
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        return 0
    return decode_dimension(value, _join(path, key))


def decode_icon(value: Any, path: str) -> Optional[Icon]:
    """Decode an ``{URL, Height, Width}`` object. Null means no icon."""
    if value is None:
        return None
    if not isinstance(value, dict):
        raise SchemaDecodeError(f"expected object, got {_type_name(value)}", path)
    return Icon(
        url=decode_text(value, "URL", path) or "",
        height=_dimension_field(value, "Height", path),
        width=_dimension_field(value, "Width", path),
    )


def decode_type(value: Any, path: str = "Type") -> AnswerType:
    """Map the one-letter type code; empty or unknown codes are UNSPECIFIED."""
    if value is None:
        return AnswerType.UNSPECIFIED
    if not isinstance(value, str):
        raise SchemaDecodeError(f"expected string, got {_type_name(value)}", path)
    return TYPE_CODES.get(value, AnswerType.UNSPECIFIED)


def _decode_link(value: Any, path: str) -> Tuple[str, str, Optional[Icon], Optional[str]]:
    if not isinstance(value, dict):
        raise SchemaDecodeError(f"expected object, got {_type_name(value)}", path)
    if "Text" not in value or "FirstURL" not in value:
        raise SchemaDecodeError("expected a link with Text and FirstURL", path)
    return (
        _require_text(value, "Text", path),
        _require_text(value, "FirstURL", path),
        decode_icon(value.get("Icon"), _join(path, "Icon")),
        decode_text(value, "Result", path),
    )


def decode_topic_result(value: Any, path: str) -> TopicResult:
    text, first_url, icon, result = _decode_link(value, path)
    return TopicResult(text=text, first_url=first_url, icon=icon, result=result)


def decode_external_result(value: Any, path: str) -> ExternalResult:
    text, first_url, icon, result = _decode_link(value, path)
    return ExternalResult(text=text, first_url=first_url, icon=icon, result=result)


def _decode_array(obj: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaDecodeError(
            f"expected array, got {_type_name(value)}", _join(path, key)
        )
    return value


def decode_related_topic(value: Any, path: str) -> RelatedTopic:
    """Pick the topic shape from the keys present, then decode it strictly.

    ``Name`` + ``Topics`` is a group; ``Text`` + ``FirstURL`` is a single link.
    Groups only hold single links.
    """
    if not isinstance(value, dict):
        raise SchemaDecodeError(f"expected object, got {_type_name(value)}", path)

    if "Name" in value and "Topics" in value:
        topics = tuple(
            decode_topic_result(item, _join(_join(path, "Topics"), i))
            for i, item in enumerate(_decode_array(value, "Topics", path))
        )
        return TopicGroup(name=_require_text(value, "Name", path), topics=topics)

    if "Text" in value and "FirstURL" in value:
        return decode_topic_result(value, path)

    raise SchemaDecodeError(
        "related topic matches neither {Text, FirstURL} nor {Name, Topics}", path
    )


def decode_image(data: Dict[str, Any]) -> Optional[Icon]:
    """Decode the top-level image.

    The live API sends ``Image`` as a URL string with ``ImageHeight`` and
    ``ImageWidth`` beside it; an ``{URL, Height, Width}`` object is also
    accepted.
    """
    value = data.get("Image")
    if value is None or value == "":
        return None
    if isinstance(value, dict):
        return decode_icon(value, "Image")
    if isinstance(value, str):
        return Icon(
            url=value,
            height=_dimension_field(data, "ImageHeight", "$"),
            width=_dimension_field(data, "ImageWidth", "$"),
        )
    raise SchemaDecodeError(
        f"expected string, object or null, got {_type_name(value)}", "Image"
    )


def decode_answer(data: Any) -> AnswerResponse:
    """Decode a parsed JSON document into an ``AnswerResponse``.

    Raises:
        SchemaDecodeError: the document does not match the schema.
    """
    if not isinstance(data, dict):
        raise SchemaDecodeError(f"expected object at root, got {_type_name(data)}")

    related_topics = tuple(
        decode_related_topic(item, f"RelatedTopics[{i}]")
        for i, item in enumerate(_decode_array(data, "RelatedTopics", "$"))
    )
    results = tuple(
        decode_external_result(item, f"Results[{i}]")
        for i, item in enumerate(_decode_array(data, "Results", "$"))
    )

    response = AnswerResponse(
        heading=decode_text(data, "Heading") or "",
        type=decode_type(data.get("Type")),
        abstract=decode_text(data, "Abstract"),
        abstract_text=decode_text(data, "AbstractText"),
        abstract_source=decode_text(data, "AbstractSource"),
        abstract_url=decode_text(data, "AbstractURL"),
        image=decode_image(data),
        answer=decode_text(data, "Answer"),
        answer_type=decode_text(data, "AnswerType"),
        definition=decode_text(data, "Definition"),
        definition_source=decode_text(data, "DefinitionSource"),
        definition_url=decode_text(data, "DefinitionURL"),
        related_topics=related_topics,
        results=results,
        redirect=decode_text(data, "Redirect"),
        entity=decode_text(data, "Entity"),
    )
    logger.debug(
        f"Decoded answer '{response.heading}' ({response.type.name}): "
        f"{len(related_topics)} topics, {len(results)} results"
    )
    return response


def parse_answer(raw: Union[bytes, str]) -> AnswerResponse:
    """Parse a raw response body and decode it.

    Raises:
        JsonSyntaxError: the body is not valid JSON.
        SchemaDecodeError: the JSON does not match the schema.
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise JsonSyntaxError(f"Invalid JSON in response body: {e}") from e
    return decode_answer(data)
