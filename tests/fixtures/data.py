"""Reusable Instant Answer payload factories.

Factories return plain dicts in the service's wire format (PascalCase keys),
ready to hand to ``decode_answer``:
    decode_answer(make_response(Type="D"))
    make_topic(Text="Custom")
"""

from typing import Any


def make_icon(**overrides: Any) -> dict:
    """Icon as sent by the API; unknown dimensions are empty strings."""
    defaults = {"URL": "/i/example.png", "Height": "", "Width": ""}
    defaults.update(overrides)
    return defaults


def make_topic(**overrides: Any) -> dict:
    """Single related link (also the shape of a ``Results`` entry)."""
    defaults = {
        "Text": "Example topic",
        "FirstURL": "https://duckduckgo.com/Example",
        "Icon": make_icon(),
        "Result": "<a href=\"https://duckduckgo.com/Example\">Example topic</a>",
    }
    defaults.update(overrides)
    return defaults


def make_group(**overrides: Any) -> dict:
    """Named cluster of related links."""
    defaults = {
        "Name": "Example group",
        "Topics": [make_topic(Text="Grouped topic")],
    }
    defaults.update(overrides)
    return defaults


def make_response(**overrides: Any) -> dict:
    """Article answer with one topic, one group and one external result."""
    defaults = {
        "Abstract": "<b>Example</b> abstract",
        "AbstractText": "Example abstract",
        "AbstractSource": "Wikipedia",
        "AbstractURL": "https://en.wikipedia.org/wiki/Example",
        "Image": "/i/example.png",
        "ImageHeight": 270,
        "ImageWidth": "",
        "Heading": "Example",
        "Answer": "",
        "AnswerType": "",
        "Definition": "",
        "DefinitionSource": "",
        "DefinitionURL": "",
        "Entity": "",
        "Redirect": "",
        "RelatedTopics": [make_topic(), make_group()],
        "Results": [make_topic(Text="Official site", FirstURL="https://example.com/")],
        "Type": "A",
        "meta": {"id": "wikipedia_fathead"},
    }
    defaults.update(overrides)
    return defaults


# Disambiguation answer made only of related topics.
DISAMBIGUATION_RESPONSE = {
    "Heading": "Mercury",
    "AbstractText": "",
    "Image": "",
    "RelatedTopics": [
        {"Text": "Mercury (planet)", "FirstURL": "https://duckduckgo.com/Mercury_(planet)"},
        {"Text": "Mercury (element)", "FirstURL": "https://duckduckgo.com/Mercury_(element)"},
        {
            "Name": "Music",
            "Topics": [
                {"Text": "Mercury Records", "FirstURL": "https://duckduckgo.com/Mercury_Records"},
            ],
        },
    ],
    "Results": [],
    "Type": "D",
}
