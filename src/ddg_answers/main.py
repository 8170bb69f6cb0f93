#!/usr/bin/env python3
"""
Instant Answer CLI

Look up a DuckDuckGo Instant Answer from the command line.

Usage:
    python -m ddg_answers.main "Rust"
    python -m ddg_answers.main "Rust" --no-html --skip-disambig
    python -m ddg_answers.main "Rust" --json
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from ddg_answers.errors import DdgError
from ddg_answers.models.answer import AnswerResponse, TopicGroup
from ddg_answers.query import Query
from ddg_answers.utils.config import get_ddg_settings, load_config

logger = logging.getLogger(__name__)


def print_answer(answer: AnswerResponse):
    """Print an answer in a readable format."""
    print(f"\n{'=' * 60}")
    print(f"  {answer.heading or '(no heading)'}  [{answer.type.name.lower()}]")
    print(f"{'=' * 60}")

    if answer.redirect:
        print(f"  Redirect: {answer.redirect}")

    if answer.abstract_text:
        print(f"\n  {answer.abstract_text}")
        if answer.abstract_source:
            print(f"  -- {answer.abstract_source} {answer.abstract_url or ''}".rstrip())

    if answer.answer:
        label = f" ({answer.answer_type})" if answer.answer_type else ""
        print(f"\n  Answer{label}: {answer.answer}")

    if answer.definition:
        print(f"\n  Definition: {answer.definition}")
        if answer.definition_source:
            print(f"  -- {answer.definition_source} {answer.definition_url or ''}".rstrip())

    if answer.related_topics:
        print("\n  Related topics:")
        for topic in answer.related_topics:
            if isinstance(topic, TopicGroup):
                print(f"    {topic.name}:")
                for sub in topic.topics:
                    print(f"      - {sub.text}  <{sub.first_url}>")
            else:
                print(f"    - {topic.text}  <{topic.first_url}>")

    if answer.results:
        print("\n  Results:")
        for result in answer.results:
            print(f"    - {result.text}  <{result.first_url}>")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DuckDuckGo Instant Answer lookup")
    parser.add_argument("query", help="Search phrase")
    parser.add_argument(
        "--config", type=str, default=None, help="Path to config file"
    )
    parser.add_argument("--app-name", type=str, default=None, help="Sent as the t= parameter")
    parser.add_argument(
        "--no-html", action="store_true", help="Strip HTML from answer text"
    )
    parser.add_argument(
        "--skip-disambig", action="store_true", help="Skip Disambiguation answers"
    )
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("--json", action="store_true", help="Print the answer as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    config = load_config(args.config)
    settings = get_ddg_settings(config)
    logger.debug(f"Instant Answer settings: {settings}")

    query = Query.from_config(args.query, config)
    if args.app_name:
        query = replace(query, app_name=args.app_name)
    if args.no_html:
        query = query.no_html()
    if args.skip_disambig:
        query = query.skip_disambiguation()

    timeout = args.timeout if args.timeout is not None else settings["timeout"]

    try:
        answer = query.execute(timeout=timeout)
    except DdgError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(answer.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_answer(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
