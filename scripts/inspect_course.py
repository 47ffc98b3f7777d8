#!/usr/bin/env python3
"""
inspect_course.py - Print the course index and activity navigation links.

Loads a course snapshot and shows what a viewer would get on the course
page, and optionally the previous/next links of one activity page.

Usage:
  python scripts/inspect_course.py --course data/sample_course.yaml
  python scripts/inspect_course.py --course data/sample_course.yaml --activity 20
  python scripts/inspect_course.py --course data/sample_course.yaml --greyed --capability course:viewhiddensections
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from simpletopics.classroom import (
    CompletionIndex,
    CourseLoader,
    Navigator,
    build_course_index,
)
from simpletopics.schemas import Viewer
from simpletopics.utils import load_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Inspect the topics course index and navigation links"
    )
    parser.add_argument(
        "--course",
        type=Path,
        default=Path(os.environ.get("SIMPLETOPICS_COURSE", "data/sample_course.yaml")),
        help="Course snapshot (.json/.yaml)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Format config YAML (default: $SIMPLETOPICS_CONFIG or config/format.yaml)"
    )
    parser.add_argument(
        "--activity",
        type=int,
        default=None,
        help="Activity id to resolve previous/next links for"
    )
    parser.add_argument(
        "--greyed",
        action="store_true",
        help="Force greyed-out display of inaccessible topics"
    )
    parser.add_argument(
        "--capability",
        action="append",
        default=[],
        help="Capability held by the viewer (repeatable)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of log lines"
    )

    args = parser.parse_args()

    config = load_config(args.config)
    if args.greyed:
        config = config.model_copy(update={"display_hidden_as_greyed": True})

    course = CourseLoader(args.course).get_course()
    viewer = Viewer(capabilities=frozenset(args.capability))
    completion = CompletionIndex.from_course(course)

    index = build_course_index(course, completion, config, viewer)

    result = None
    if args.activity is not None:
        navigator = Navigator(course, completion, config, viewer)
        result = navigator.resolve(args.activity)

    if args.json:
        output = {"sections": [s.model_dump() for s in index]}
        if result is not None:
            output["navigation"] = result.model_dump(mode="json")
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return

    logger.info(f"Course: {course.full_name or course.short_name} ({len(index)} topics listed)")
    for summary in index:
        state = "done" if summary.completed else "todo"
        lock = " [locked]" if summary.locked else ""
        logger.info(f"  {summary.number:>2}. {summary.title} [{state}]{lock} -> {summary.url or '-'}")

    if result is not None:
        logger.info(f"Activity {args.activity}:")
        if result.previous:
            logger.info(f"  previous: {result.previous.label} ({result.previous.url})")
        if result.next:
            logger.info(f"  next:     {result.next.label} ({result.next.url})")
        if not result.has_links:
            logger.warning("  no navigation links")


if __name__ == "__main__":
    main()
