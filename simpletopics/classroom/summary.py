"""
Section summaries - Data for the course index page.

Each listed topic gets a title, a link to its first activity, and the CSS
state classes (hidden/current/completed/locked) the host template uses.
"""

import logging
from typing import Optional

from simpletopics.schemas import (
    Course,
    FormatConfig,
    Section,
    SectionSummary,
    Viewer,
    GENERAL_SECTION,
)

from .completion import CompletionIndex
from .progress import SectionProgress


logger = logging.getLogger(__name__)

BASE_CLASSES = ["section", "main", "section-summary", "clearfix"]


def section_title(section: Section, config: FormatConfig) -> str:
    if section.name:
        return section.name
    return f"{config.section_label} {section.number}"


def section_view_url(section: Section) -> Optional[str]:
    """A section opens on its first available activity."""
    for activity in section.activities:
        if activity.available and activity.has_url:
            return activity.url
    return None


def is_section_shown(course: Course, section: Section, config: FormatConfig) -> bool:
    """
    Check whether a section appears on the course index.

    Shown when the viewer can access it, when it is restricted but explains
    why, or when hidden sections are collapsed rather than invisible.
    Greyed display shows everything.
    """
    if section.user_visible:
        return True
    if section.visible and not section.available and section.available_info:
        return True
    if not section.visible and not course.hidden_sections:
        return True
    return config.display_hidden_as_greyed


def summarize_section(
    course: Course,
    section: Section,
    progress: SectionProgress,
    config: FormatConfig,
) -> Optional[SectionSummary]:
    """Build the index entry for a section, None when it has no activities."""
    if not progress.activities:
        return None

    classes = list(BASE_CLASSES)
    current = False
    if not section.visible:
        classes.append("hidden")
    elif course.is_section_current(section):
        classes.append("current")
        current = True

    completed = progress.is_completed()
    classes.append("completed" if completed else "incompleted")

    locked = not section.user_visible and config.display_hidden_as_greyed
    if locked:
        classes.extend(["locked_topic", "dimmed_text"])
        if "hidden" not in classes:
            classes.append("hidden")

    url = None
    if section.user_visible or config.display_hidden_as_greyed:
        url = section_view_url(section)

    return SectionSummary(
        number=section.number,
        title=section_title(section, config),
        url=url,
        css_classes=classes,
        completed=completed,
        locked=locked,
        current=current,
        hidden=not section.visible or locked,
        activity_count=progress.count_activities(),
    )


def build_course_index(
    course: Course,
    completion: CompletionIndex,
    config: FormatConfig,
    viewer: Viewer,
) -> list[SectionSummary]:
    """
    Build the course index: one summary per listed, non-empty topic.

    The general section and orphaned sections past the last section number
    are left out.
    """
    summaries = []
    for section in course.sections:
        if section.number == GENERAL_SECTION or section.number > course.last_section:
            continue
        if not is_section_shown(course, section, config):
            continue

        progress = SectionProgress(section, completion, config, viewer)
        summary = summarize_section(course, section, progress, config)
        if summary is not None:
            summaries.append(summary)

    logger.debug("Course %s index: %d sections", course.id, len(summaries))
    return summaries
