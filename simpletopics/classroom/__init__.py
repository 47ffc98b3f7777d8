"""
SimpleTopics Classroom - Runtime components for the topics course format.

This module provides:
- CourseLoader: Load a course snapshot
- CompletionIndex: Lazily loaded completion states
- SectionProgress: Eligible activities and section status
- Navigator: Previous/next activity links
- Course index summaries
"""

from .loader import CourseLoader

from .completion import CompletionIndex

from .progress import (
    SectionProgress,
    is_activity_eligible,
    eligible_activities,
    first_activity,
    last_activity,
    completion_status,
)

from .navigator import (
    Navigator,
    resolve_navigation,
)

from .summary import (
    build_course_index,
    is_section_shown,
    section_title,
    section_view_url,
    summarize_section,
)

__all__ = [
    # Loader
    "CourseLoader",
    # Completion
    "CompletionIndex",
    # Progress
    "SectionProgress",
    "is_activity_eligible",
    "eligible_activities",
    "first_activity",
    "last_activity",
    "completion_status",
    # Navigator
    "Navigator",
    "resolve_navigation",
    # Summary
    "build_course_index",
    "is_section_shown",
    "section_title",
    "section_view_url",
    "summarize_section",
]
