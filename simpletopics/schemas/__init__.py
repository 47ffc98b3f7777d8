"""
SimpleTopics Schemas - Pydantic models for the topics course format.

This module exports all schema classes for:
- Course: activities, sections, course structure, viewer
- Progress: section status, navigation targets, section summaries
- Config: format configuration
"""

# Course schemas
from .course import (
    CompletionState,
    Activity,
    Section,
    Course,
    Viewer,
    VIEW_HIDDEN_SECTIONS,
    GENERAL_SECTION,
)

# Progress schemas
from .progress import (
    SectionStatus,
    ProgressSnapshot,
    TargetKind,
    NavigationTarget,
    NavigationResult,
    SectionSummary,
)

# Config schema
from .config import FormatConfig

__all__ = [
    # Course
    'CompletionState',
    'Activity',
    'Section',
    'Course',
    'Viewer',
    'VIEW_HIDDEN_SECTIONS',
    'GENERAL_SECTION',
    # Progress
    'SectionStatus',
    'ProgressSnapshot',
    'TargetKind',
    'NavigationTarget',
    'NavigationResult',
    'SectionSummary',
    # Config
    'FormatConfig',
]
