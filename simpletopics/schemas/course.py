"""
Course structure schemas for SimpleTopics.

Defines Pydantic models for the host-supplied course snapshot:
- Activities with visibility and completion metadata
- Sections (topics) holding ordered activities
- Course with ordered, contiguous sections
- Viewer with capability checks
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# Capability that lets a viewer see hidden activities in greyed-out mode
VIEW_HIDDEN_SECTIONS = "course:viewhiddensections"

# Section 0 is the general section; it is never a navigation target
GENERAL_SECTION = 0


class CompletionState(str, Enum):
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    COMPLETE_PASS = "complete_pass"
    COMPLETE_FAIL = "complete_fail"
    UNKNOWN = "unknown"

    @property
    def is_complete(self) -> bool:
        return self in (CompletionState.COMPLETE, CompletionState.COMPLETE_PASS)


# -----------------------------------------------------------------------------
# Activities and sections
# -----------------------------------------------------------------------------

class Activity(BaseModel):
    """A single learning item (page, quiz, resource) inside a section."""
    id: int
    name: str
    url: Optional[str] = None      # destination; None for labels and the like
    visible: bool = True           # shown to learners at all
    user_visible: bool = True      # visible to the current viewer
    available: bool = True         # access restrictions satisfied
    tracked: bool = False          # completion is monitored
    completion_state: CompletionState = CompletionState.UNKNOWN

    @property
    def has_url(self) -> bool:
        return bool(self.url)

    @property
    def is_navigable(self) -> bool:
        """Usable as a previous/next destination for the current viewer."""
        return self.has_url and self.user_visible


class Section(BaseModel):
    """A topic: an ordered group of activities."""
    number: int = Field(..., ge=0)
    name: Optional[str] = None
    summary: str = ""
    activities: list[Activity] = []
    visible: bool = True
    user_visible: bool = True
    available: bool = True
    available_info: Optional[str] = None  # why the section is restricted

    @property
    def is_general(self) -> bool:
        return self.number == GENERAL_SECTION

    def get_activity(self, activity_id: int) -> Optional[Activity]:
        for activity in self.activities:
            if activity.id == activity_id:
                return activity
        return None


# -----------------------------------------------------------------------------
# Course
# -----------------------------------------------------------------------------

class Course(BaseModel):
    """
    A course laid out as topics.

    Sections are kept sorted by number and must be numbered 0..n-1 without
    gaps, so adjacency is plain number +/- 1.
    """
    id: int
    short_name: str
    full_name: str = ""
    sections: list[Section] = []
    hidden_sections: bool = False   # True: hidden sections are invisible, False: collapsed
    marker: int = 0                 # highlighted section, 0 for none
    last_section_number: Optional[int] = Field(None, ge=0)

    @field_validator("sections")
    @classmethod
    def sections_contiguous(cls, v: list[Section]) -> list[Section]:
        ordered = sorted(v, key=lambda s: s.number)
        numbers = [s.number for s in ordered]
        if numbers != list(range(len(ordered))):
            raise ValueError(
                f"Section numbers must be unique and contiguous from 0, got {numbers}"
            )
        return ordered

    @model_validator(mode="after")
    def activity_ids_unique(self):
        seen: set[int] = set()
        for section in self.sections:
            for activity in section.activities:
                if activity.id in seen:
                    raise ValueError(f"Duplicate activity id: {activity.id}")
                seen.add(activity.id)
        return self

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def last_section(self) -> int:
        """Highest section number that is listed on the course page."""
        if self.last_section_number is not None:
            return self.last_section_number
        return max(self.section_count - 1, 0)

    def get_section(self, number: int) -> Optional[Section]:
        if 0 <= number < self.section_count:
            return self.sections[number]
        return None

    def find_activity(self, activity_id: int) -> Optional[tuple[Section, Activity]]:
        """Locate an activity and the section that owns it."""
        for section in self.sections:
            activity = section.get_activity(activity_id)
            if activity is not None:
                return section, activity
        return None

    def is_section_current(self, section: Section) -> bool:
        return self.marker > 0 and section.number == self.marker


# -----------------------------------------------------------------------------
# Viewer
# -----------------------------------------------------------------------------

class Viewer(BaseModel):
    """The user the page is rendered for."""
    id: int = 0
    capabilities: frozenset[str] = frozenset()

    def has_capability(self, name: str) -> bool:
        return name in self.capabilities
