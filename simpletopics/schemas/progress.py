"""
Progress and navigation schemas for SimpleTopics.

Derived, per-request values:
- Section progress snapshot and status
- Previous/next navigation targets
- Section summaries for the course index
"""

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, computed_field

from .course import Activity


class SectionStatus(IntEnum):
    INCOMPLETE = 0
    COMPLETE = 1


class ProgressSnapshot(BaseModel):
    section_number: int
    activities: list[Activity]  # eligible activities, host order
    status: SectionStatus = SectionStatus.INCOMPLETE

    @computed_field
    @property
    def activity_count(self) -> int:
        return len(self.activities)

    @property
    def is_completed(self) -> bool:
        return self.status == SectionStatus.COMPLETE


class TargetKind(str, Enum):
    ACTIVITY = "activity"
    COURSE = "course"
    DASHBOARD = "dashboard"


class NavigationTarget(BaseModel):
    """Destination of a previous/next link."""
    kind: TargetKind
    url: str
    label: str
    activity_id: Optional[int] = None

    @classmethod
    def for_activity(cls, activity: Activity) -> "NavigationTarget":
        return cls(
            kind=TargetKind.ACTIVITY,
            url=activity.url,
            label=activity.name,
            activity_id=activity.id,
        )


class NavigationResult(BaseModel):
    previous: Optional[NavigationTarget] = None
    next: Optional[NavigationTarget] = None

    @property
    def has_links(self) -> bool:
        return self.previous is not None or self.next is not None


class SectionSummary(BaseModel):
    """One entry of the course index page."""
    number: int
    title: str
    url: Optional[str] = None   # None when the viewer gets no link
    css_classes: list[str]
    completed: bool
    locked: bool = False
    current: bool = False
    hidden: bool = False
    activity_count: int = 0

    @property
    def css_class(self) -> str:
        return " ".join(self.css_classes)
