"""
Section progress - Eligible activities and completion status of a topic.

Provides:
- Activity eligibility filtering (url + visibility rules)
- First/last eligible activity lookup
- Section completion status
- SectionProgress: per-request memoized view of one section
"""

import logging
from typing import Optional

from simpletopics.schemas import (
    Activity,
    FormatConfig,
    ProgressSnapshot,
    Section,
    SectionStatus,
    Viewer,
    VIEW_HIDDEN_SECTIONS,
)

from .completion import CompletionIndex


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Pure functions
# -----------------------------------------------------------------------------

def is_activity_eligible(activity: Activity, config: FormatConfig, viewer: Viewer) -> bool:
    """
    Check whether an activity counts for progress and section navigation.

    It needs a url, and must either be visible to the viewer or be shown
    greyed out to a viewer allowed to see hidden sections.
    """
    if not activity.has_url:
        return False
    if activity.user_visible:
        return True
    return config.display_hidden_as_greyed and viewer.has_capability(VIEW_HIDDEN_SECTIONS)


def eligible_activities(section: Section, config: FormatConfig, viewer: Viewer) -> list[Activity]:
    """Eligible activities of a section in host order."""
    return [a for a in section.activities if is_activity_eligible(a, config, viewer)]


def first_activity(section: Section, config: FormatConfig, viewer: Viewer) -> Optional[Activity]:
    activities = eligible_activities(section, config, viewer)
    return activities[0] if activities else None


def last_activity(section: Section, config: FormatConfig, viewer: Viewer) -> Optional[Activity]:
    activities = eligible_activities(section, config, viewer)
    return activities[-1] if activities else None


def completion_status(
    section: Section,
    completion: CompletionIndex,
    config: FormatConfig,
    viewer: Viewer,
) -> SectionStatus:
    """
    Derive the completion status of a section.

    Tracked activities are visited in order. A complete one marks the
    section complete; the first incomplete one marks it incomplete and ends
    the scan. Untracked activities are skipped, so a section with no
    tracked activities stays incomplete.
    """
    return _status_of(eligible_activities(section, config, viewer), completion)


def _status_of(activities: list[Activity], completion: CompletionIndex) -> SectionStatus:
    status = SectionStatus.INCOMPLETE
    for activity in activities:
        if activity.id not in completion:
            continue
        if completion.is_complete(activity.id):
            status = SectionStatus.COMPLETE
        else:
            status = SectionStatus.INCOMPLETE
            break
    return status


# -----------------------------------------------------------------------------
# Memoized section view
# -----------------------------------------------------------------------------

class SectionProgress:
    """
    Progress of one section for the duration of one render.

    Eligible activities and status are computed on first access and then
    reused. Create a new instance for each request.
    """

    def __init__(
        self,
        section: Section,
        completion: CompletionIndex,
        config: FormatConfig,
        viewer: Viewer,
    ):
        self.section = section
        self.completion = completion
        self.config = config
        self.viewer = viewer
        self._activities: Optional[list[Activity]] = None
        self._status: Optional[SectionStatus] = None

    @property
    def section_number(self) -> int:
        return self.section.number

    @property
    def activities(self) -> list[Activity]:
        if self._activities is None:
            self._activities = eligible_activities(self.section, self.config, self.viewer)
        return self._activities

    @property
    def first_activity(self) -> Optional[Activity]:
        return self.activities[0] if self.activities else None

    @property
    def last_activity(self) -> Optional[Activity]:
        return self.activities[-1] if self.activities else None

    def count_activities(self) -> int:
        return len(self.activities)

    @property
    def completion_status(self) -> SectionStatus:
        if self._status is None:
            self._status = _status_of(self.activities, self.completion)
            logger.debug(
                "Section %d status: %s", self.section_number, self._status.name
            )
        return self._status

    def is_completed(self) -> bool:
        return self.completion_status == SectionStatus.COMPLETE

    def is_activity_completed(self, activity_id: int) -> bool:
        """Check completion of an eligible activity; False for any other."""
        if not any(a.id == activity_id for a in self.activities):
            return False
        return self.completion.is_complete(activity_id)

    def snapshot(self) -> ProgressSnapshot:
        return ProgressSnapshot(
            section_number=self.section_number,
            activities=list(self.activities),
            status=self.completion_status,
        )
