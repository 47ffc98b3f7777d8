"""
Navigator - Previous/next links between activities.

Provides:
- In-section neighbour lookup over the raw sibling order
- Fallback to the last/first activity of adjacent sections
- Course-root link when there is nothing before the current activity
"""

import logging
from typing import Optional

from simpletopics.errors import NavigationContextError
from simpletopics.schemas import (
    Activity,
    Course,
    FormatConfig,
    GENERAL_SECTION,
    NavigationResult,
    NavigationTarget,
    Section,
    TargetKind,
    Viewer,
)

from .completion import CompletionIndex
from .progress import SectionProgress


logger = logging.getLogger(__name__)


class Navigator:
    """
    Resolve previous/next destinations for an activity page.

    Holds one SectionProgress per section for the lifetime of the request.
    """

    def __init__(
        self,
        course: Course,
        completion: CompletionIndex,
        config: FormatConfig,
        viewer: Viewer,
    ):
        """
        Initialize navigator.

        Args:
            course: Course structure for this request
            completion: Completion index of the course
            config: Format configuration
            viewer: User the links are rendered for
        """
        self.course = course
        self.completion = completion
        self.config = config
        self.viewer = viewer
        self._progress: dict[int, SectionProgress] = {}

    def get_progress(self, section_number: int) -> Optional[SectionProgress]:
        """Get the (cached) progress of a section, None if it doesn't exist."""
        if section_number not in self._progress:
            section = self.course.get_section(section_number)
            if section is None:
                return None
            self._progress[section_number] = SectionProgress(
                section, self.completion, self.config, self.viewer
            )
        return self._progress[section_number]

    # -------------------------------------------------------------------------
    # Fallback targets
    # -------------------------------------------------------------------------

    def course_target(self) -> NavigationTarget:
        return NavigationTarget(
            kind=TargetKind.COURSE,
            url=self.config.course_url(self.course),
            label=self.course.short_name,
        )

    def dashboard_target(self, label: str = "Dashboard") -> NavigationTarget:
        return NavigationTarget(
            kind=TargetKind.DASHBOARD,
            url=self.config.dashboard_url,
            label=label,
        )

    # -------------------------------------------------------------------------
    # Scans
    # -------------------------------------------------------------------------

    @staticmethod
    def find_siblings(section: Section, activity_id: int) -> tuple[Optional[Activity], Optional[Activity], bool]:
        """
        Find the nearest navigable siblings around an activity.

        Returns:
            Tuple of (previous, next, found) where found tells whether the
            activity is in the section at all
        """
        previous = None
        found = False
        for activity in section.activities:
            if activity.id == activity_id:
                found = True
                continue
            if not activity.is_navigable:
                continue
            if not found:
                previous = activity
            else:
                return previous, activity, True
        return previous, None, found

    def previous_section_last_activity(self, section_number: int) -> Optional[Activity]:
        """Last eligible activity of the nearest earlier section that has one."""
        number = section_number - 1
        while number > GENERAL_SECTION:
            progress = self.get_progress(number)
            last = progress.last_activity if progress else None
            if last is not None and last.has_url:
                return last
            number -= 1
        return None

    def next_section_first_activity(self, section_number: int) -> Optional[Activity]:
        """First eligible activity of the nearest later section that has one."""
        number = section_number + 1
        while number < self.course.section_count:
            progress = self.get_progress(number)
            first = progress.first_activity if progress else None
            if first is not None and first.has_url:
                return first
            number += 1
        return None

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(self, activity_id: Optional[int], section_number: Optional[int] = None) -> NavigationResult:
        """
        Resolve previous/next links for an activity.

        Args:
            activity_id: Activity of the current page
            section_number: Section the activity belongs to; looked up if omitted

        Returns:
            NavigationResult; links that don't exist are None

        Raises:
            NavigationContextError: If there is no current activity
        """
        if activity_id is None:
            raise NavigationContextError("Navigation links need an activity page")

        if section_number is None:
            located = self.course.find_activity(activity_id)
            if located is None:
                logger.warning(
                    "Activity %s not found in course %s", activity_id, self.course.id
                )
                return NavigationResult()
            section = located[0]
        else:
            section = self.course.get_section(section_number)
            if section is None:
                logger.warning(
                    "Section %s not found in course %s", section_number, self.course.id
                )
                return NavigationResult()

        previous, next_, found = self.find_siblings(section, activity_id)
        if not found:
            logger.warning(
                "Activity %s not found in section %d", activity_id, section.number
            )
            return NavigationResult()

        if previous is None:
            previous = self.previous_section_last_activity(section.number)
        if next_ is None:
            next_ = self.next_section_first_activity(section.number)

        # Nothing before: go back to the course page. Nothing after: no link.
        if previous is not None:
            previous_target = NavigationTarget.for_activity(previous)
        else:
            previous_target = self.course_target()
        next_target = NavigationTarget.for_activity(next_) if next_ is not None else None

        return NavigationResult(previous=previous_target, next=next_target)


def resolve_navigation(
    course: Course,
    activity_id: Optional[int],
    config: Optional[FormatConfig] = None,
    viewer: Optional[Viewer] = None,
    completion: Optional[CompletionIndex] = None,
) -> NavigationResult:
    """Resolve previous/next links with a throwaway Navigator."""
    navigator = Navigator(
        course,
        completion or CompletionIndex.from_course(course),
        config or FormatConfig(),
        viewer or Viewer(),
    )
    return navigator.resolve(activity_id)
