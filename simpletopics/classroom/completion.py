"""
CompletionIndex - Lazily loaded, read-only view of activity completion.

The host's completion subsystem is wrapped as a fetch callable returning
{activity_id: CompletionState} for tracked activities only. The fetch runs
at most once, on the first lookup.
"""

import logging
from typing import Callable, Optional

from simpletopics.schemas import CompletionState, Course


logger = logging.getLogger(__name__)

CompletionFetcher = Callable[[], dict[int, CompletionState]]


class CompletionIndex:
    """
    Completion states for one course.

    An activity absent from the index is untracked; that is never an error.
    """

    def __init__(self, course_id: int, fetch: CompletionFetcher):
        """
        Initialize index.

        Args:
            course_id: Course the index is scoped to
            fetch: Callable returning completion states of tracked activities
        """
        self.course_id = course_id
        self._fetch = fetch
        self._states: Optional[dict[int, CompletionState]] = None

    @classmethod
    def from_course(cls, course: Course) -> "CompletionIndex":
        """Build an index from the completion fields carried on the activities."""
        def fetch() -> dict[int, CompletionState]:
            return {
                activity.id: activity.completion_state
                for section in course.sections
                for activity in section.activities
                if activity.tracked
            }
        return cls(course.id, fetch)

    @classmethod
    def from_mapping(cls, course_id: int, states: dict[int, CompletionState]) -> "CompletionIndex":
        return cls(course_id, lambda: dict(states))

    def _get_states(self) -> dict[int, CompletionState]:
        if self._states is None:
            self._states = dict(self._fetch())
            logger.debug(
                "Loaded completion for course %s: %d tracked activities",
                self.course_id, len(self._states),
            )
        return self._states

    @property
    def is_loaded(self) -> bool:
        return self._states is not None

    def is_tracked(self, activity_id: int) -> bool:
        return activity_id in self._get_states()

    def get_state(self, activity_id: int) -> Optional[CompletionState]:
        """Completion state of a tracked activity, None if untracked."""
        return self._get_states().get(activity_id)

    def is_complete(self, activity_id: int) -> bool:
        state = self.get_state(activity_id)
        return state is not None and state.is_complete

    def tracked_ids(self) -> set[int]:
        return set(self._get_states())

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self._get_states()

    def __len__(self) -> int:
        return len(self._get_states())
