"""Exceptions raised by SimpleTopics."""


class SimpleTopicsError(Exception):
    """Base class for SimpleTopics errors."""


class NavigationContextError(SimpleTopicsError):
    """Navigation links were requested outside an activity page."""


class CourseLoadError(SimpleTopicsError):
    """A course snapshot file could not be parsed or validated."""
