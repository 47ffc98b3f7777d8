"""
SimpleTopics - Completion-aware "topics" course layout.

Computes section progress, course index summaries and previous/next
activity links from course data supplied by the host LMS.
"""

__version__ = "0.1.0"
