"""
Format configuration schema.

Replaces the host's global plugin settings with an explicit value that is
passed into every progress and navigation call.
"""

from pydantic import BaseModel

from .course import Course


class FormatConfig(BaseModel):
    # Show inaccessible topics greyed out instead of hiding them
    display_hidden_as_greyed: bool = False
    course_url_template: str = "/course/view.php?id={course_id}"
    dashboard_url: str = "/my/"
    section_label: str = "Topic"

    def course_url(self, course: Course) -> str:
        return self.course_url_template.format(course_id=course.id)
