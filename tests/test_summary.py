"""Tests for course index section summaries."""

from builders import act

from simpletopics.classroom import (
    CompletionIndex,
    SectionProgress,
    build_course_index,
    is_section_shown,
    section_title,
    section_view_url,
    summarize_section,
)
from simpletopics.schemas import (
    CompletionState,
    Course,
    FormatConfig,
    Section,
    Viewer,
)


def make_course(*sections: Section, **kwargs) -> Course:
    return Course(id=7, short_name="C7", sections=[Section(number=0), *sections], **kwargs)


class TestSectionTitle:
    """Test section titles."""

    def test_named(self, config):
        assert section_title(Section(number=3, name="Loops"), config) == "Loops"

    def test_default_label(self, config):
        assert section_title(Section(number=3), config) == "Topic 3"
        assert section_title(Section(number=3), FormatConfig(section_label="Week")) == "Week 3"


class TestSectionViewUrl:
    """Test section view URLs."""

    def test_first_available_activity(self):
        section = Section(number=1, activities=[
            act(1, url=None), act(2, available=False), act(3), act(4),
        ])
        assert section_view_url(section) == "/mod/page/view.php?id=3"

    def test_none_when_nothing_available(self):
        assert section_view_url(Section(number=1, activities=[act(1, available=False)])) is None


class TestIsSectionShown:
    """Test which sections are listed."""

    def test_user_visible(self, config):
        course = make_course(Section(number=1))
        assert is_section_shown(course, course.sections[1], config)

    def test_restricted_with_info(self, config):
        section = Section(number=1, user_visible=False, available=False, available_info="Finish topic 1")
        assert is_section_shown(make_course(section), section, config)

    def test_restricted_without_info(self, config):
        section = Section(number=1, user_visible=False, available=False)
        assert not is_section_shown(make_course(section), section, config)

    def test_hidden_collapsed_vs_invisible(self, config):
        section = Section(number=1, visible=False, user_visible=False)
        assert is_section_shown(make_course(section, hidden_sections=False), section, config)
        assert not is_section_shown(make_course(section, hidden_sections=True), section, config)

    def test_greyed_shows_everything(self, greyed_config):
        section = Section(number=1, visible=False, user_visible=False)
        assert is_section_shown(make_course(section, hidden_sections=True), section, greyed_config)


class TestSummarizeSection:
    """Test single section summaries."""

    def _summary(self, course, number, completion=None, config=None, viewer=None):
        config = config or FormatConfig()
        completion = completion or CompletionIndex.from_mapping(7, {})
        section = course.get_section(number)
        progress = SectionProgress(section, completion, config, viewer or Viewer())
        return summarize_section(course, section, progress, config)

    def test_empty_section_has_no_summary(self):
        course = make_course(Section(number=1, activities=[act(1, url=None)]))
        assert self._summary(course, 1) is None

    def test_incomplete_section(self):
        course = make_course(Section(number=1, name="Intro", activities=[act(1), act(2)]))
        summary = self._summary(course, 1)
        assert summary.title == "Intro"
        assert summary.url == "/mod/page/view.php?id=1"
        assert summary.css_classes == ["section", "main", "section-summary", "clearfix", "incompleted"]
        assert not summary.completed
        assert summary.activity_count == 2

    def test_completed_current_section(self):
        course = make_course(Section(number=1, activities=[act(1)]), marker=1)
        completion = CompletionIndex.from_mapping(7, {1: CompletionState.COMPLETE})
        summary = self._summary(course, 1, completion=completion)
        assert summary.completed
        assert summary.current
        assert "current" in summary.css_classes
        assert summary.css_classes[-1] == "completed"

    def test_hidden_section_is_not_current(self):
        course = make_course(Section(number=1, visible=False, activities=[act(1)]), marker=1)
        summary = self._summary(course, 1)
        assert "hidden" in summary.css_classes
        assert "current" not in summary.css_classes
        assert summary.hidden

    def test_locked_when_greyed(self):
        course = make_course(Section(number=1, user_visible=False, activities=[act(1)]))
        summary = self._summary(course, 1, config=FormatConfig(display_hidden_as_greyed=True))
        assert summary.locked
        assert summary.css_classes[-3:] == ["locked_topic", "dimmed_text", "hidden"]
        assert summary.url == "/mod/page/view.php?id=1"

    def test_no_link_for_inaccessible_section(self):
        course = make_course(Section(number=1, user_visible=False, activities=[act(1)]))
        summary = self._summary(course, 1)
        assert summary.url is None
        assert not summary.locked


class TestBuildCourseIndex:
    """Test the course index."""

    def test_skips_general_empty_and_orphaned_sections(self, config, viewer, empty_completion):
        course = make_course(
            Section(number=1, activities=[act(1)]),
            Section(number=2),
            Section(number=3, activities=[act(3)]),
            Section(number=4, activities=[act(4)]),
            last_section_number=3,
        )
        course.sections[0].activities.append(act(99))
        index = build_course_index(course, empty_completion, config, viewer)
        assert [s.number for s in index] == [1, 3]

    def test_hidden_sections_need_greyed_display(self, config, greyed_config, viewer, empty_completion):
        course = make_course(
            Section(number=1, activities=[act(1)]),
            Section(number=2, visible=False, user_visible=False, activities=[act(2)]),
            hidden_sections=True,
        )
        assert [s.number for s in build_course_index(course, empty_completion, config, viewer)] == [1]

        # the hidden activity still needs to be eligible for the summary to appear
        greyed_viewer = Viewer(capabilities={"course:viewhiddensections"})
        course = make_course(
            Section(number=1, activities=[act(1)]),
            Section(number=2, visible=False, user_visible=False, activities=[act(2, user_visible=False)]),
            hidden_sections=True,
        )
        index = build_course_index(course, empty_completion, greyed_config, greyed_viewer)
        assert [s.number for s in index] == [1, 2]
        assert index[1].locked
        assert index[1].css_classes == [
            "section", "main", "section-summary", "clearfix",
            "hidden", "incompleted", "locked_topic", "dimmed_text",
        ]

    def test_completion_per_section(self, config, viewer):
        course = make_course(
            Section(number=1, activities=[act(1, tracked=True, completion_state=CompletionState.COMPLETE)]),
            Section(number=2, activities=[act(2, tracked=True, completion_state=CompletionState.INCOMPLETE)]),
        )
        index = build_course_index(course, CompletionIndex.from_course(course), config, viewer)
        assert [s.completed for s in index] == [True, False]
