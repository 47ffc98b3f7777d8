"""
SimpleTopics - Course preview

Streamlit application that plays the host LMS: it loads a course snapshot,
lists the topics with their completion state and shows an activity page
with previous/next links.

Usage:
    streamlit run app.py
"""

import os
from pathlib import Path

import streamlit as st
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from simpletopics.classroom import (
    CompletionIndex,
    CourseLoader,
    Navigator,
    build_course_index,
)
from simpletopics.errors import CourseLoadError
from simpletopics.schemas import NavigationTarget, TargetKind, Viewer, VIEW_HIDDEN_SECTIONS
from simpletopics.utils import load_config


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

load_dotenv()

DEFAULT_COURSE_PATH = Path(os.environ.get("SIMPLETOPICS_COURSE", "data/sample_course.yaml"))

st.set_page_config(
    page_title="SimpleTopics",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "course" not in st.session_state:
        try:
            st.session_state.course = CourseLoader(DEFAULT_COURSE_PATH).get_course()
        except (FileNotFoundError, CourseLoadError) as e:
            st.session_state.course = None
            st.session_state.load_error = str(e)

    if "config" not in st.session_state:
        try:
            st.session_state.config = load_config()
        except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
            st.session_state.config = None
            st.session_state.load_error = str(e)

    if "current_activity_id" not in st.session_state:
        st.session_state.current_activity_id = None


def is_ready() -> bool:
    return st.session_state.course is not None and st.session_state.config is not None


def build_request():
    """Per-render collaborators: nothing here outlives one rerun."""
    course = st.session_state.course
    config = st.session_state.config.model_copy(
        update={"display_hidden_as_greyed": st.session_state.get("greyed", False)}
    )
    capabilities = {VIEW_HIDDEN_SECTIONS} if st.session_state.get("can_view_hidden") else set()
    viewer = Viewer(capabilities=frozenset(capabilities))
    completion = CompletionIndex.from_course(course)
    return course, config, viewer, completion


# -----------------------------------------------------------------------------
# Sidebar: Course Index
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with the topic list."""
    st.sidebar.title("📚 SimpleTopics")

    if not is_ready():
        st.sidebar.error(st.session_state.get("load_error", "Course not loaded."))
        return

    st.sidebar.checkbox("Display inaccessible topics greyed out", key="greyed")
    st.sidebar.checkbox("Viewer can see hidden sections", key="can_view_hidden")
    st.sidebar.divider()

    course, config, viewer, completion = build_request()
    index = build_course_index(course, completion, config, viewer)
    completed = sum(1 for s in index if s.completed)

    st.sidebar.markdown(f"**Progress:** {completed}/{len(index)} topics")
    if index:
        st.sidebar.progress(completed / len(index))

    st.sidebar.subheader("Topics")
    for summary in index:
        indicator = "✓" if summary.completed else ("◌" if summary.locked else "○")
        section = course.get_section(summary.number)
        first = None
        if summary.url:
            first = next((a for a in section.activities if a.url == summary.url), None)

        col1, col2 = st.sidebar.columns([1, 9])
        with col1:
            st.markdown(indicator)
        with col2:
            if st.button(
                summary.title,
                key=f"section_{summary.number}",
                disabled=first is None,
                use_container_width=True,
            ):
                select_activity(first.id)


def select_activity(activity_id: int):
    st.session_state.current_activity_id = activity_id
    st.rerun()


# -----------------------------------------------------------------------------
# Main Content: Activity View
# -----------------------------------------------------------------------------

def render_activity_view():
    """Render the current activity page with navigation links."""
    if not is_ready():
        st.error("Course snapshot or format config could not be loaded.")
        st.code("SIMPLETOPICS_COURSE=data/sample_course.yaml SIMPLETOPICS_CONFIG=config/format.yaml streamlit run app.py")
        return

    activity_id = st.session_state.current_activity_id
    if activity_id is None:
        st.info("Select a topic from the sidebar to begin.")
        return

    course, config, viewer, completion = build_request()
    located = course.find_activity(activity_id)
    if located is None:
        st.error(f"Activity not found: {activity_id}")
        return
    section, activity = located

    st.caption(f"{course.short_name} / Section {section.number}")
    st.title(activity.name)
    if activity.url:
        st.markdown(f"`{activity.url}`")
    if activity.tracked:
        st.markdown(f"**Completion:** {activity.completion_state.value}")

    st.divider()
    result = Navigator(course, completion, config, viewer).resolve(activity.id, section.number)

    col1, col2 = st.columns(2)
    with col1:
        if result.previous:
            render_link("← ", result.previous, "previous")
    with col2:
        if result.next:
            render_link("", result.next, "next", suffix=" →")


def render_link(prefix: str, target: NavigationTarget, key: str, suffix: str = ""):
    if st.button(f"{prefix}{target.label}{suffix}", key=f"nav_{key}", use_container_width=True):
        if target.kind == TargetKind.ACTIVITY:
            select_activity(target.activity_id)
        else:
            st.session_state.current_activity_id = None
            st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_activity_view()


if __name__ == "__main__":
    main()
