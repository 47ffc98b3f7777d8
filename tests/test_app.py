"""Tests for the Streamlit course preview."""

from pathlib import Path

from streamlit.testing.v1 import AppTest


PROJECT_ROOT = Path(__file__).parent.parent
APP_PATH = str(PROJECT_ROOT / "app.py")
SAMPLE_COURSE = str(PROJECT_ROOT / "data" / "sample_course.yaml")


class TestPreviewApp:
    """Test loading errors and the topic list of the preview app."""

    def test_topics_listed(self, monkeypatch):
        monkeypatch.setenv("SIMPLETOPICS_COURSE", SAMPLE_COURSE)
        monkeypatch.setenv("SIMPLETOPICS_CONFIG", str(PROJECT_ROOT / "config" / "format.yaml"))
        at = AppTest.from_file(APP_PATH).run()

        assert not at.exception
        assert len(at.sidebar.error) == 0
        assert any("Progress:" in md.value for md in at.sidebar.markdown)

    def test_missing_config_reported(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SIMPLETOPICS_COURSE", SAMPLE_COURSE)
        monkeypatch.setenv("SIMPLETOPICS_CONFIG", str(tmp_path / "missing.yaml"))
        at = AppTest.from_file(APP_PATH).run()

        assert not at.exception
        assert "missing.yaml" in at.sidebar.error[0].value
        assert any("could not be loaded" in e.value for e in at.error)

    def test_missing_course_reported(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SIMPLETOPICS_COURSE", str(tmp_path / "nope.yaml"))
        at = AppTest.from_file(APP_PATH).run()

        assert not at.exception
        assert "nope.yaml" in at.sidebar.error[0].value
