"""Shared fixtures for SimpleTopics tests."""

import pytest

from simpletopics.classroom import CompletionIndex
from simpletopics.schemas import FormatConfig, Viewer


@pytest.fixture
def config():
    return FormatConfig()


@pytest.fixture
def greyed_config():
    return FormatConfig(display_hidden_as_greyed=True)


@pytest.fixture
def viewer():
    return Viewer(id=2)


@pytest.fixture
def empty_completion():
    return CompletionIndex.from_mapping(7, {})
