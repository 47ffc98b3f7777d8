"""
CourseLoader - Load a course snapshot exported by the host.

Reads JSON or YAML files describing one course (sections, activities,
visibility and completion flags) and validates them into a Course.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from simpletopics.errors import CourseLoadError
from simpletopics.schemas import Course


logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class CourseLoader:
    """
    Load a course snapshot from disk.

    The parsed course is cached; reload() reads the file again.
    """

    def __init__(self, path: str | Path):
        """
        Initialize loader with path to the snapshot file.

        Args:
            path: Path to a .json, .yaml or .yml course file
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Course snapshot not found: {path}")
        self._course: Optional[Course] = None

    def _read_raw(self) -> object:
        with open(self.path, "r", encoding="utf-8") as f:
            if self.path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)

    def reload(self) -> Course:
        """Read and validate the snapshot file."""
        try:
            raw = self._read_raw()
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise CourseLoadError(f"Cannot parse {self.path}: {e}") from e

        if not isinstance(raw, dict):
            raise CourseLoadError(
                f"{self.path}: top level must be a mapping, got {type(raw).__name__}"
            )

        try:
            self._course = Course.model_validate(raw)
        except ValidationError as e:
            raise CourseLoadError(f"Invalid course snapshot {self.path}: {e}") from e

        logger.info(
            "Loaded course %s (%s) with %d sections",
            self._course.id, self._course.short_name, self._course.section_count,
        )
        return self._course

    def get_course(self) -> Course:
        if self._course is None:
            return self.reload()
        return self._course
