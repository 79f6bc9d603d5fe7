"""
CatalogLoader - Load the course catalog from a YAML file.

Provides read-only access to:
- Courses
- Chapters within a course
- Lessons within a chapter

The catalog is parsed and validated once; every lookup reads the same
immutable tree.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from rustbook.schemas import Catalog, Chapter, Course, Lesson
from rustbook.utils import DEFAULT_CATALOG_PATH


logger = logging.getLogger(__name__)


def parse_catalog(data: dict[str, Any]) -> Catalog:
    """
    Validate a raw catalog document.

    Raises:
        pydantic.ValidationError: On missing fields or duplicate ids
    """
    return Catalog.model_validate(data)


class CatalogLoader:
    """
    Load course content from a YAML catalog file.

    The parsed Catalog is kept in memory for the lifetime of the loader;
    nothing here mutates it.
    """

    def __init__(self, catalog_path: str | Path | None = None, catalog: Optional[Catalog] = None):
        """
        Initialize loader and parse the catalog.

        Args:
            catalog_path: Path to courses.yaml (default: bundled catalog)
            catalog: Already-built catalog; no file is read when given

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            yaml.YAMLError: If YAML parsing fails
            pydantic.ValidationError: If the document is not a valid catalog
        """
        if catalog is not None:
            self.catalog_path = None
            self.catalog = catalog
            return

        self.catalog_path = Path(catalog_path or DEFAULT_CATALOG_PATH)
        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Course catalog not found: {self.catalog_path}")

        with open(self.catalog_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        self.catalog = parse_catalog(data)
        logger.info(
            f"Loaded catalog {self.catalog_path.name}: "
            f"{len(self.catalog.courses)} courses, {self.total_lessons} lessons"
        )

    @property
    def total_lessons(self) -> int:
        return sum(
            len(chapter.lessons)
            for course in self.catalog.courses
            for chapter in course.chapters
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_courses(self) -> tuple[Course, ...]:
        """Get all courses in catalog order."""
        return self.catalog.courses

    def get_course(self, course_id: str) -> Optional[Course]:
        return self.catalog.get_course(course_id)

    def get_chapter(self, course_id: str, chapter_id: str) -> Optional[Chapter]:
        course = self.get_course(course_id)
        if not course:
            return None
        return course.get_chapter(chapter_id)

    def get_lesson(self, course_id: str, chapter_id: str, lesson_id: str) -> Optional[Lesson]:
        """Get a lesson by its three identifiers, or None if any fails to match."""
        chapter = self.get_chapter(course_id, chapter_id)
        if not chapter:
            return None
        return next((lesson for lesson in chapter.lessons if lesson.id == lesson_id), None)
