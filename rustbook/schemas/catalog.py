"""
Catalog schemas for RustBook.

Defines Pydantic models for the static course content:
- Courses tagged with a content language
- Chapters as ordered groupings of lessons
- Lessons with starter code, optional solution and hints

All models are frozen; the catalog is loaded once and shared read-only.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CourseLanguage(str, Enum):
    """Content language of a course. Only Rust courses are executable."""
    RUST = "rust"
    SOLANA = "solana"

    @property
    def executable(self) -> bool:
        return self is CourseLanguage.RUST


def ensure_unique_ids(items, kind: str):
    """Shared uniqueness check for sibling ids."""
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"Duplicate {kind} id: {item.id}")
        seen.add(item.id)
    return items


class Lesson(BaseModel):
    """Smallest content unit: instructions plus starter code."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str                       # markdown
    initial_code: str
    solution: Optional[str] = None
    hints: tuple[str, ...] = ()

    @property
    def has_hints(self) -> bool:
        return len(self.hints) > 0


class Chapter(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    lessons: tuple[Lesson, ...] = ()

    @field_validator('lessons')
    @classmethod
    def lesson_ids_unique(cls, v):
        return ensure_unique_ids(v, "lesson")


class Course(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    language: CourseLanguage
    chapters: tuple[Chapter, ...] = ()
    icon: Optional[str] = None         # home page card decoration
    highlights: tuple[str, ...] = ()

    @field_validator('chapters')
    @classmethod
    def chapter_ids_unique(cls, v):
        return ensure_unique_ids(v, "chapter")

    def get_chapter(self, chapter_id: str) -> Optional[Chapter]:
        return next((ch for ch in self.chapters if ch.id == chapter_id), None)


class Catalog(BaseModel):
    """Root of the Course -> Chapter -> Lesson tree."""
    model_config = ConfigDict(frozen=True)

    courses: tuple[Course, ...]

    @field_validator('courses')
    @classmethod
    def course_ids_unique(cls, v):
        return ensure_unique_ids(v, "course")

    def get_course(self, course_id: str) -> Optional[Course]:
        return next((c for c in self.courses if c.id == course_id), None)
