"""
Navigator - Position resolution and lesson sequencing.

Provides:
- Resolution of (course, chapter, lesson) identifiers
- Next/previous lesson across chapter boundaries
- Lesson position within a course
- Course tree for sidebar display
"""

import logging
from dataclasses import dataclass
from typing import Optional

from rustbook.schemas import Chapter, Course, Lesson, LessonRef

from .loader import CatalogLoader


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPosition:
    """A lesson together with the course and chapter that own it."""
    course: Course
    chapter: Chapter
    lesson: Lesson

    @property
    def ref(self) -> LessonRef:
        return LessonRef(
            course_id=self.course.id,
            chapter_id=self.chapter.id,
            lesson_id=self.lesson.id,
        )


@dataclass(frozen=True)
class NavigationTarget:
    """Adjacent lesson with the identifiers needed to go there."""
    ref: LessonRef
    title: str


@dataclass
class NavigationLesson:
    ref: LessonRef
    title: str
    is_current: bool


@dataclass
class NavigationChapter:
    """Chapter with lessons and navigation metadata."""
    chapter: Chapter
    lessons: list[NavigationLesson]
    contains_current: bool


class Navigator:
    """
    Resolve positions and walk lessons in course order.

    The per-course lesson order is flattened once over the catalog, so every
    entry already carries its owning chapter; crossing a chapter boundary
    never needs a membership search.
    """

    def __init__(self, loader: CatalogLoader):
        """
        Initialize navigator.

        Args:
            loader: CatalogLoader instance for content access
        """
        self.loader = loader
        self._lesson_order: dict[str, list[LessonRef]] = {}
        self._lesson_index: dict[LessonRef, int] = {}
        self._build_lesson_order()

    def _build_lesson_order(self):
        """Build ordered list of lesson refs per course."""
        for course in self.loader.get_courses():
            refs = [
                LessonRef(course_id=course.id, chapter_id=chapter.id, lesson_id=lesson.id)
                for chapter in course.chapters
                for lesson in chapter.lessons
            ]
            self._lesson_order[course.id] = refs
            for idx, ref in enumerate(refs):
                self._lesson_index[ref] = idx

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(self, course_id: str, chapter_id: str, lesson_id: str) -> Optional[ResolvedPosition]:
        """
        Look up the course, chapter and lesson for three identifiers.

        Returns None if any identifier fails to match.
        """
        course = self.loader.get_course(course_id)
        chapter = course.get_chapter(chapter_id) if course else None
        lesson = self.loader.get_lesson(course_id, chapter_id, lesson_id) if chapter else None
        if not lesson:
            logger.info(f"No lesson at {course_id}/{chapter_id}/{lesson_id}")
            return None
        return ResolvedPosition(course=course, chapter=chapter, lesson=lesson)

    def resolve_ref(self, ref: LessonRef) -> Optional[ResolvedPosition]:
        return self.resolve(ref.course_id, ref.chapter_id, ref.lesson_id)

    def _target(self, ref: LessonRef) -> NavigationTarget:
        lesson = self.loader.get_lesson(ref.course_id, ref.chapter_id, ref.lesson_id)
        return NavigationTarget(ref=ref, title=lesson.title)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def first_lesson(self, course_id: str) -> Optional[NavigationTarget]:
        """Get the first lesson of a course, or None for an empty/unknown course."""
        refs = self._lesson_order.get(course_id)
        if not refs:
            return None
        return self._target(refs[0])

    def next_lesson(self, ref: LessonRef) -> Optional[NavigationTarget]:
        """
        Get the lesson after ref: the next one in its chapter, else the first
        lesson of the following chapter. None at the end of the course.
        """
        if ref not in self._lesson_index:
            return None
        refs = self._lesson_order[ref.course_id]
        idx = self._lesson_index[ref] + 1
        if idx >= len(refs):
            return None
        return self._target(refs[idx])

    def previous_lesson(self, ref: LessonRef) -> Optional[NavigationTarget]:
        """
        Get the lesson before ref: the previous one in its chapter, else the
        last lesson of the preceding chapter. None at the start of the course.
        """
        if ref not in self._lesson_index:
            return None
        idx = self._lesson_index[ref] - 1
        if idx < 0:
            return None
        return self._target(self._lesson_order[ref.course_id][idx])

    def lesson_position(self, ref: LessonRef) -> tuple[int, int]:
        """
        Get lesson position within its course as (current, total).

        Returns (0, total) if the lesson is not found.
        """
        refs = self._lesson_order.get(ref.course_id, [])
        if ref not in self._lesson_index:
            return (0, len(refs))
        return (self._lesson_index[ref] + 1, len(refs))

    # -------------------------------------------------------------------------
    # Course Tree
    # -------------------------------------------------------------------------

    def navigation_tree(self, course_id: str, current: Optional[LessonRef] = None) -> list[NavigationChapter]:
        """Get chapters of a course with lessons flagged against the current one."""
        course = self.loader.get_course(course_id)
        if not course:
            return []

        tree = []
        for chapter in course.chapters:
            lessons = []
            for lesson in chapter.lessons:
                ref = LessonRef(course_id=course.id, chapter_id=chapter.id, lesson_id=lesson.id)
                lessons.append(NavigationLesson(
                    ref=ref,
                    title=lesson.title,
                    is_current=ref == current,
                ))
            tree.append(NavigationChapter(
                chapter=chapter,
                lessons=lessons,
                contains_current=any(item.is_current for item in lessons),
            ))
        return tree
