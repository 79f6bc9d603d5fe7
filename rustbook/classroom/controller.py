"""
NavigationController - Move between lessons and keep the session in step.

Combines Navigator (position resolution) with LessonSession (per-lesson
state): every successful move re-initializes the session, a failed one
switches to the not-found view and touches nothing else.
"""

import logging
from enum import Enum
from typing import Optional

from rustbook.schemas import LessonRef

from .navigator import NavigationTarget, Navigator, ResolvedPosition
from .session import LessonSession


logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    """Which page the viewer should render."""
    HOME = "home"
    LESSON = "lesson"
    NOT_FOUND = "not_found"
    PLAYGROUND = "playground"

    @property
    def is_terminal(self) -> bool:
        """Terminal views offer a single way out and no other navigation."""
        return self is ViewMode.NOT_FOUND


class NavigationUnavailable(Exception):
    """Raised when moving to an adjacent lesson that doesn't exist."""


class NavigationController:
    """Orchestrate lesson transitions for one viewer."""

    def __init__(self, navigator: Navigator, session: Optional[LessonSession] = None):
        self.navigator = navigator
        self.session = session or LessonSession()
        self.position: Optional[ResolvedPosition] = None
        self.view = ViewMode.HOME

    @property
    def current_ref(self) -> Optional[LessonRef]:
        return self.position.ref if self.position else None

    def go_to(self, course_id: str, chapter_id: str, lesson_id: str) -> bool:
        """
        Show the lesson at the given identifiers.

        Returns:
            True on success; False if nothing matched (view becomes NOT_FOUND)
        """
        position = self.navigator.resolve(course_id, chapter_id, lesson_id)
        if position is None:
            self.view = ViewMode.NOT_FOUND
            return False

        self.position = position
        self.view = ViewMode.LESSON
        self.session.initialize(position.lesson, position.ref)
        logger.info(f"Now viewing {position.ref}")
        return True

    def go_to_ref(self, ref: LessonRef) -> bool:
        return self.go_to(ref.course_id, ref.chapter_id, ref.lesson_id)

    def go_home(self):
        self.position = None
        self.view = ViewMode.HOME

    def open_playground(self):
        self.position = None
        self.view = ViewMode.PLAYGROUND

    # -------------------------------------------------------------------------
    # Adjacent lessons
    # -------------------------------------------------------------------------

    @property
    def next_target(self) -> Optional[NavigationTarget]:
        if not self.position or self.view != ViewMode.LESSON:
            return None
        return self.navigator.next_lesson(self.position.ref)

    @property
    def previous_target(self) -> Optional[NavigationTarget]:
        if not self.position or self.view != ViewMode.LESSON:
            return None
        return self.navigator.previous_lesson(self.position.ref)

    @property
    def can_go_next(self) -> bool:
        return self.next_target is not None

    @property
    def can_go_previous(self) -> bool:
        return self.previous_target is not None

    def go_next(self) -> bool:
        target = self.next_target
        if target is None:
            raise NavigationUnavailable("No next lesson")
        return self.go_to_ref(target.ref)

    def go_previous(self) -> bool:
        target = self.previous_target
        if target is None:
            raise NavigationUnavailable("No previous lesson")
        return self.go_to_ref(target.ref)
