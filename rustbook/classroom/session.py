"""
LessonSession - Per-lesson editable state and the run state machine.

Tracks, for the currently displayed lesson:
- The learner's code buffer
- Hint visibility and the revealed hint index
- Run status, last output and last error

A session is re-initialized (never merged) whenever the lesson changes.
Runs are correlated with ExecutionTicket so that a result arriving after
the lesson changed is dropped.
"""

import logging
import threading
from typing import Optional

from rustbook.schemas import (
    ExecutionResult,
    ExecutionStatus,
    ExecutionTicket,
    Lesson,
    LessonRef,
    SessionState,
)


logger = logging.getLogger(__name__)


class LessonSession:
    """Mutable state owned by the currently displayed lesson."""

    def __init__(self):
        self.state = SessionState()
        self.lesson: Optional[Lesson] = None
        # guards the ticket check and the writes; results land from worker threads
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def initialize(self, lesson: Lesson, ref: LessonRef):
        """
        Replace all state for a newly displayed lesson.

        Args:
            lesson: Lesson record to start from
            ref: Identifiers of the lesson, used to tag runs
        """
        with self._lock:
            self.lesson = lesson
            self.state = SessionState(
                lesson=ref,
                generation=self.state.generation + 1,
                code=lesson.initial_code,
            )

    @property
    def code(self) -> str:
        return self.state.code

    @property
    def output(self) -> str:
        return self.state.output

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def status(self) -> ExecutionStatus:
        return self.state.status

    # -------------------------------------------------------------------------
    # Editing, hints and solution
    # -------------------------------------------------------------------------

    def edit_code(self, text: str):
        self.state.code = text

    def reveal_next_hint(self):
        """Advance to the next hint if there is one; always show hints."""
        hints = self.lesson.hints if self.lesson else ()
        if hints and self.state.hint_index < len(hints) - 1:
            self.state.hint_index += 1
        self.state.show_hint = True

    def current_hint(self) -> Optional[str]:
        """Get the visible hint text, or None if hints are hidden or absent."""
        if not self.state.show_hint or not self.lesson or not self.lesson.hints:
            return None
        return self.lesson.hints[self.state.hint_index]

    def hint_label(self) -> str:
        total = len(self.lesson.hints) if self.lesson else 0
        return f"Hint ({self.state.hint_index + 1}/{total})"

    def apply_solution(self):
        """Replace the code buffer with the lesson's solution, if it has one."""
        if self.lesson and self.lesson.solution:
            self.state.code = self.lesson.solution

    # -------------------------------------------------------------------------
    # Run state machine
    # -------------------------------------------------------------------------

    def begin_execution(self) -> Optional[ExecutionTicket]:
        """
        Move to RUNNING and issue a ticket for the run.

        Returns None (and changes nothing) if a run is already in flight.
        """
        with self._lock:
            if self.state.is_running or self.state.lesson is None:
                return None

            self.state.generation += 1
            self.state.status = ExecutionStatus.RUNNING
            self.state.error = None
            return ExecutionTicket(lesson=self.state.lesson, generation=self.state.generation)

    def is_current(self, ticket: ExecutionTicket) -> bool:
        return (
            ticket.lesson == self.state.lesson
            and ticket.generation == self.state.generation
        )

    def complete_execution(self, ticket: ExecutionTicket, result: ExecutionResult) -> bool:
        """
        Apply a run result if its ticket still matches this session.

        Success replaces output and clears the error. Failure sets the error
        and keeps the last output.

        Returns:
            True if applied, False if the ticket was stale
        """
        with self._lock:
            if not self.is_current(ticket):
                logger.debug(f"Dropping stale result for {ticket.lesson} (generation {ticket.generation})")
                return False

            if result.success:
                self.state.status = ExecutionStatus.SUCCEEDED
                self.state.output = result.output
                self.state.error = None
            else:
                self.state.status = ExecutionStatus.FAILED
                self.state.error = result.error
            return True
