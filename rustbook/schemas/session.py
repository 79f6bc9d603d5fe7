"""
Session state schemas for RustBook.

Defines Pydantic models for the ephemeral per-lesson state:
- Lesson references (course, chapter, lesson identifiers)
- Execution status of the run state machine
- Session state owned by the currently displayed lesson
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LessonRef(BaseModel):
    """Three identifiers that locate a lesson in the catalog."""
    model_config = ConfigDict(frozen=True)

    course_id: str
    chapter_id: str
    lesson_id: str

    def __str__(self) -> str:
        return f"{self.course_id}/{self.chapter_id}/{self.lesson_id}"


class ExecutionStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ExecutionTicket(BaseModel):
    """Correlation token issued when a run starts."""
    model_config = ConfigDict(frozen=True)

    lesson: LessonRef
    generation: int


class SessionState(BaseModel):
    lesson: Optional[LessonRef] = None
    generation: int = 0                   # bumped on every initialize and run
    code: str = ""
    output: str = ""
    error: Optional[str] = None
    status: ExecutionStatus = ExecutionStatus.IDLE
    show_hint: bool = False
    hint_index: int = Field(default=0, ge=0)

    @property
    def is_running(self) -> bool:
        return self.status == ExecutionStatus.RUNNING
