"""
RustBook Schemas - Pydantic models for the interactive lesson viewer.

This module exports all schema classes for:
- Catalog: courses, chapters, lessons
- Session: lesson references, execution status, per-lesson state
- Execution: execution service request/response models
"""

# Catalog schemas
from .catalog import (
    CourseLanguage,
    Lesson,
    Chapter,
    Course,
    Catalog,
    ensure_unique_ids,
)

# Session schemas
from .session import (
    LessonRef,
    ExecutionStatus,
    ExecutionTicket,
    SessionState,
)

# Execution schemas
from .execution import (
    ExecutionRequest,
    ExecutionResponse,
    ExecutionResult,
    ServiceHealth,
)

__all__ = [
    # Catalog
    'CourseLanguage',
    'Lesson',
    'Chapter',
    'Course',
    'Catalog',
    'ensure_unique_ids',
    # Session
    'LessonRef',
    'ExecutionStatus',
    'ExecutionTicket',
    'SessionState',
    # Execution
    'ExecutionRequest',
    'ExecutionResponse',
    'ExecutionResult',
    'ServiceHealth',
]
