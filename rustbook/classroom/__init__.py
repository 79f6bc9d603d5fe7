"""
RustBook Classroom - Runtime components for loading, navigating and running lessons.

This module provides:
- CatalogLoader: Load the course catalog
- Navigator: Position resolution and lesson sequencing
- LessonSession: Per-lesson code, hint and run state
- ExecutionClient / CodeRunner: Remote code execution
- NavigationController: Lesson transitions
"""

from .loader import (
    CatalogLoader,
    parse_catalog,
)

from .navigator import (
    Navigator,
    ResolvedPosition,
    NavigationTarget,
    NavigationLesson,
    NavigationChapter,
)

from .session import (
    LessonSession,
)

from .executor import (
    ExecutionClient,
    CodeRunner,
    EXECUTION_FAILED_MESSAGE,
    CONNECTION_FAILED_MESSAGE,
    NOT_EXECUTABLE_MESSAGE,
)

from .controller import (
    NavigationController,
    NavigationUnavailable,
    ViewMode,
)

__all__ = [
    # Loader
    "CatalogLoader",
    "parse_catalog",
    # Navigator
    "Navigator",
    "ResolvedPosition",
    "NavigationTarget",
    "NavigationLesson",
    "NavigationChapter",
    # Session
    "LessonSession",
    # Execution
    "ExecutionClient",
    "CodeRunner",
    "EXECUTION_FAILED_MESSAGE",
    "CONNECTION_FAILED_MESSAGE",
    "NOT_EXECUTABLE_MESSAGE",
    # Controller
    "NavigationController",
    "NavigationUnavailable",
    "ViewMode",
]
