"""
RustBook Viewer - Rendering components for lesson display.

This module provides:
- Output panel and hint box rendering
- Course cards for the home page
"""

from .lesson import (
    get_lesson_css,
    render_output_panel,
    render_session_output,
    render_hint_box,
    render_course_card,
    render_lesson_position,
    OUTPUT_PLACEHOLDER,
)

__all__ = [
    "get_lesson_css",
    "render_output_panel",
    "render_session_output",
    "render_hint_box",
    "render_course_card",
    "render_lesson_position",
    "OUTPUT_PLACEHOLDER",
]
