"""
Lesson renderer - Generate HTML snippets for the lesson page.

Features:
- Output panel (error takes precedence over output)
- Hint box
- Course cards for the home page
- "Lesson n of N" position label
"""

import html
from typing import Optional

from rustbook.schemas import Course, SessionState


OUTPUT_PLACEHOLDER = 'Click "Run Code" to see output'


def get_lesson_css() -> str:
    """Get CSS styles for the lesson page."""
    return """
    <style>
    .output-panel {
        background: #1e1e1e;
        border-radius: 8px;
        padding: 1em 1.5em;
        margin: 1em 0;
    }
    .output-panel h3 {
        color: #ddd;
        font-size: 1em;
        margin: 0 0 0.5em 0;
    }
    .output-panel pre {
        margin: 0;
        white-space: pre-wrap;
        font-family: "Fira Code", "Consolas", monospace;
        font-size: 0.9em;
    }
    .success-output {
        color: #c8e6c9;
    }
    .error-output {
        color: #ef9a9a;
    }
    .placeholder-output {
        color: #888;
        font-style: italic;
    }
    .hint-box {
        background: #fff8e1;
        border-left: 4px solid #FFB300;
        padding: 0.8em 1em;
        border-radius: 0 8px 8px 0;
        margin: 0.5em 0 1em 0;
        color: #5d4037;
    }
    .course-card {
        background: #fafafa;
        border-left: 4px solid #D84315;
        padding: 1em 1.5em;
        margin: 1em 0;
        border-radius: 0 8px 8px 0;
    }
    .course-card h2 {
        margin-top: 0;
    }
    .course-card ul {
        color: #555;
        margin-bottom: 0;
    }
    .lesson-position {
        text-align: center;
        color: #666;
    }
    </style>
    """


def render_output_panel(output: str, error: Optional[str]) -> str:
    """
    Render the run output panel.

    An error is shown instead of the output when present; the output is
    kept underneath and reappears after the next successful run.
    """
    if error:
        body = f'<pre class="error-output">{html.escape(error)}</pre>'
    elif output:
        body = f'<pre class="success-output">{html.escape(output)}</pre>'
    else:
        body = f'<pre class="placeholder-output">{html.escape(OUTPUT_PLACEHOLDER)}</pre>'

    return f'<div class="output-panel"><h3>Output</h3>{body}</div>'


def render_session_output(state: SessionState) -> str:
    return render_output_panel(state.output, state.error)


def render_hint_box(hint: Optional[str]) -> str:
    if not hint:
        return ""
    return f'<div class="hint-box">💡 {html.escape(hint)}</div>'


def render_course_card(course: Course) -> str:
    """Render a home page card for a course."""
    icon = f"{html.escape(course.icon)} " if course.icon else ""
    parts = ['<div class="course-card">']
    parts.append(f'<h2>{icon}{html.escape(course.title)}</h2>')
    parts.append(f'<p>{html.escape(course.description)}</p>')

    if course.highlights:
        items = "".join(f"<li>{html.escape(h)}</li>" for h in course.highlights)
        parts.append(f"<ul>{items}</ul>")

    parts.append('</div>')
    return "".join(parts)


def render_lesson_position(position: int, total: int) -> str:
    return f'<div class="lesson-position">Lesson {position} of {total}</div>'
