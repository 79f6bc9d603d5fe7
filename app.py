"""
RustBook - Interactive Rust Lessons

Streamlit application for learning Rust (and browsing Solana samples)
with an editable code buffer that runs on a remote execution service.

Usage:
    streamlit run app.py

A lesson is addressed by query parameters:
    ?course=rust-basics&chapter=getting-started&lesson=hello-world
"""

import streamlit as st
import yaml

from rustbook.classroom import (
    CatalogLoader,
    CodeRunner,
    ExecutionClient,
    LessonSession,
    NavigationController,
    Navigator,
    ViewMode,
)
from rustbook.schemas import Course, CourseLanguage, Lesson, LessonRef
from rustbook.utils import Settings, configure_logging, load_settings
from rustbook.viewer import (
    get_lesson_css,
    render_course_card,
    render_hint_box,
    render_lesson_position,
    render_session_output,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

PLAYGROUND_COURSE = Course(
    id="playground",
    title="Playground",
    description="Free-form Rust code",
    language=CourseLanguage.RUST,
)
PLAYGROUND_LESSON = Lesson(
    id="playground",
    title="Playground",
    content="",
    initial_code='fn main() {\n    println!("Hello, Rust!");\n}',
)
PLAYGROUND_REF = LessonRef(course_id="playground", chapter_id="playground", lesson_id="playground")

st.set_page_config(
    page_title="RustBook",
    page_icon="🦀",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource
def get_settings() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


@st.cache_resource
def get_loader(catalog_path: str) -> CatalogLoader:
    """Load the catalog once per process."""
    return CatalogLoader(catalog_path)


@st.cache_resource
def get_runner(execute_url: str, timeout: float) -> CodeRunner:
    return CodeRunner(ExecutionClient(execute_url, timeout=timeout))


@st.cache_data(ttl=30)
def get_service_status(execute_url: str) -> str:
    health = ExecutionClient(execute_url).health()
    if health is None:
        return "unreachable"
    return f"{health.status} (v{health.version})" if health.version else health.status


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    settings = get_settings()

    if "loader" not in st.session_state:
        try:
            st.session_state.loader = get_loader(str(settings.catalog_path))
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            # ValueError covers pydantic.ValidationError
            st.session_state.loader = None
            st.session_state.load_error = str(e)

    if "controller" not in st.session_state and st.session_state.loader:
        st.session_state.controller = NavigationController(Navigator(st.session_state.loader))

    if "playground" not in st.session_state:
        playground = LessonSession()
        playground.initialize(PLAYGROUND_LESSON, PLAYGROUND_REF)
        st.session_state.playground = playground

    if "editor_rev" not in st.session_state:
        st.session_state.editor_rev = 0

    if "route" not in st.session_state:
        st.session_state.route = None


def current_route() -> tuple:
    params = st.query_params
    return (
        params.get("view"),
        params.get("course"),
        params.get("chapter"),
        params.get("lesson"),
    )


def sync_route():
    """Apply the query parameters to the controller when they change."""
    route = current_route()
    if route == st.session_state.route:
        return
    st.session_state.route = route

    controller = st.session_state.controller
    view, course_id, chapter_id, lesson_id = route
    if view == ViewMode.PLAYGROUND.value:
        controller.open_playground()
    elif course_id or chapter_id or lesson_id:
        controller.go_to(course_id or "", chapter_id or "", lesson_id or "")
    else:
        controller.go_home()
    st.session_state.editor_rev += 1


def open_lesson(ref: LessonRef):
    """Point the URL at a lesson; the next run picks it up."""
    st.query_params.clear()
    st.query_params.update({
        "course": ref.course_id,
        "chapter": ref.chapter_id,
        "lesson": ref.lesson_id,
    })
    st.rerun()


def open_home():
    st.query_params.clear()
    st.rerun()


def open_playground():
    st.query_params.clear()
    st.query_params["view"] = ViewMode.PLAYGROUND.value
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar: Course Tree
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with course tree and service status."""
    st.sidebar.title("🦀 RustBook")

    if not st.session_state.loader:
        st.sidebar.error("Course catalog could not be loaded.")
        return

    controller = st.session_state.controller
    if controller.view.is_terminal:
        return

    col1, col2 = st.sidebar.columns(2)
    with col1:
        if st.button("← Home", use_container_width=True):
            open_home()
    with col2:
        if st.button("Playground", use_container_width=True):
            open_playground()

    if controller.view == ViewMode.LESSON:
        render_course_tree()

    st.sidebar.divider()
    settings = get_settings()
    st.sidebar.caption(f"Execution service: {get_service_status(settings.execute_url)}")


def render_course_tree():
    """Render the chapters and lessons of the current course."""
    controller = st.session_state.controller
    position = controller.position
    tree = controller.navigator.navigation_tree(position.course.id, controller.current_ref)

    st.sidebar.divider()
    st.sidebar.subheader(position.course.title)

    for nav_chapter in tree:
        with st.sidebar.expander(nav_chapter.chapter.title, expanded=nav_chapter.contains_current):
            for nav_lesson in nav_chapter.lessons:
                if st.button(
                    nav_lesson.title,
                    key=f"lesson_{nav_lesson.ref}",
                    type="primary" if nav_lesson.is_current else "secondary",
                    use_container_width=True,
                ):
                    open_lesson(nav_lesson.ref)


# -----------------------------------------------------------------------------
# Home View
# -----------------------------------------------------------------------------

def render_home_view():
    st.title("Learn Rust & Solana")
    st.markdown("Master modern programming through interactive exercises.")
    st.markdown(get_lesson_css(), unsafe_allow_html=True)

    controller = st.session_state.controller
    courses = st.session_state.loader.get_courses()
    columns = st.columns(max(len(courses), 1))

    for column, course in zip(columns, courses):
        with column:
            st.markdown(render_course_card(course), unsafe_allow_html=True)
            first = controller.navigator.first_lesson(course.id)
            if first and st.button(f"Start {course.title}", key=f"start_{course.id}"):
                open_lesson(first.ref)

    st.divider()
    if st.button("🚀 Go straight to the playground"):
        open_playground()


# -----------------------------------------------------------------------------
# Lesson View
# -----------------------------------------------------------------------------

def render_code_workspace(session: LessonSession, course: Course, key_prefix: str):
    """Render toolbar, hint box, editor and output for a session."""
    runner = get_runner(get_settings().execute_url, get_settings().execute_timeout)
    lesson = session.lesson

    col1, col2, col3 = st.columns(3)
    with col1:
        run_label = "Running..." if session.state.is_running else "Run Code"
        if st.button(run_label, key=f"{key_prefix}_run", type="primary",
                     disabled=session.state.is_running, use_container_width=True):
            with st.spinner("Running..."):
                runner.run(session, course)
            st.rerun()
    with col2:
        if lesson.has_hints and st.button(session.hint_label(), key=f"{key_prefix}_hint",
                                          use_container_width=True):
            session.reveal_next_hint()
            st.rerun()
    with col3:
        if lesson.solution and st.button("Show Solution", key=f"{key_prefix}_solution",
                                                     use_container_width=True):
            session.apply_solution()
            st.session_state.editor_rev += 1
            st.rerun()

    st.markdown(render_hint_box(session.current_hint()), unsafe_allow_html=True)

    editor_key = f"{key_prefix}_editor_{st.session_state.editor_rev}"
    st.text_area(
        "Code",
        value=session.code,
        key=editor_key,
        height=300,
        label_visibility="collapsed",
        on_change=lambda: session.edit_code(st.session_state[editor_key]),
    )

    st.markdown(render_session_output(session.state), unsafe_allow_html=True)


def render_lesson_view():
    controller = st.session_state.controller
    position = controller.position

    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    st.markdown(position.lesson.content)

    render_code_workspace(controller.session, position.course, "lesson")
    render_navigation_bar()


def render_navigation_bar():
    """Render prev/next buttons; a button only appears when its target exists."""
    controller = st.session_state.controller
    pos, total = controller.navigator.lesson_position(controller.current_ref)
    prev_target = controller.previous_target
    next_target = controller.next_target

    st.divider()
    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if prev_target and st.button("← Previous", use_container_width=True):
            open_lesson(prev_target.ref)

    with col2:
        st.markdown(render_lesson_position(pos, total), unsafe_allow_html=True)

    with col3:
        if next_target and st.button("Next →", use_container_width=True):
            open_lesson(next_target.ref)


def render_not_found_view():
    st.header("Course not found")
    if st.button("Back to home"):
        open_home()


def render_playground_view():
    st.title("Playground")
    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    render_code_workspace(st.session_state.playground, PLAYGROUND_COURSE, "playground")


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()

    if not st.session_state.loader:
        render_sidebar()
        st.error(f"Course catalog could not be loaded: {st.session_state.load_error}")
        return

    sync_route()
    render_sidebar()

    view = st.session_state.controller.view
    if view == ViewMode.LESSON:
        render_lesson_view()
    elif view == ViewMode.NOT_FOUND:
        render_not_found_view()
    elif view == ViewMode.PLAYGROUND:
        render_playground_view()
    else:
        render_home_view()


if __name__ == "__main__":
    main()
