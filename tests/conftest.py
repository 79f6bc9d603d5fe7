"""Pytest fixtures for RustBook tests."""

import pytest

from rustbook.classroom import CatalogLoader, LessonSession, NavigationController, Navigator
from rustbook.schemas import Catalog, Chapter, Course, CourseLanguage, Lesson, LessonRef


HELLO_WORLD_CODE = 'fn main() { println!("Hello, World!"); }'


@pytest.fixture
def loader() -> CatalogLoader:
    """Loader over the bundled catalog."""
    return CatalogLoader()


@pytest.fixture
def navigator(loader) -> Navigator:
    return Navigator(loader)


@pytest.fixture
def controller(navigator) -> NavigationController:
    return NavigationController(navigator)


@pytest.fixture
def hello_lesson() -> Lesson:
    return Lesson(
        id="hello-world",
        title="Hello, World!",
        content="# Hello",
        initial_code=HELLO_WORLD_CODE,
        solution='fn main() { println!("Hello, Rust!"); }',
        hints=["Change the text", "Look inside println!", "Use \"Hello, Rust!\""],
    )


@pytest.fixture
def bare_lesson() -> Lesson:
    """Lesson without solution or hints."""
    return Lesson(
        id="ownership-basics",
        title="Ownership Basics",
        content="# Ownership",
        initial_code="fn main() {}",
    )


@pytest.fixture
def hello_ref() -> LessonRef:
    return LessonRef(course_id="rust-basics", chapter_id="getting-started", lesson_id="hello-world")


@pytest.fixture
def session(hello_lesson, hello_ref) -> LessonSession:
    session = LessonSession()
    session.initialize(hello_lesson, hello_ref)
    return session


@pytest.fixture
def rust_course() -> Course:
    return Course(id="rust-basics", title="Rust", description="", language=CourseLanguage.RUST)


@pytest.fixture
def solana_course() -> Course:
    return Course(id="solana-basics", title="Solana", description="", language=CourseLanguage.SOLANA)


def make_lesson(lesson_id: str) -> Lesson:
    return Lesson(id=lesson_id, title=lesson_id.title(), content="", initial_code=f"// {lesson_id}")


@pytest.fixture
def gappy_loader() -> CatalogLoader:
    """Catalog with an empty chapter between two populated ones."""
    catalog = Catalog(courses=[
        Course(
            id="gappy",
            title="Gappy",
            description="",
            language=CourseLanguage.RUST,
            chapters=[
                Chapter(id="first", title="First", lessons=[make_lesson("a1"), make_lesson("a2")]),
                Chapter(id="empty", title="Empty"),
                Chapter(id="last", title="Last", lessons=[make_lesson("b1")]),
            ],
        ),
        Course(id="hollow", title="Hollow", description="", language=CourseLanguage.SOLANA),
    ])
    return CatalogLoader(catalog=catalog)
