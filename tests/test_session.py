"""Tests for LessonSession state and the run state machine."""

from rustbook.classroom import LessonSession
from rustbook.schemas import ExecutionResult, ExecutionStatus, LessonRef

from conftest import HELLO_WORLD_CODE, make_lesson


class TestInitialize:

    def test_starts_from_initial_code(self, session):
        assert session.code == HELLO_WORLD_CODE
        assert session.output == ""
        assert session.error is None
        assert session.status == ExecutionStatus.IDLE
        assert not session.state.show_hint
        assert session.state.hint_index == 0

    def test_idempotent_on_code(self, hello_lesson, hello_ref):
        once = LessonSession()
        once.initialize(hello_lesson, hello_ref)
        twice = LessonSession()
        twice.initialize(hello_lesson, hello_ref)
        twice.initialize(hello_lesson, hello_ref)
        assert once.code == twice.code == hello_lesson.initial_code

    def test_replaces_everything(self, session, bare_lesson):
        session.edit_code("changed")
        session.reveal_next_hint()
        ticket = session.begin_execution()
        session.complete_execution(ticket, ExecutionResult.succeeded("out"))

        bare_ref = LessonRef(course_id="rust-basics", chapter_id="ownership", lesson_id="ownership-basics")
        session.initialize(bare_lesson, bare_ref)
        assert session.code == bare_lesson.initial_code
        assert session.output == ""
        assert session.error is None
        assert session.state.hint_index == 0
        assert not session.state.show_hint
        assert session.state.lesson == bare_ref

    def test_edits_do_not_touch_lesson(self, session, hello_lesson):
        session.edit_code("fn main() { todo!() }")
        assert session.code == "fn main() { todo!() }"
        assert hello_lesson.initial_code == HELLO_WORLD_CODE


class TestHints:

    def test_first_reveal_shows_next_hint(self, session):
        session.reveal_next_hint()
        assert session.state.show_hint
        assert session.state.hint_index == 1
        assert session.current_hint() == "Look inside println!"

    def test_hidden_until_revealed(self, session):
        assert session.current_hint() is None

    def test_clamped_at_last_hint(self, session):
        for _ in range(10):
            session.reveal_next_hint()
        assert session.state.hint_index == 2
        assert session.current_hint() == 'Use "Hello, Rust!"'

    def test_never_decreases(self, session):
        seen = []
        for _ in range(5):
            session.reveal_next_hint()
            seen.append(session.state.hint_index)
        assert seen == sorted(seen)
        assert max(seen) <= len(session.lesson.hints) - 1

    def test_no_hints_still_sets_visible(self, bare_lesson, hello_ref):
        session = LessonSession()
        session.initialize(bare_lesson, hello_ref)
        session.reveal_next_hint()
        assert session.state.show_hint
        assert session.state.hint_index == 0
        assert session.current_hint() is None

    def test_single_hint_lesson(self, loader, hello_ref):
        lesson = loader.get_lesson("rust-basics", "getting-started", "hello-world")
        session = LessonSession()
        session.initialize(lesson, hello_ref)
        session.reveal_next_hint()
        assert session.state.hint_index == 0
        assert session.current_hint() == "Change the text inside the println! macro"

    def test_hint_label(self, session):
        assert session.hint_label() == "Hint (1/3)"
        session.reveal_next_hint()
        assert session.hint_label() == "Hint (2/3)"


class TestSolution:

    def test_replaces_code(self, session, hello_lesson):
        session.edit_code("garbage")
        session.apply_solution()
        assert session.code == hello_lesson.solution

    def test_no_solution_is_noop(self, bare_lesson, hello_ref):
        session = LessonSession()
        session.initialize(bare_lesson, hello_ref)
        session.edit_code("my work")
        session.apply_solution()
        assert session.code == "my work"

    def test_empty_solution_is_noop(self, hello_ref):
        session = LessonSession()
        session.initialize(make_lesson("blank").model_copy(update={"solution": ""}), hello_ref)
        session.edit_code("my work")
        session.apply_solution()
        assert session.code == "my work"


class TestRunStateMachine:

    def test_begin_moves_to_running(self, session):
        ticket = session.begin_execution()
        assert ticket is not None
        assert session.status == ExecutionStatus.RUNNING
        assert ticket.lesson == session.state.lesson

    def test_second_begin_while_running_is_ignored(self, session):
        first = session.begin_execution()
        assert session.begin_execution() is None
        assert session.is_current(first)

    def test_begin_without_lesson(self):
        assert LessonSession().begin_execution() is None

    def test_success(self, session):
        ticket = session.begin_execution()
        assert session.complete_execution(ticket, ExecutionResult.succeeded("Hello, World!\n"))
        assert session.status == ExecutionStatus.SUCCEEDED
        assert session.output == "Hello, World!\n"
        assert session.error is None

    def test_failure_keeps_previous_output(self, session):
        ticket = session.begin_execution()
        session.complete_execution(ticket, ExecutionResult.succeeded("first\n"))
        ticket = session.begin_execution()
        session.complete_execution(ticket, ExecutionResult.failed("compile error"))
        assert session.status == ExecutionStatus.FAILED
        assert session.error == "compile error"
        assert session.output == "first\n"

    def test_new_run_clears_error_not_output(self, session):
        ticket = session.begin_execution()
        session.complete_execution(ticket, ExecutionResult.succeeded("kept"))
        ticket = session.begin_execution()
        session.complete_execution(ticket, ExecutionResult.failed("boom"))
        session.begin_execution()
        assert session.error is None
        assert session.output == "kept"

    def test_can_run_again_after_completion(self, session):
        ticket = session.begin_execution()
        session.complete_execution(ticket, ExecutionResult.failed("boom"))
        assert session.begin_execution() is not None

    def test_stale_result_after_reinitialize_is_dropped(self, session, bare_lesson, hello_lesson, hello_ref):
        ticket = session.begin_execution()
        other = LessonRef(course_id="rust-basics", chapter_id="ownership", lesson_id="ownership-basics")
        session.initialize(bare_lesson, other)
        assert not session.complete_execution(ticket, ExecutionResult.succeeded("late"))
        assert session.output == ""
        assert session.status == ExecutionStatus.IDLE

    def test_stale_result_after_returning_to_same_lesson_is_dropped(self, session, hello_lesson, hello_ref):
        ticket = session.begin_execution()
        session.initialize(hello_lesson, hello_ref)
        assert not session.complete_execution(ticket, ExecutionResult.failed("late"))
        assert session.error is None
