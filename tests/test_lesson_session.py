from saute.services.lesson_session import LessonSession, SessionState

from tests.helpers import make_lesson


def test_initial_state() -> None:
    session = LessonSession(make_lesson(False, True, True))
    assert session.cursor == 0
    assert session.state == SessionState.viewing
    assert session.validations == [False, False, False]
    assert session.attempts == 0


def test_advance_without_validation_needed_moves_directly() -> None:
    session = LessonSession(make_lesson(False, True, True))
    assert session.request_advance() is True
    assert session.cursor == 1
    assert session.state == SessionState.viewing


def test_advance_on_unvalidated_step_asks_to_skip() -> None:
    session = LessonSession(make_lesson(True, True, True))
    session.request_advance()
    assert session.state == SessionState.confirming_skip
    assert session.cursor == 0

    assert session.confirm_skip() is True
    assert session.state == SessionState.viewing
    assert session.cursor == 1
    assert session.validations == [False, False, False]


def test_cancel_skip_stays_on_step() -> None:
    session = LessonSession(make_lesson(True, True))
    session.request_advance()
    assert session.cancel_skip() is True
    assert session.state == SessionState.viewing
    assert session.cursor == 0


def test_advance_after_validation_needs_no_confirmation() -> None:
    session = LessonSession(make_lesson(True, True, True))
    session.on_validation_success(0)
    session.request_advance()
    assert session.state == SessionState.viewing
    assert session.cursor == 1


def test_advance_on_last_step_is_a_no_op() -> None:
    session = LessonSession(make_lesson(False, False))
    session.request_advance()
    assert session.request_advance() is False
    assert session.cursor == 1

    gated = LessonSession(make_lesson(False, True))
    gated.request_advance()
    assert gated.request_advance() is False
    assert gated.state == SessionState.viewing


def test_skip_answers_ignored_while_viewing() -> None:
    session = LessonSession(make_lesson(True, True))
    assert session.confirm_skip() is False
    assert session.cancel_skip() is False
    assert session.cursor == 0


def test_navigation_ignored_while_confirming() -> None:
    session = LessonSession(make_lesson(False, True, True))
    session.request_advance()
    session.request_advance()
    assert session.state == SessionState.confirming_skip
    assert session.request_back() is False
    assert session.jump_to(0) is False
    assert session.request_advance() is False
    assert session.cursor == 1


def test_back() -> None:
    session = LessonSession(make_lesson(False, False, False))
    assert session.request_back() is False
    session.request_advance()
    assert session.request_back() is True
    assert session.cursor == 0


def test_jump_forward_requires_validated_predecessor() -> None:
    session = LessonSession(make_lesson(True, True, True))
    assert session.jump_to(2) is False
    assert session.cursor == 0

    session.on_validation_success(1)
    assert session.jump_to(2) is True
    assert session.cursor == 2


def test_jump_back_is_always_allowed() -> None:
    session = LessonSession(make_lesson(False, False, False))
    session.request_advance()
    session.request_advance()
    assert session.jump_to(0) is True
    assert session.cursor == 0


def test_jump_out_of_range_is_rejected() -> None:
    session = LessonSession(make_lesson(False, False))
    assert session.jump_to(-1) is False
    assert session.jump_to(2) is False
    assert session.cursor == 0


def test_validation_success_is_idempotent_and_does_not_move() -> None:
    session = LessonSession(make_lesson(True, True, True))
    assert session.on_validation_success() is True
    assert session.on_validation_success() is False
    assert session.validations == [True, False, False]
    assert session.cursor == 0
    assert session.state == SessionState.viewing


def test_validation_success_out_of_range() -> None:
    session = LessonSession(make_lesson(True))
    assert session.on_validation_success(5) is False
    assert session.validations == [False]


def test_attempts_reset_when_step_changes() -> None:
    session = LessonSession(make_lesson(False, False))
    session.record_attempt()
    session.record_attempt()
    assert session.attempts == 2

    session.jump_to(0)
    assert session.attempts == 2

    session.request_advance()
    assert session.attempts == 0


def test_completion() -> None:
    session = LessonSession(make_lesson(False, True))
    assert session.is_complete is False
    session.request_advance()
    assert session.is_complete is False
    session.on_validation_success()
    assert session.is_complete is True

    plain = LessonSession(make_lesson(False, False))
    plain.request_advance()
    assert plain.is_complete is True


def test_restart_clears_everything() -> None:
    session = LessonSession(make_lesson(True, True))
    session.on_validation_success()
    session.record_attempt()
    session.request_advance()
    session.restart()
    assert session.cursor == 0
    assert session.validations == [False, False]
    assert session.attempts == 0
    assert session.state == SessionState.viewing


def test_skip_message_names_the_step() -> None:
    session = LessonSession(make_lesson(True, True))
    assert '"Step 0"' in session.skip_confirmation_message()
