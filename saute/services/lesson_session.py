from typing import List, Optional
from saute.catalog.lessons import Lesson, Step
import enum
import logging

logger = logging.getLogger(__name__)

class SessionState(str, enum.Enum):
    viewing = "viewing"
    confirming_skip = "confirming_skip"

class LessonSession:
    """
    Progression through one lesson for one learner view.

    Tracks the current step, which steps have been validated by the coach and
    how many analysis attempts were made on the current step. Requests that are
    not allowed in the current state are ignored and return False.
    """

    def __init__(self, lesson: Lesson):
        self.lesson = lesson
        self.cursor = 0
        self.state = SessionState.viewing
        self.validations: List[bool] = [False] * len(lesson.steps)
        self.attempts = 0

    @property
    def steps(self) -> List[Step]:
        return self.lesson.steps

    @property
    def current_step(self) -> Step:
        return self.steps[self.cursor]

    @property
    def is_last_step(self) -> bool:
        return self.cursor == len(self.steps) - 1

    @property
    def validated_count(self) -> int:
        return sum(1 for validated in self.validations if validated)

    @property
    def is_complete(self) -> bool:
        return self.is_last_step and (
            not self.current_step.needs_validation or self.validations[self.cursor]
        )

    def can_jump_to(self, index: int) -> bool:
        """A step is reachable when it is behind us or its predecessor is validated"""
        if index < 0 or index >= len(self.steps):
            return False
        return index <= self.cursor or (index > 0 and self.validations[index - 1])

    def _move_to(self, index: int):
        if index != self.cursor:
            self.attempts = 0
        self.cursor = index
        self.state = SessionState.viewing

    def request_advance(self) -> bool:
        if self.state != SessionState.viewing or self.is_last_step:
            return False

        if self.current_step.needs_validation and not self.validations[self.cursor]:
            self.state = SessionState.confirming_skip
            logger.info(f"[ADVANCE] {self.lesson.skill.value} step {self.cursor} not validated, asking to skip")
            return True

        self._move_to(self.cursor + 1)
        return True

    def confirm_skip(self) -> bool:
        if self.state != SessionState.confirming_skip:
            return False
        self._move_to(self.cursor + 1)
        return True

    def cancel_skip(self) -> bool:
        if self.state != SessionState.confirming_skip:
            return False
        self.state = SessionState.viewing
        return True

    def request_back(self) -> bool:
        if self.state != SessionState.viewing or self.cursor == 0:
            return False
        self._move_to(self.cursor - 1)
        return True

    def jump_to(self, index: int) -> bool:
        if self.state != SessionState.viewing or not self.can_jump_to(index):
            return False
        self._move_to(index)
        return True

    def on_validation_success(self, index: Optional[int] = None) -> bool:
        """Mark a step as validated. Never moves the cursor."""
        if index is None:
            index = self.cursor
        if index < 0 or index >= len(self.steps):
            return False
        if self.validations[index]:
            return False

        self.validations[index] = True
        logger.info(f"[VALIDATED] {self.lesson.skill.value} step {index} ({self.steps[index].title})")
        return True

    def record_attempt(self) -> int:
        self.attempts += 1
        return self.attempts

    def restart(self):
        self.cursor = 0
        self.state = SessionState.viewing
        self.validations = [False] * len(self.steps)
        self.attempts = 0

    def skip_confirmation_message(self) -> str:
        return (
            f"You haven't validated your technique for \"{self.current_step.title}\" yet. "
            "The AI coach can provide valuable feedback to help you improve. "
            "Are you sure you want to skip to the next step?"
        )
