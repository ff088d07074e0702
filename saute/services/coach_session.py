from typing import NamedTuple, Optional
from saute.catalog.lessons import Lesson
from saute.exceptions import InvalidInputError
from saute.schemas.analysis import AnalysisRequest, AnalysisResponse
from saute.schemas.lessons import SessionSnapshot, StepResponse
from saute.services.analysis_service import AnalysisService, analysis_service
from saute.services.lesson_session import LessonSession, SessionState
import logging

logger = logging.getLogger(__name__)

class PendingCapture(NamedTuple):
    step_index: int
    request: AnalysisRequest

class CoachSession:
    """
    A lesson session with the vision coach attached.

    Owns the "analyzing" guard: at most one analysis call is in flight per
    session, further captures are rejected until it returns.
    """

    def __init__(self, lesson: Lesson, service: Optional[AnalysisService] = None):
        self.lesson_session = LessonSession(lesson)
        self.service = service or analysis_service
        self.analyzing = False

    @property
    def lesson(self) -> Lesson:
        return self.lesson_session.lesson

    def step_context(self, index: int) -> str:
        step = self.lesson.steps[index]
        return f"Currently learning: {step.title}. {step.content}"

    def start_capture(self, image: str) -> Optional[PendingCapture]:
        """
        Claim the analyzing guard and count the attempt for the current step.
        Returns None when another analysis is still running.
        """
        if self.analyzing:
            logger.info(f"[CAPTURE] {self.lesson.skill.value} analysis already in flight, ignoring capture")
            return None

        if not image:
            raise InvalidInputError()

        session = self.lesson_session
        step_index = session.cursor
        step = session.current_step
        attempt = session.record_attempt()

        request = AnalysisRequest(
            image=image,
            context=self.step_context(step_index),
            skill=self.lesson.skill.value,
            step_title=step.title,
            require_validation=step.needs_validation,
            attempts=attempt
        )

        self.analyzing = True
        return PendingCapture(step_index=step_index, request=request)

    async def finish_capture(self, pending: PendingCapture) -> AnalysisResponse:
        """Run a started capture and validate its step on approval"""
        try:
            result = await self.service.analyze(pending.request)
        finally:
            self.analyzing = False

        if pending.request.require_validation and result.is_approved:
            self.lesson_session.on_validation_success(pending.step_index)

        return result

    async def capture_and_analyze(self, image: str) -> Optional[AnalysisResponse]:
        """
        Analyze a captured frame for the current step.
        Returns None when another analysis is still running.
        """
        pending = self.start_capture(image)
        if pending is None:
            return None
        return await self.finish_capture(pending)

    def snapshot(self) -> SessionSnapshot:
        session = self.lesson_session
        step = session.current_step
        total = len(session.steps)

        confirmation_message = None
        if session.state == SessionState.confirming_skip:
            confirmation_message = session.skip_confirmation_message()

        return SessionSnapshot(
            skill=self.lesson.skill.value,
            state=session.state.value,
            current_step=session.cursor,
            total_steps=total,
            step=StepResponse(
                index=session.cursor,
                title=step.title,
                content=step.content,
                tip=step.tip,
                needs_validation=step.needs_validation
            ),
            validations=list(session.validations),
            validated_count=session.validated_count,
            attempts=session.attempts,
            analyzing=self.analyzing,
            is_complete=session.is_complete,
            progress_percent=round((session.cursor + 1) / total * 100),
            confirmation_message=confirmation_message
        )
