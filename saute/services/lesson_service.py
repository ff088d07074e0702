from typing import List, Optional
from saute.catalog.lessons import Lesson, LessonCatalog, lesson_catalog
from saute.schemas.lessons import LessonListResponse, LessonResponse, StepResponse

class LessonService:

    def __init__(self, catalog: Optional[LessonCatalog] = None):
        self.catalog = catalog or lesson_catalog

    @staticmethod
    def _summary_fields(lesson: Lesson) -> dict:
        return dict(
            skill=lesson.skill.value,
            title=lesson.title,
            description=lesson.description,
            icon=lesson.icon,
            difficulty=lesson.difficulty,
            coach_title=lesson.coach_title,
            total_steps=len(lesson.steps),
            requires_validation=lesson.requires_validation
        )

    def list_lessons(self) -> List[LessonListResponse]:
        """Lesson cards in catalog order"""
        return [LessonListResponse(**self._summary_fields(lesson)) for lesson in self.catalog.all()]

    def get_lesson(self, skill: str) -> Optional[LessonResponse]:
        lesson = self.catalog.get(skill)
        if not lesson:
            return None

        steps = [
            StepResponse(
                index=index,
                title=step.title,
                content=step.content,
                tip=step.tip,
                needs_validation=step.needs_validation
            ) for index, step in enumerate(lesson.steps)
        ]
        return LessonResponse(**self._summary_fields(lesson), steps=steps)

lesson_service = LessonService()
