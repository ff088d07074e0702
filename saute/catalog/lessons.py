from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional
from pathlib import Path
from saute.catalog.skills import Skill
import json
import logging

logger = logging.getLogger(__name__)

LESSONS_FILE = Path(__file__).resolve().parent / "lessons.json"

class Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    tip: str
    needs_validation: bool = False

class Lesson(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: Skill
    title: str
    description: str
    icon: str
    difficulty: str
    coach_title: str
    steps: List[Step]

    @property
    def requires_validation(self) -> bool:
        return any(step.needs_validation for step in self.steps)

class LessonCatalog:
    """Ordered, read-only collection of lessons keyed by skill"""

    def __init__(self, lessons: List[Lesson]):
        self._lessons: Dict[Skill, Lesson] = {}
        for lesson in lessons:
            if not lesson.steps:
                raise ValueError(f"Lesson '{lesson.skill.value}' has no steps")
            if lesson.skill in self._lessons:
                raise ValueError(f"Duplicate lesson for skill '{lesson.skill.value}'")
            self._lessons[lesson.skill] = lesson

    def all(self) -> List[Lesson]:
        return list(self._lessons.values())

    def get(self, skill) -> Optional[Lesson]:
        resolved = Skill.from_tag(skill)
        if resolved is None:
            return None
        return self._lessons.get(resolved)

    def __len__(self) -> int:
        return len(self._lessons)

def load_lessons(path: Path = LESSONS_FILE) -> LessonCatalog:
    """Load the static lesson catalog from its JSON table"""
    with open(path, encoding="utf-8") as handle:
        raw = json.load(handle)

    catalog = LessonCatalog([Lesson.model_validate(item) for item in raw])
    logger.info(f"Loaded {len(catalog)} lessons from {path.name}")
    return catalog

lesson_catalog = load_lessons()
