from pydantic import BaseModel
from typing import List, Optional

class StepResponse(BaseModel):
    index: int
    title: str
    content: str
    tip: str
    needs_validation: bool

class LessonListResponse(BaseModel):
    skill: str
    title: str
    description: str
    icon: str
    difficulty: str
    coach_title: str
    total_steps: int
    requires_validation: bool

class LessonResponse(LessonListResponse):
    steps: List[StepResponse]

class SessionSnapshot(BaseModel):
    skill: str
    state: str
    current_step: int
    total_steps: int
    step: StepResponse
    validations: List[bool]
    validated_count: int
    attempts: int
    analyzing: bool
    is_complete: bool
    progress_percent: int
    confirmation_message: Optional[str] = None
