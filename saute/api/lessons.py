from fastapi import APIRouter, HTTPException, status
from typing import List
from saute.schemas.lessons import LessonListResponse, LessonResponse
from saute.services.lesson_service import lesson_service

router = APIRouter(prefix="/api/lessons", tags=["lessons"])

@router.get("", response_model=List[LessonListResponse])
async def get_lessons():
    """Get the lesson catalog"""
    return lesson_service.list_lessons()

@router.get("/{skill}", response_model=LessonResponse)
async def get_lesson(skill: str):
    """Get one lesson with all of its steps"""
    lesson = lesson_service.get_lesson(skill)

    if not lesson:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lesson not found"
        )

    return lesson
