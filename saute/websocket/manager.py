from typing import Dict, Optional
from fastapi import WebSocket
from saute.catalog.lessons import Lesson
from saute.services.analysis_service import AnalysisService
from saute.services.coach_session import CoachSession
import uuid
import json
import logging

logger = logging.getLogger(__name__)

class LessonSessionManager:
    def __init__(self):
        # connection_id -> coach session, alive only while the socket is open
        self.active_sessions: Dict[str, CoachSession] = {}

    async def connect(self, websocket: WebSocket, lesson: Lesson,
                      service: Optional[AnalysisService] = None) -> str:
        # Accept WebSocket connection and start a fresh lesson session
        await websocket.accept()
        connection_id = uuid.uuid4().hex
        self.active_sessions[connection_id] = CoachSession(lesson, service)
        logger.info(f"Lesson session {connection_id} opened for {lesson.skill.value}")
        return connection_id

    def disconnect(self, connection_id: str):
        # Drop the session; nothing about it is kept
        if connection_id in self.active_sessions:
            del self.active_sessions[connection_id]
            logger.info(f"Lesson session {connection_id} closed")

    def get(self, connection_id: str) -> Optional[CoachSession]:
        return self.active_sessions.get(connection_id)

    async def send(self, websocket: WebSocket, message: dict):
        await websocket.send_text(json.dumps(message))

lesson_session_manager = LessonSessionManager()
