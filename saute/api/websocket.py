from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState
from typing import Set
from saute.api.analysis import get_analysis_service
from saute.catalog.lessons import lesson_catalog
from saute.exceptions import AnalysisError, CoachError
from saute.services.analysis_service import AnalysisService
from saute.services.coach_session import CoachSession, PendingCapture
from saute.websocket.manager import lesson_session_manager
import asyncio
import json
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ws", tags=["websocket"])

UNKNOWN_LESSON_CLOSE_CODE = 4004

def state_message(session: CoachSession) -> dict:
    return {"type": "state", "session": session.snapshot().model_dump()}

def error_message(message: str) -> dict:
    return {"type": "error", "error": message}

async def run_analysis(websocket: WebSocket, session: CoachSession, pending: PendingCapture):
    """Finish one capture off the receive loop and push its outcome to the client"""
    try:
        result = await session.finish_capture(pending)
        reply = {
            "type": "analysis",
            "result": result.model_dump(mode="json", by_alias=True, exclude_none=True),
            "session": session.snapshot().model_dump()
        }
    except CoachError as e:
        reply = error_message(e.message)
    except Exception as e:
        logger.error(f"Analysis failed in lesson session: {str(e)}")
        reply = error_message(AnalysisError().message)

    if websocket.client_state != WebSocketState.CONNECTED:
        logger.info("Lesson session closed before its analysis finished, dropping result")
        return
    await lesson_session_manager.send(websocket, reply)

async def handle_action(websocket: WebSocket, session: CoachSession, message: dict,
                        pending_tasks: Set[asyncio.Task]):
    """Apply one client action to the lesson session and send the reply"""
    progression = session.lesson_session
    action = message.get("action")

    if action == "state":
        pass
    elif action == "advance":
        progression.request_advance()
    elif action == "back":
        progression.request_back()
    elif action == "jump":
        step = message.get("step")
        if not isinstance(step, int) or isinstance(step, bool):
            await lesson_session_manager.send(websocket, error_message("Jump requires an integer 'step'"))
            return
        progression.jump_to(step)
    elif action == "confirm_skip":
        progression.confirm_skip()
    elif action == "cancel_skip":
        progression.cancel_skip()
    elif action == "restart":
        progression.restart()
    elif action == "analyze":
        try:
            pending = session.start_capture(message.get("image"))
        except CoachError as e:
            await lesson_session_manager.send(websocket, error_message(e.message))
            return
        if pending is None:
            await lesson_session_manager.send(websocket, error_message("Analysis already in progress"))
            return

        # State goes out first so the client sees analyzing=true before the result
        await lesson_session_manager.send(websocket, state_message(session))
        task = asyncio.create_task(run_analysis(websocket, session, pending))
        pending_tasks.add(task)
        task.add_done_callback(pending_tasks.discard)
        return
    else:
        await lesson_session_manager.send(websocket, error_message(f"Unknown action '{action}'"))
        return

    await lesson_session_manager.send(websocket, state_message(session))

@router.websocket("/lessons/{skill}")
async def lesson_session_socket(
    websocket: WebSocket,
    skill: str,
    service: AnalysisService = Depends(get_analysis_service)
):
    # websocket endpoint holding one lesson session for the lifetime of the view
    lesson = lesson_catalog.get(skill)
    if not lesson:
        await websocket.close(code=UNKNOWN_LESSON_CLOSE_CODE, reason="Lesson not found")
        return

    connection_id = await lesson_session_manager.connect(websocket, lesson, service)
    session = lesson_session_manager.get(connection_id)
    pending_tasks: Set[asyncio.Task] = set()

    try:
        await lesson_session_manager.send(websocket, state_message(session))
        while True:
            data = await websocket.receive_text()

            if data == 'ping':
                await websocket.send_text('pong')
                continue

            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await lesson_session_manager.send(websocket, error_message("Invalid message"))
                continue
            if not isinstance(message, dict):
                await lesson_session_manager.send(websocket, error_message("Invalid message"))
                continue

            await handle_action(websocket, session, message, pending_tasks)
    except WebSocketDisconnect:
        logger.info(f"Websocket disconnected for lesson session: {connection_id}")
    finally:
        # In-flight model calls run to completion; their results are dropped
        if pending_tasks:
            await asyncio.gather(*pending_tasks)
        lesson_session_manager.disconnect(connection_id)
