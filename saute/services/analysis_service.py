from datetime import datetime, timezone
from typing import Optional
from saute.exceptions import InvalidInputError
from saute.schemas.analysis import AnalysisRequest, AnalysisResponse
from saute.services.prompt_builder import build_analysis_prompt
from saute.services.validation_parser import parse_validation_result
from saute.utils.vision_client import VisionModelClient, vision_client
import logging

logger = logging.getLogger(__name__)

class AnalysisService:

    def __init__(self, client: Optional[VisionModelClient] = None):
        self.client = client or vision_client

    async def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        """Build the skill prompt, call the vision model once and parse its verdict"""
        if not request.image:
            raise InvalidInputError()

        prompt = build_analysis_prompt(
            skill=request.skill,
            context=request.context,
            step_title=request.step_title,
            require_validation=request.require_validation,
            attempts=request.attempts
        )

        raw_feedback = await self.client.analyze_image(request.image, prompt)
        parsed = parse_validation_result(raw_feedback, request.require_validation)

        response = AnalysisResponse(
            feedback=parsed.feedback,
            skill=request.skill,
            timestamp=datetime.now(timezone.utc)
        )
        if parsed.verdict is not None:
            response.is_approved = parsed.verdict.approved
            response.confidence = parsed.verdict.confidence
            logger.info(
                f"[ANALYZE] {request.skill} '{request.step_title}' attempt {request.attempts or 1}: "
                f"approved={parsed.verdict.approved} confidence={parsed.verdict.confidence}"
            )

        return response

analysis_service = AnalysisService()
