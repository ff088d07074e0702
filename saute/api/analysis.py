from fastapi import APIRouter, Depends
from saute.exceptions import AnalysisError, CoachError
from saute.schemas.analysis import AnalysisRequest, AnalysisResponse, ErrorResponse
from saute.services.analysis_service import AnalysisService, analysis_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["analysis"])

def get_analysis_service() -> AnalysisService:
    return analysis_service

@router.post(
    "/analyze-cooking",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)
async def analyze_cooking(
    request: AnalysisRequest,
    service: AnalysisService = Depends(get_analysis_service)
):
    """Analyze one captured frame of the learner's technique"""
    try:
        return await service.analyze(request)
    except CoachError:
        raise
    except Exception as e:
        logger.error(f"Error analyzing image: {str(e)}")
        raise AnalysisError() from e
