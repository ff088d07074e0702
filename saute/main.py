from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from saute import __version__
from saute.config import settings
from saute.exceptions import AnalysisError, CoachError, InvalidInputError
from saute.catalog.lessons import lesson_catalog
from saute.api import analysis as analysis_api, lessons as lessons_api, websocket as websocket_api
import logging

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Sauté Cooking Coach API",
    description="Step-by-step cooking lessons with AI vision technique validation",
    version=__version__
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(CoachError)
async def coach_error_handler(request: Request, exc: CoachError):
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies answer with the {"error"} shape too
    image_invalid = any(tuple(error.get("loc", ()))[:2] == ("body", "image") for error in exc.errors())
    error = InvalidInputError("Invalid image provided") if image_invalid else AnalysisError()
    logger.error(f"Invalid request on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=error.status_code, content={"error": error.message})

# Include routers
app.include_router(lessons_api.router)
app.include_router(analysis_api.router)
app.include_router(websocket_api.router)

@app.get("/")
async def root():
    return {
        "message": "Sauté Cooking Coach API",
        "lessons": len(lesson_catalog),
        "features": [
            "Static lesson catalog with ten cooking skills",
            "AI vision feedback on captured technique",
            "Step gating with coach validation over WebSocket sessions"
        ]
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy", "model_configured": bool(settings.openai_api_key)}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
