import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.agents.generator import generate_workout
from app.config import Settings, get_settings
from app.errors import WorkoutGenerationError
from app.llm.client import ModelClient, get_model_client
from app.models.schemas import ErrorResponse, HealthResponse

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Basketball Workout Generator", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WorkoutGenerationError)
async def workout_error_handler(request: Request, exc: WorkoutGenerationError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse()


@app.post(
    "/api/generate-workout",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def api_generate_workout(
    request: Request,
    client: ModelClient = Depends(get_model_client),
    settings: Settings = Depends(get_settings),
):
    """Generate a personalized basketball workout plan.

    Request body
    - `TrainingProfile` JSON. Read raw so that missing fields answer 400
      with the standard error payload instead of a 422.

    Response
    - The plan object exactly as the model produced it.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    return await generate_workout(payload, client, timeout_seconds=settings.api_timeout_seconds)


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
