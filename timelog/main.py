import logging
from fastapi import FastAPI, APIRouter, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from timelog.core.database import init_db
from timelog.core.settings import settings
from timelog.api_v1.endpoints import auth, time_logs, day, system
from timelog.scheduling.errors import (
    DataIntegrityError,
    GapTooSmall,
    InvalidRange,
    OccupiedSlot,
    Overlap,
    SchedulingError,
)
from timelog import schemas

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
)
logger = logging.getLogger(__name__)

SCHEDULING_ERROR_STATUS = {
    InvalidRange: status.HTTP_400_BAD_REQUEST,
    Overlap: status.HTTP_409_CONFLICT,
    OccupiedSlot: status.HTTP_409_CONFLICT,
    GapTooSmall: status.HTTP_422_UNPROCESSABLE_ENTITY,
    DataIntegrityError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting up TimeLog API Service...")
    try:
        await init_db()
        logger.info("Database initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    yield

    # Shutdown
    logger.info("Shutting down TimeLog API Service...")

app = FastAPI(
    title="TimeLog API Service",
    description="Log labelled time intervals across a day and view utilization totals and a timeline.",
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(SchedulingError)
async def scheduling_error_handler(request: Request, exc: SchedulingError):
    status_code = SCHEDULING_ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    conflicts = []
    if isinstance(exc, Overlap):
        conflicts = [str(c.id) for c in exc.conflicts]
    elif isinstance(exc, OccupiedSlot):
        conflicts = [str(exc.interval.id)]
    # DataIntegrityError violations are logged where they are detected
    body = schemas.SchedulingErrorResponse(code=exc.code, detail=exc.message, conflicts=conflicts)
    return JSONResponse(status_code=status_code, content=body.model_dump())

# Create API v1 router
api_v1_router = APIRouter(prefix=settings.API_V1_STR)

# Include all endpoint routers
api_v1_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_v1_router.include_router(time_logs.router, prefix="/time-logs", tags=["Time Logs"])
api_v1_router.include_router(day.router, prefix="/day", tags=["Daily Data"])

# Include the v1 router in the main app
app.include_router(api_v1_router)
app.include_router(system.router, tags=["Health"])

# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "Welcome to the TimeLog API Service",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_STR}/docs"
    }

def run():
    import uvicorn
    logger.info("Starting Uvicorn server for development...")
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
