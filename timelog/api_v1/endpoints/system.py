from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from timelog.core.database import check_db_connection
from timelog.core.settings import settings
from timelog import schemas

router = APIRouter()

@router.get("/health", response_model=schemas.HealthStatus)
async def health_check():
    """
    Report service health and database connectivity.
    Responds with 503 when the database cannot be reached.
    """
    database_connected = await check_db_connection()
    health = schemas.HealthStatus(
        status="healthy" if database_connected else "unhealthy",
        service="timelog-api",
        version=settings.VERSION,
        database_connected=database_connected,
        timestamp=datetime.now(timezone.utc),
    )
    if not database_connected:
        return JSONResponse(status_code=503, content=health.model_dump(mode="json"))
    return health
