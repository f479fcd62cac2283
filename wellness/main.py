from contextlib import asynccontextmanager
import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wellness import __version__
from wellness.database import init_db, SessionLocal
from wellness.exceptions import (
    ActivityNotFoundException, GoalNotFoundException, HabitNotFoundException,
    InvalidDateException, ValidationException, DataAccessException
)
from wellness.routes.catalog import router as catalog_router
from wellness.routes.happiness import router as happiness_router
from wellness.routes.tracking import router as tracking_router
from wellness.services.catalog_service import CatalogService
from wellness.services.scheduler_service import start_scheduler, stop_scheduler
from wellness.constants import (
    LOG_DIR, LOG_FILE, DEFAULT_LOG_DIRECTORY_DEV, CORS_ALLOWED_ORIGINS
)

# Create log directory if it doesn't exist (for development)
try:
    Path(LOG_DIR).mkdir(parents=True, exist_ok=True)
    log_path = Path(LOG_DIR) / LOG_FILE
except PermissionError:
    # Fallback to local directory if no permissions for /var/log
    Path(DEFAULT_LOG_DIRECTORY_DEV).mkdir(parents=True, exist_ok=True)
    log_path = Path(DEFAULT_LOG_DIRECTORY_DEV) / LOG_FILE

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(log_path),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger("wellness")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    db = SessionLocal()
    try:
        CatalogService(db).seed_defaults()
    finally:
        db.close()
    logger.info(f"Wellness API started. Logging to: {log_path}")
    start_scheduler()
    yield
    logger.info("Shutting down Wellness API")
    stop_scheduler()


app = FastAPI(
    title="Wellness API",
    description="Daily happiness scores from moods, activities, goals and habits",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ActivityNotFoundException)
@app.exception_handler(GoalNotFoundException)
@app.exception_handler(HabitNotFoundException)
async def not_found_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(InvalidDateException)
@app.exception_handler(ValidationException)
async def bad_request_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(DataAccessException)
async def data_access_handler(request: Request, exc: DataAccessException):
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Score data is temporarily unavailable"}
    )


# Health check (no auth required)
@app.get("/")
async def root():
    return {"message": "Wellness API", "status": "active"}


app.include_router(happiness_router)
app.include_router(tracking_router)
app.include_router(catalog_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("wellness.main:app", host="0.0.0.0", port=8000, reload=False)
