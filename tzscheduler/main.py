import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import ALLOWED_ORIGINS, ENVIRONMENT, HOST, LOG_LEVEL, PORT
from .database import init_db
from .domain.participants.router import router as participants_router
from .domain.schedules.router import router as schedules_router
from .domain.suggestions.router import router as suggestions_router
from .exceptions import SchedulerError, ValidationError
from .shared.responses import failure
from .shared.validators import issues_from_errors

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        init_db()
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Time Zone Scheduler API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(SchedulerError)
async def scheduler_exception_handler(request: Request, exc: SchedulerError):
    """Render every service error as the failure envelope with its wire code"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc.code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} - {exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=failure(exc.to_dict()))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and query values share the BAD_REQUEST envelope"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    issues = issues_from_errors(exc.errors(), skip_prefix=("body", "query", "path"))
    error = ValidationError(issues[0]["message"] if issues else "Invalid request", issues)
    return JSONResponse(status_code=error.status_code, content=failure(error.to_dict()))


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(schedules_router)
app.include_router(participants_router)
app.include_router(suggestions_router)


@app.get("/health")
def health():
    return {"status": "healthy"}


def run() -> None:
    import uvicorn

    if ENVIRONMENT == "production":
        uvicorn.run("tzscheduler.main:app", host=HOST, port=PORT, workers=4)
    else:
        # reload=True is incompatible with workers > 1
        uvicorn.run("tzscheduler.main:app", host=HOST, port=PORT, reload=True)


if __name__ == "__main__":
    run()
