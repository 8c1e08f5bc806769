"""
Cricket Scorer - ball-by-ball scoring API
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import connect_db
from app.errors import ScoringError
from app.api.schemas import FIELD_MESSAGES, LENGTH_MESSAGES
from app.api.scoring import router as scoring_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Cricket Scorer",
    description="Ball-by-ball scoring with batting and bowling statistics",
    version="0.1.0",
)

default_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
default_origins.extend(settings.CORS_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scoring_router)


def _error_field(err) -> str:
    # loc looks like ("body", "runsScored"); a missing or unparseable body has no field part
    if err.get("type") == "json_invalid":
        return "body"
    fields = [str(part) for part in err.get("loc", ()) if part != "body"]
    return fields[0] if fields else "body"


def _error_message(field: str, err) -> str:
    if err.get("type") == "string_too_long" and field in LENGTH_MESSAGES:
        return LENGTH_MESSAGES[field]
    return FIELD_MESSAGES.get(field, err.get("msg", "Invalid value"))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        field = _error_field(err)
        errors.append({"field": field, "message": _error_message(field, err)})
    return JSONResponse(status_code=400, content={"errors": errors})


@app.exception_handler(ScoringError)
async def scoring_error_handler(request: Request, exc: ScoringError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.on_event("startup")
def startup_event():
    """Connect to the database on startup"""
    connect_db()


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "Cricket Scorer API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
