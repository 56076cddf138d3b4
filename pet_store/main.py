from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import logging

from . import models  # noqa: F401  registers tables on SQLModel.metadata
from .api import pet_store_router
from .core import limiter
from .core.config import settings
from .core.exceptions import NotFound, OwnershipMismatch
from .core.logging_config import setup_logging
from .database import create_db_and_tables

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# Setup rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(OwnershipMismatch)
async def ownership_mismatch_handler(request: Request, exc: OwnershipMismatch):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


# Create tables on startup
@app.on_event("startup")
def on_startup():
    create_db_and_tables()


# Include routers
app.include_router(
    pet_store_router,
    prefix="/pet_store",
    tags=["Pet Stores"]
)


@app.get("/")
def read_root():
    return {"message": "Welcome to Pet Store API"}
