# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Enerlab Jobs API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    EnerlabJobsException,
    available_jobs,
    enerlab_jobs_exception_handler,
    not_found_handler,
    unexpected_exception_handler,
)
from app.routers import jobs
from core.jobs.registry import list_slugs

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Settings are already validated by the time this runs; importing
    app.config fails fast when Slack isn't configured.
    """
    logger.info(f"Starting Enerlab Jobs API in {settings.ENVIRONMENT} mode")
    logger.info(f"Open positions: {', '.join(list_slugs())}")
    logger.info(f"Notifications go to Slack channel {settings.SLACK_CHANNEL_ID}")

    yield

    logger.info("Shutting down Enerlab Jobs API")


# Create FastAPI application
app = FastAPI(
    title="Enerlab Jobs API",
    description="""
## Job Application Challenges

Each open position publishes a small challenge. Read it, then submit your
application as JSON to the same URL.

```bash
# 1. Read the challenge
curl http://localhost:3000/intern-junior/apply

# 2. Apply
curl -X POST http://localhost:3000/intern-junior/apply \\
  -H "Content-Type: application/json" \\
  -d '{"fullName": "...", "email": "...", ...}'
```
""",
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Jobs",
            "description": "Job challenges and applications",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(EnerlabJobsException, enerlab_jobs_exception_handler)
app.add_exception_handler(StarletteHTTPException, not_found_handler)
app.add_exception_handler(Exception, unexpected_exception_handler)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - lists open positions and how to apply.
    """
    return {
        "message": "Welcome to Enerlab Jobs API",
        "availableJobs": available_jobs(),
        "usage": (
            "GET /{slug}/apply to get challenge instructions, "
            "POST /{slug}/apply to submit your solution"
        ),
    }


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    jobs.router,
    tags=["Jobs"]
)


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
