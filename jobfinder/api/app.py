"""
FastAPI application factory.

Error kinds map onto status codes here, by exception type only.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobfinder.api.routes import get_runner, router
from jobfinder.api.schemas import error_body
from jobfinder.config.settings import settings
from jobfinder.core.errors import FetchError, InvalidParameter, JobNotFound
from jobfinder.core.runner import Runner

logger = logging.getLogger(__name__)


async def invalid_parameter_handler(request: Request, exc: InvalidParameter) -> JSONResponse:
    return JSONResponse(
        status_code=400, content=error_body(400, str(exc), parameter=exc.name)
    )


async def job_not_found_handler(request: Request, exc: JobNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content=error_body(404, str(exc)))


async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.error(f"Fetch failed for {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=error_body(500, "Failed to fetch data from JobStreet", error=str(exc)),
    )


def create_app(runner: Optional[Runner] = None) -> FastAPI:
    app = FastAPI(title="Job Finder API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(InvalidParameter, invalid_parameter_handler)
    app.add_exception_handler(JobNotFound, job_not_found_handler)
    app.add_exception_handler(FetchError, fetch_error_handler)

    app.include_router(router)

    if runner is not None:
        app.dependency_overrides[get_runner] = lambda: runner

    @app.get("/health")
    async def health_check() -> JSONResponse:
        return JSONResponse(content={"status": "ok"})

    return app
