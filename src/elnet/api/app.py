"""
FastAPI application factory.

Usage::

    uvicorn elnet.api.app:app --reload
    python -m elnet.api
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import elnet
from elnet.api.models import HealthResponse
from elnet.api.routes import router
from elnet.core.errors import ElasticNetworkError


def _bad_request(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=400, content={"ok": False, "detail": str(exc)})


def create_app(allow_origins=("*",)) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        allow_origins: Origins accepted by the CORS middleware.
    """
    application = FastAPI(
        title="elnet API",
        version=elnet.__version__,
        description="Elastic network bonds for posted coordinates.",
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(allow_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Fatal network errors and queries before any build are client errors.
    application.add_exception_handler(ElasticNetworkError, _bad_request)
    application.add_exception_handler(RuntimeError, _bad_request)

    @application.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(version=elnet.__version__)

    application.include_router(router, prefix="/api")
    return application


app = create_app()
