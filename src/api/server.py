"""FastAPI application factory for the snippet sharing service."""

from __future__ import annotations

import os

from fastapi import FastAPI

from ..exception_handler import ErrorHandler
from ..snippet import init_registry
from .route import router
from .service import ApiSettings


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or ApiSettings.from_env()
    error_handler = ErrorHandler(settings.log_level)
    init_registry()

    app = FastAPI(
        title="Snippet Sharing API",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.error_handler = error_handler
    app.include_router(router)

    return app


app = create_app()


__all__ = ["app", "create_app"]


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
