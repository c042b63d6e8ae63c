"""Stitch Prompt Optimizer Server"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .logging_config import setup_logging
from .api import guide, health, optimize


def create_app() -> FastAPI:
    app = FastAPI(
        title="Stitch Prompt Optimizer",
        description="Optimizes UI-generation prompts against the Stitch prompt guide",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        expose_headers=[optimize.SOURCE_HEADER, optimize.FALLBACK_HEADER],
    )

    app.include_router(optimize.router)
    app.include_router(guide.router)
    app.include_router(health.router)

    return app


setup_logging()
app = create_app()
