"""FastAPI application factory."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from codeviz import __version__
from codeviz.web.api import router


def create_app(allowed_root: Path | None = None) -> FastAPI:
    app = FastAPI(title="codeviz", version=__version__)
    app.state.allowed_root = Path(allowed_root) if allowed_root else None

    # The browser front end is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def no_cache_api(request: Request, call_next):
        response: Response = await call_next(request)
        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store"
        return response

    app.include_router(router)
    return app
