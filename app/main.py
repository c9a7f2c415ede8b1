# app/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.logging import setup_logging
from app.api.v1.api import api_router


def create_application() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
    )

    # ---------- CORS ----------
    origins = [str(origin).rstrip("/") for origin in settings.backend_cors_origins]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- STATIC FILES ----------
    # Client scripts, e.g. /static/js/map.js
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    # ---------- HEALTH ----------
    @app.get("/healthz", include_in_schema=False)
    def healthz():
        return {"status": "ok"}

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_application()
