from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from announcements import router as announcements_router
from auth import router as auth_router
from auth.credentials import CredentialVerifier, JsonFileCredentialVerifier
from core import db
from core.cors import install_cors
from core.errors import register_exception_handlers
from core.settings import Settings
from events import router as events_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    database: db.Database | None = None,
    verifier: CredentialVerifier | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info(
            "api_started prefix=%r db_host=%s db_port=%s users_file=%s",
            settings.api_prefix,
            settings.db_host,
            settings.db_port,
            settings.users_file,
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    # No pool to open: each storage call connects on its own.
    app.state.database = database or db.Database(settings)
    app.state.verifier = verifier or JsonFileCredentialVerifier(settings.users_file)

    register_exception_handlers(app)
    install_cors(app)

    prefix = settings.api_prefix
    app.include_router(auth_router.router, prefix=prefix, tags=["auth"])
    app.include_router(announcements_router.router, prefix=prefix, tags=["announcements"])
    app.include_router(events_router.router, prefix=prefix, tags=["events"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "karts api"}

    return app


app = create_app()


def run() -> None:
    settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("Server starting on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
