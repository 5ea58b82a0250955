import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from scholomance.config import Settings
from scholomance.generative import GenerativeClient
from scholomance.routes import router
from scholomance.sessions import SessionStore

load_dotenv(Path(__file__).parent.parent / ".env")


def create_app(
    settings: Settings | None = None,
    client: GenerativeClient | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.getLogger("scholomance").setLevel(settings.log_level.upper())

    app = FastAPI(title="Scholomance")
    app.state.settings = settings
    app.state.client = client or GenerativeClient(settings.transport())
    app.state.sessions = SessionStore()
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (reads settings from the environment)
app = create_app()
