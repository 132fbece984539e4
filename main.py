from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.apis.flashcards.main import router as flashcards_router

import uvicorn

STATIC_DIR = Path(__file__).resolve().parent / "app" / "static"

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.app.name, version=settings.app.version)

    # max_age=None makes it a browser-session cookie: the key is gone
    # once the browser session ends.
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.app.session_secret,
        session_cookie="flashcards_session",
        max_age=None,
        same_site="strict",
        https_only=False,
    )

    app.include_router(flashcards_router)

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "app": settings.app.name,
            "version": settings.app.version,
        }

    # Mounted last so API routes take precedence
    app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="ui")

    logger.info("App created (model %s)", settings.flashcards.model_name)
    return app


app = create_app()


if __name__ == "__main__":
    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.app.port,
            reload=not settings.app.is_production,
        )
    except Exception as e:
        print(f"An error occurred when starting the server: {e}.")
