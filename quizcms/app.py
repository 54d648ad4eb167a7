"""FastAPI application factory."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quizcms.config import Settings
from quizcms.database import Database
from quizcms.logging_setup import setup_console_logging
from quizcms.routes import auth, books, chapters, examinations, quizzes, subjects, users
from quizcms.services.image_service import ImageStorage
from quizcms.services.password_cipher import PasswordCipher

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and the collaborators it owns."""
    if settings is None:
        settings = Settings.from_env()
    setup_console_logging(settings.log_level)
    settings.prepare_dirs()

    app = FastAPI(title="Quiz CMS API")
    app.state.settings = settings
    app.state.database = Database(settings.database_url)
    app.state.image_storage = ImageStorage.from_settings(settings)
    app.state.cipher = PasswordCipher(settings.secret_key)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Startup/shutdown events
    @app.on_event("startup")
    def startup_events() -> None:
        """Initialize database on startup."""
        app.state.database.init_db()
        logger.info(f"Database ready at {settings.database_url}")

    @app.on_event("shutdown")
    def shutdown_events() -> None:
        app.state.database.dispose()

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    # Include routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(users.schools_router)
    app.include_router(subjects.router)
    app.include_router(books.router)
    app.include_router(chapters.router)
    app.include_router(quizzes.router)
    app.include_router(examinations.router)

    return app
