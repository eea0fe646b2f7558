# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, user_router, blog_router
from .api.error_handlers import register_error_handlers
from .api.middleware import request_logger, token_extractor
from .core.config import get_settings
from .di.container import get_container
from .domain.exceptions import StorageError
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates storage indexes on startup and closes the MongoDB client on
    shutdown. An unreachable database does not stop the app from starting;
    requests will fail with StorageError until it is back.
    """
    try:
        user_repository = get_container().get(UserRepository)
        await user_repository.ensure_indexes()
        logger.info("Storage indexes ensured")
    except StorageError as e:
        logger.error(f"Failed to ensure storage indexes: {e}")

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging configuration
    - Request logging and bearer token extraction middleware
    - CORS middleware configuration
    - Error handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    application = FastAPI(
        title="Blog List API",
        version="1.0.0",
        description="Blog list backend with token authentication and blog statistics",
        lifespan=lifespan
    )

    # Middleware added last runs first: logging wraps token extraction
    application.middleware("http")(token_extractor)
    application.middleware("http")(request_logger)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/login")
    application.include_router(user_router, prefix="/api/v1/users")
    application.include_router(blog_router, prefix="/api/v1/blogs")

    return application


# Create application instance
app = create_application()
