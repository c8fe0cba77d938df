# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router, comment_router, post_router, user_router, users_router
from .core.config import get_settings
from .di.container import DIContainer
from .domain.exceptions import DomainError
from .infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Opens the MongoDB connection, builds the DI container on top of it and
    closes the connection on shutdown. A store that cannot be reached at
    startup aborts the process.
    """
    connection = MongoConnection(get_settings())
    try:
        await connection.connect()
        await connection.ensure_indexes()
    except Exception as e:
        logger.critical(f"MongoDB connection failed during startup: {e}", exc_info=True)
        raise

    app.state.container = DIContainer(connection)
    logger.info("Application startup complete")

    yield

    app.state.container = None
    connection.close()
    logger.info("Application shutdown complete")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(application: FastAPI) -> None:
    """Map every failure to the ``{"error": message}`` body the client reads."""

    @application.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error_response(exc.status_code, exc.message)

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
        else:
            message = "Invalid request"
        return _error_response(status.HTTP_400_BAD_REQUEST, message)

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = "Route not found" if exc.status_code == 404 and exc.detail == "Not Found" else str(exc.detail)
        return _error_response(exc.status_code, message)

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        content = {"error": "Internal server error"}
        if get_settings().is_development:
            content["detail"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="LinguaLearner API",
        version="1.0.0",
        description="Accounts and community posts for the LinguaLearner app",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials="*" not in settings.allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(application)

    @application.get("/", tags=["health"])
    async def root() -> dict:
        return {"message": "Welcome to the Lingua Learner API!", "status": "healthy"}

    application.include_router(auth_router)
    application.include_router(user_router, prefix="/user")
    application.include_router(users_router, prefix="/users")
    application.include_router(post_router, prefix="/posts")
    application.include_router(comment_router, prefix="/posts")

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Serve the API with uvicorn on the configured port."""
    uvicorn.run("lingualearner.main:app", host="0.0.0.0", port=get_settings().port)


if __name__ == "__main__":
    run()
