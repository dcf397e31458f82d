from contextlib import asynccontextmanager

from fastapi import FastAPI

from api import declension
from bootstrap import build_service
from core.config import Settings, settings
from core.errors import AppErrorException, register_error_handlers
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from languages.russian import DeclensionService

# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


def create_app(config: Settings = settings, service: DeclensionService | None = None) -> FastAPI:
    """Build the API; the lexicon is loaded once at startup unless a service is supplied."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("startup", message="Declension API starting up")
        if service is not None:
            app.state.declension = service
        else:
            result = build_service(config)
            if result.is_err():
                log.error("lexicon_unavailable", error=str(result.unwrap_err()))
                raise AppErrorException(result.unwrap_err())
            app.state.declension = result.unwrap()
        log.info("lexicon_ready", **app.state.declension.store.summary())
        yield
        log.info("shutdown", message="Declension API shutting down")

    app = FastAPI(
        title="Lingua Declension API",
        description="Russian noun, adjective and pronoun declension from a curated lexicon",
        version="0.1.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(declension.router, prefix="/api/declension", tags=["declension"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": "0.1.0"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
