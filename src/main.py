from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger
from uvicorn import run

from routers import prefix_router
from settings import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Log the active configuration for the application lifespan.

    :param app: The FastAPI application instance.

    :yields: ``None``
    """
    get_settings().log_startup_config()
    yield
    logger.info("Shutting down identicon API")


app = FastAPI(lifespan=lifespan, title=get_settings().app_title, version=get_settings().app_version)
app.include_router(prefix_router)


def serve() -> None:
    """Start the API server with the configured host and port."""
    settings = get_settings()
    logger.info("Starting server...")
    run(app, host=settings.api_host, port=settings.api_port, reload=False, workers=1)


if __name__ == "__main__":
    serve()
