"""
graymap - Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from graymap import __version__
from graymap.api.exceptions import register_exception_handlers
from graymap.api.routers import image, search, system, transform
from graymap.config import get_settings
from graymap.core.constants import SystemConstants
from graymap.core.image_manager import ImageManager

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting graymap server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    image_manager = ImageManager(
        max_size_mb=settings.image.max_memory_mb,
        max_images=settings.image.max_images,
    )

    app.state.image_manager = image_manager
    app.state.config = settings.to_dict()
    app.state.debug = settings.system.debug

    yield

    logger.info("Shutting down graymap server...")
    try:
        image_manager.cleanup()
    except Exception as e:
        logger.error(f"Error during cleanup: {e}")

    logger.info("Server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="graymap",
    description="8-bit grayscale image processing",
    version=__version__,
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

app.include_router(image.router, prefix="/api/image", tags=["Image"])
app.include_router(transform.router, prefix="/api/transform", tags=["Transform"])
app.include_router(search.router, prefix="/api/search", tags=["Search"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


@app.get("/")
async def root():
    return {
        "name": "graymap",
        "status": "running",
        "version": __version__,
        "endpoints": {
            "image": "/api/image",
            "transform": "/api/transform",
            "search": "/api/search",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "image_manager": hasattr(app.state, "image_manager")
            and app.state.image_manager is not None,
        },
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {str(exc)}"})


def run():
    """Run the API server with uvicorn"""
    server_config = uvicorn.Config(
        "graymap.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        log_level=settings.system.log_level.lower(),
        loop="asyncio",
    )
    server = uvicorn.Server(server_config)
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        logger.info("Server exiting...")


if __name__ == "__main__":
    run()
