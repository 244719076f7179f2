"""
FastAPI Main Application

Range preview API for Uniswap V3 liquidity positions.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1 import health, ranges, ticks

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logging"""
    logger.info("Starting %s v%s", settings.API_TITLE, settings.API_VERSION)
    logger.info("Factory: %s (chain: %s)", settings.FACTORY_ADDRESS, settings.CHAIN)
    if not settings.GRAPH_API_KEY:
        logger.warning(
            "GRAPH_API_KEY not set; previews by pool_id are unavailable. "
            "Get your API key from: https://thegraph.com/studio/"
        )
    yield
    logger.info("Shutting down %s", settings.API_TITLE)


# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(ranges.router, prefix="/api/v1", tags=["Ranges"])
app.include_router(ticks.router, prefix="/api/v1", tags=["Ticks"])
app.include_router(health.router, prefix="/api/v1", tags=["Health"])


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": settings.API_TITLE,
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION,
        "docs": "/docs",
        "health": "/api/v1/health",
        "timestamp": datetime.utcnow().isoformat()
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
