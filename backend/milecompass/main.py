from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from milecompass.api import health, mile_charts, programs, search
from milecompass.config import get_settings
from milecompass.services.mile_chart_registry import get_mile_chart_registry

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Mile Compass ({settings.env})")

    registry = get_mile_chart_registry()
    logger.info(f"Mile chart registry loaded with {len(registry.charts())} charts")

    offer_source = search.get_offer_source()
    if offer_source.is_available():
        logger.info(f"Offer source: {settings.offer_source_url}")
    else:
        logger.info("Offer source not configured - searches will use fallback offers")

    yield

    logger.info("Shutting down Mile Compass")
    await offer_source.close()


app = FastAPI(
    title="Mile Compass",
    description="Compare airline mile redemptions against cash fares",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["health"])
app.include_router(search.router, prefix="/api/flights", tags=["search"])
app.include_router(programs.router, prefix="/api/programs", tags=["programs"])
app.include_router(mile_charts.router, prefix="/api/mile-charts", tags=["mile-charts"])


@app.get("/ping")
async def ping():
    """Simple ping endpoint for health checks."""
    return {"status": "ok"}
