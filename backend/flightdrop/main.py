import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flightdrop.config import settings

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
QUIET_LOGGERS = ("httpcore", "httpx", "uvicorn.access", "sqlalchemy.engine")


def setup_logging() -> None:
    """Console plus rotating file under backend/logs."""
    LOG_DIR.mkdir(exist_ok=True)
    file_handler = RotatingFileHandler(
        LOG_DIR / "flightdrop.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(), file_handler],
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


setup_logging()

from flightdrop.database import create_tables  # noqa: E402
from flightdrop.routers import airports, flights  # noqa: E402
from flightdrop.services.booking_client import booking_client  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await create_tables()
    except Exception as e:
        logger.error(f"Could not prepare database tables: {e}")
        raise
    logger.info("FlightDrop started")

    yield

    await booking_client.close()
    logger.info("FlightDrop stopped, flights API client closed")


app = FastAPI(
    title="FlightDrop",
    description="Flight search with saved offers and price trend suggestions",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(flights.router, prefix="/api/flights", tags=["flights"])
app.include_router(airports.router, prefix="/api/airports", tags=["airports"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "flightdrop"}
