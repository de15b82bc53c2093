"""Charge Point reference service: FastAPI double of the system under test.

Run with ``uvicorn main:app --port 3001`` and point API_BASE_URL (and
UI_BASE_URL, since the same app serves the installation form) at it.
"""
import logging

from fastapi import FastAPI

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.charge_points import router as charge_points_router
from api.ui import router as ui_router
from db import engine
from models import Base
from models.charge_point import ChargePoint  # noqa: F401 - register with Base
from schemas.health import HealthResponse

# redirect_slashes off so DELETE /charge-point/ is a plain 404.
app = FastAPI(
    title="Charge Point Reference Service",
    description="Reference implementation of the charge point CRUD contract",
    version="0.1.0",
    redirect_slashes=False,
)

app.include_router(charge_points_router)
app.include_router(ui_router)


@app.get("/api/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    """Health route for readiness checks."""
    return HealthResponse()


@app.on_event("startup")
def startup() -> None:
    """Create tables."""
    Base.metadata.create_all(engine)
