# Schemas package
from .charge_points import ChargePointCreate, ChargePointResponse
from .health import HealthResponse

__all__ = [
    "ChargePointCreate",
    "ChargePointResponse",
    "HealthResponse",
]
