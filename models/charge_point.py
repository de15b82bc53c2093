"""Charge point model for the reference service."""
import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base
from utils.serial_numbers import MAX_SERIAL_NUMBER_LENGTH


class ChargePoint(Base):
    """Charge point table: server-assigned id and unique serial number."""

    __tablename__ = "charge_point"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    serial_number: Mapped[str] = mapped_column(
        String(MAX_SERIAL_NUMBER_LENGTH), unique=True, nullable=False
    )
