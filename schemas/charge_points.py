"""Pydantic schemas for the charge point API (camelCase on the wire)."""
from pydantic import BaseModel, Field, field_validator

from utils.serial_numbers import (
    MAX_SERIAL_NUMBER_LENGTH,
    MIN_SERIAL_NUMBER_LENGTH,
    is_valid_serial_number,
)


class ChargePointCreate(BaseModel):
    """Payload for creating a charge point."""

    serial_number: str = Field(alias="serialNumber")

    @field_validator("serial_number")
    @classmethod
    def _validate_serial_number(cls, value: str) -> str:
        if not is_valid_serial_number(value):
            raise ValueError(
                f"serialNumber must be {MIN_SERIAL_NUMBER_LENGTH} to {MAX_SERIAL_NUMBER_LENGTH} characters"
                " and contain at least one letter or digit"
            )
        return value


class ChargePointResponse(BaseModel):
    """Charge point as returned by create and list."""

    id: str
    serial_number: str = Field(alias="serialNumber")
