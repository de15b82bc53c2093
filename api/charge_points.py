"""Charge point API routes (reference implementation of the contract under test)."""
import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from db import get_db
from models.charge_point import ChargePoint as ChargePointModel
from repositories.charge_point_repository import (
    create_charge_point as repo_create_charge_point,
    delete_charge_point as repo_delete_charge_point,
    get_charge_point_by_serial_number as repo_get_by_serial_number,
    list_charge_points as repo_list_charge_points,
)
from schemas.charge_points import ChargePointCreate, ChargePointResponse

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/charge-point", tags=["charge-points"])


async def _charge_point_payload(request: Request) -> ChargePointCreate:
    """Parse the create body. The JSON content type is required; every failure is a 400."""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Content-Type must be application/json",
        )
    body = await request.body()
    try:
        return ChargePointCreate.model_validate_json(body or b"{}")
    except ValidationError as e:
        detail = "; ".join(err["msg"] for err in e.errors())
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail) from e


def _parse_charge_point_id(charge_point_id: str) -> str:
    """Return the canonical UUID string; 400 if the id is not a UUID."""
    try:
        return str(uuid.UUID(charge_point_id))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid charge point id",
        ) from e


def _to_response(row: ChargePointModel) -> ChargePointResponse:
    return ChargePointResponse(id=row.id, serialNumber=row.serial_number)


@router.get("", response_model=list[ChargePointResponse])
def list_charge_points(db: Session = Depends(get_db)) -> list[ChargePointResponse]:
    """List all charge points."""
    return [_to_response(row) for row in repo_list_charge_points(db)]


@router.post(
    "",
    response_model=ChargePointResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_charge_point(
    payload: ChargePointCreate = Depends(_charge_point_payload),
    db: Session = Depends(get_db),
) -> ChargePointResponse:
    """Create a charge point. Duplicate serial numbers are rejected with 400."""
    if repo_get_by_serial_number(db, payload.serial_number) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="serialNumber already exists",
        )
    try:
        row = repo_create_charge_point(db, payload.serial_number)
    except IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="serialNumber already exists",
        ) from e
    LOG.info("Created charge point %s (%s)", row.id, row.serial_number)
    return _to_response(row)


@router.delete("/{charge_point_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_charge_point(charge_point_id: str, db: Session = Depends(get_db)) -> Response:
    """Delete a charge point by id. 400 for a malformed id, 404 if absent."""
    canonical_id = _parse_charge_point_id(charge_point_id)
    if not repo_delete_charge_point(db, canonical_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Charge point not found")
    LOG.info("Deleted charge point %s", canonical_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
