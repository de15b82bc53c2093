"""Charge point repository: list, get, create, delete."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.charge_point import ChargePoint as ChargePointModel


def create_charge_point(session: Session, serial_number: str) -> ChargePointModel:
    """Create a charge point, commit, and return it. Raises IntegrityError on a duplicate serial number."""
    charge_point = ChargePointModel(serial_number=serial_number)
    session.add(charge_point)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    session.refresh(charge_point)
    return charge_point


def get_charge_point(session: Session, charge_point_id: str) -> Optional[ChargePointModel]:
    """Return charge point by id or None."""
    return session.get(ChargePointModel, charge_point_id)


def get_charge_point_by_serial_number(session: Session, serial_number: str) -> Optional[ChargePointModel]:
    """Return charge point by serial number or None."""
    return session.execute(
        select(ChargePointModel).where(ChargePointModel.serial_number == serial_number)
    ).scalar_one_or_none()


def list_charge_points(session: Session) -> list[ChargePointModel]:
    """Return all charge points ordered by serial number."""
    result = session.execute(select(ChargePointModel).order_by(ChargePointModel.serial_number))
    return list(result.scalars().all())


def delete_charge_point(session: Session, charge_point_id: str) -> bool:
    """Delete charge point by id. Returns True if deleted, False if not found."""
    charge_point = get_charge_point(session, charge_point_id)
    if charge_point is None:
        return False
    session.delete(charge_point)
    session.commit()
    return True
