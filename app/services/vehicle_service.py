# app/services/vehicle_service.py
"""
Vehicle fleet management helpers.
Used by the vehicles router and by rental_service to resolve vehicle references.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.config import settings
from app.models.vehicle import Vehicle, VehicleStatus, VehicleType, FuelType
from app.schemas.vehicle import VehicleCreate, VehicleUpdate
from app.services.persistence import commit_or_reject, apply_changes
from app.utils.errors import RecordNotFound
from app.utils.logger import get_logger

logger = get_logger(__name__)

UNIQUE_FIELDS = ("registration_number", "vin_number")


def create_vehicle(db: Session, body: VehicleCreate) -> Vehicle:
    vehicle = Vehicle(**body.model_dump())
    db.add(vehicle)
    commit_or_reject(db, "Vehicle", UNIQUE_FIELDS, vehicle)
    logger.info(f"[Vehicle] created {vehicle.registration_number} ({vehicle.display_name})")
    return vehicle


def get_vehicle(db: Session, vehicle_id: int) -> Vehicle:
    vehicle = db.get(Vehicle, vehicle_id)
    if not vehicle:
        raise RecordNotFound("Vehicle", vehicle_id)
    return vehicle


def lookup_vehicle_by_registration(db: Session, registration_number: str) -> Optional[Vehicle]:
    """Find a vehicle by registration number. Returns None if not found."""
    return db.query(Vehicle).filter(Vehicle.registration_number == registration_number).first()


def list_vehicles(
    db: Session,
    status: Optional[VehicleStatus] = None,
    vehicle_type: Optional[VehicleType] = None,
    fuel_type: Optional[FuelType] = None,
    available_only: bool = False,
    limit: Optional[int] = None,
) -> list[Vehicle]:
    q = db.query(Vehicle)
    if available_only:
        status = VehicleStatus.AVAILABLE
    if status:
        q = q.filter(Vehicle.status == status)
    if vehicle_type:
        q = q.filter(Vehicle.vehicle_type == vehicle_type)
    if fuel_type:
        q = q.filter(Vehicle.fuel_type == fuel_type)
    return q.order_by(Vehicle.id).limit(limit or settings.DEFAULT_PAGE_LIMIT).all()


def update_vehicle(db: Session, vehicle_id: int, body: VehicleUpdate) -> Vehicle:
    vehicle = get_vehicle(db, vehicle_id)
    changes = body.model_dump(exclude_unset=True)
    apply_changes(vehicle, changes)
    commit_or_reject(db, "Vehicle", UNIQUE_FIELDS, vehicle)
    logger.info(f"[Vehicle] updated {vehicle.registration_number}: {sorted(changes)}")
    return vehicle


def delete_vehicle(db: Session, vehicle_id: int) -> int:
    """Delete a vehicle and, through the relationship cascade, all of its rentals."""
    vehicle = get_vehicle(db, vehicle_id)
    registration_number = vehicle.registration_number
    rental_count = len(vehicle.rentals)
    db.delete(vehicle)
    db.commit()
    logger.info(f"[Vehicle] deleted {registration_number} with {rental_count} rental(s)")
    return rental_count
