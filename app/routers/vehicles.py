# app/routers/vehicles.py
"""Fleet CRUD: register, browse, update and remove rentable vehicles."""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.vehicle import VehicleStatus, VehicleType, FuelType
from app.schemas.vehicle import VehicleCreate, VehicleUpdate, VehicleOut
from app.services import vehicle_service

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], summary="List vehicles")
def list_vehicles(
    status: Optional[VehicleStatus] = None,
    vehicle_type: Optional[VehicleType] = None,
    fuel_type: Optional[FuelType] = None,
    available_only: bool = False,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """Filter by status, type or fuel. available_only=true is shorthand for status=AVAILABLE."""
    return vehicle_service.list_vehicles(db, status, vehicle_type, fuel_type, available_only, limit)


@router.post("/vehicles", response_model=VehicleOut, status_code=201, summary="Register a new vehicle")
def create_vehicle(body: VehicleCreate, db: Session = Depends(get_db)):
    return vehicle_service.create_vehicle(db, body)


@router.get("/vehicles/lookup/{registration_number}", summary="Look up a registration number")
def lookup_vehicle(registration_number: str, db: Session = Depends(get_db)):
    vehicle = vehicle_service.lookup_vehicle_by_registration(db, registration_number)
    if not vehicle:
        return {"registration_number": registration_number, "status": "unknown", "registered": False}
    return {"registration_number": registration_number, "status": vehicle.status.value,
            "registered": True, "id": vehicle.id, "display_name": vehicle.display_name,
            "is_available": vehicle.is_available}


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Vehicle detail")
def get_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    return vehicle_service.get_vehicle(db, vehicle_id)


@router.patch("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Update a vehicle")
def update_vehicle(vehicle_id: int, body: VehicleUpdate, db: Session = Depends(get_db)):
    return vehicle_service.update_vehicle(db, vehicle_id, body)


@router.delete("/vehicles/{vehicle_id}", summary="Remove a vehicle and its rentals")
def delete_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    removed = vehicle_service.delete_vehicle(db, vehicle_id)
    return {"status": "removed", "vehicle_id": vehicle_id, "rentals_removed": removed}
