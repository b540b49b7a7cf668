# app/schemas/vehicle.py
from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
from decimal import Decimal
from typing import Optional
from app.models.vehicle import VehicleType, FuelType, TransmissionType, VehicleStatus
from app.schemas.common import require_text, blank_to_none, reject_cleared

_REQUIRED_TEXT = ("registration_number", "make", "model", "color")
_REQUIRED_FIELDS = _REQUIRED_TEXT + (
    "year", "vehicle_type", "fuel_type", "transmission",
    "seating_capacity", "daily_rate", "mileage", "status",
)
_OPTIONAL_TEXT = ("vin_number", "license_plate", "insurance_number", "location", "features")


class VehicleCreate(BaseModel):
    registration_number: str = Field(..., max_length=50)
    make: str = Field(..., max_length=50)
    model: str = Field(..., max_length=50)
    year: int = Field(..., ge=1900, le=2030)
    color: str = Field(..., max_length=30)
    vehicle_type: VehicleType
    fuel_type: FuelType
    transmission: TransmissionType
    seating_capacity: int = Field(..., ge=1)
    daily_rate: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    mileage: int = Field(..., ge=0)
    vin_number: Optional[str] = Field(None, max_length=50)
    license_plate: Optional[str] = Field(None, max_length=20)
    insurance_number: Optional[str] = Field(None, max_length=50)
    last_service_date: Optional[datetime] = None
    next_service_date: Optional[datetime] = None
    status: Optional[VehicleStatus] = None       # AVAILABLE when left out
    location: Optional[str] = Field(None, max_length=200)
    features: Optional[str] = Field(None, max_length=1000)

    check_required_text = field_validator(*_REQUIRED_TEXT)(require_text)
    clean_optional_text = field_validator(*_OPTIONAL_TEXT)(blank_to_none)


class VehicleUpdate(BaseModel):
    """Partial update. Only the fields sent are changed."""
    registration_number: Optional[str] = Field(None, max_length=50)
    make: Optional[str] = Field(None, max_length=50)
    model: Optional[str] = Field(None, max_length=50)
    year: Optional[int] = Field(None, ge=1900, le=2030)
    color: Optional[str] = Field(None, max_length=30)
    vehicle_type: Optional[VehicleType] = None
    fuel_type: Optional[FuelType] = None
    transmission: Optional[TransmissionType] = None
    seating_capacity: Optional[int] = Field(None, ge=1)
    daily_rate: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    mileage: Optional[int] = Field(None, ge=0)
    vin_number: Optional[str] = Field(None, max_length=50)
    license_plate: Optional[str] = Field(None, max_length=20)
    insurance_number: Optional[str] = Field(None, max_length=50)
    last_service_date: Optional[datetime] = None
    next_service_date: Optional[datetime] = None
    status: Optional[VehicleStatus] = None
    location: Optional[str] = Field(None, max_length=200)
    features: Optional[str] = Field(None, max_length=1000)

    check_required_text = field_validator(*_REQUIRED_TEXT)(require_text)
    clean_optional_text = field_validator(*_OPTIONAL_TEXT)(blank_to_none)

    @model_validator(mode="after")
    def no_cleared_required_fields(self):
        return reject_cleared(self, _REQUIRED_FIELDS)


class VehicleOut(BaseModel):
    id: int
    registration_number: str
    make: str
    model: str
    year: int
    color: str
    vehicle_type: VehicleType
    fuel_type: FuelType
    transmission: TransmissionType
    seating_capacity: int
    daily_rate: Decimal
    mileage: int
    vin_number: Optional[str]
    license_plate: Optional[str]
    insurance_number: Optional[str]
    last_service_date: Optional[datetime]
    next_service_date: Optional[datetime]
    status: VehicleStatus
    location: Optional[str]
    features: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    # Derived on read
    display_name: str
    is_available: bool

    class Config:
        from_attributes = True
