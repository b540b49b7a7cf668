# app/models/vehicle.py
"""
Rental fleet table.
One row per rentable vehicle. Rentals reference vehicles by vehicle_id;
deleting a vehicle deletes its rentals with it.
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Numeric, Enum
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.lifecycle import TimestampMixin


class VehicleType(str, enum.Enum):
    CAR = "CAR"
    SUV = "SUV"
    TRUCK = "TRUCK"
    VAN = "VAN"
    MOTORCYCLE = "MOTORCYCLE"
    CONVERTIBLE = "CONVERTIBLE"
    SEDAN = "SEDAN"
    HATCHBACK = "HATCHBACK"


class FuelType(str, enum.Enum):
    PETROL = "PETROL"
    DIESEL = "DIESEL"
    ELECTRIC = "ELECTRIC"
    HYBRID = "HYBRID"
    CNG = "CNG"


class TransmissionType(str, enum.Enum):
    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"
    CVT = "CVT"


class VehicleStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    RENTED = "RENTED"
    MAINTENANCE = "MAINTENANCE"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"


class Vehicle(TimestampMixin, Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    registration_number = Column(String(50), unique=True, nullable=False, index=True)
    make = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(30), nullable=False)
    vehicle_type = Column(Enum(VehicleType), nullable=False)
    fuel_type = Column(Enum(FuelType), nullable=False)
    transmission = Column(Enum(TransmissionType), nullable=False)
    seating_capacity = Column(Integer, nullable=False)
    daily_rate = Column(Numeric(10, 2), nullable=False)
    mileage = Column(Integer, nullable=False)
    vin_number = Column(String(50), unique=True)     # NULL when unknown, unique otherwise
    license_plate = Column(String(20))
    insurance_number = Column(String(50))
    last_service_date = Column(DateTime)
    next_service_date = Column(DateTime)
    status = Column(Enum(VehicleStatus), nullable=False, index=True)
    location = Column(String(200))
    features = Column(String(1000))

    rentals = relationship(
        "Rental",
        back_populates="vehicle",
        cascade="all, delete-orphan",
    )

    def apply_defaults(self):
        if self.status is None:
            self.status = VehicleStatus.AVAILABLE

    @property
    def display_name(self) -> str:
        return f"{self.year} {self.make} {self.model}"

    @property
    def is_available(self) -> bool:
        return self.status == VehicleStatus.AVAILABLE

    def __repr__(self):
        return f"<Vehicle {self.registration_number} {self.display_name} status={self.status}>"
