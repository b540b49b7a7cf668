# app/models/rental.py
"""
Rental bookings table.
Each rental belongs to exactly one vehicle and one customer (foreign keys live here).
Duration, overdue state and driven distance are derived from the stored fields on read.
"""

import enum
from datetime import date
from typing import Optional

from sqlalchemy import Column, Integer, String, Date, Numeric, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.lifecycle import TimestampMixin


class RentalStatus(str, enum.Enum):
    RESERVED = "RESERVED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    OVERDUE = "OVERDUE"


class PaymentStatus(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    PARTIAL = "PARTIAL"
    REFUNDED = "REFUNDED"


class Rental(TimestampMixin, Base):
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    rental_number = Column(String(50), unique=True, nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    actual_return_date = Column(Date)             # set when the vehicle is physically returned
    pickup_location = Column(String(200), nullable=False)
    return_location = Column(String(200), nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    security_deposit = Column(Numeric(10, 2))
    additional_charges = Column(Numeric(10, 2))
    status = Column(Enum(RentalStatus), nullable=False, index=True)
    payment_status = Column(Enum(PaymentStatus), nullable=False)
    start_mileage = Column(Integer)
    end_mileage = Column(Integer)
    notes = Column(String(1000))

    vehicle = relationship("Vehicle", back_populates="rentals")
    customer = relationship("Customer", back_populates="rentals")

    def apply_defaults(self):
        if self.status is None:
            self.status = RentalStatus.RESERVED
        if self.payment_status is None:
            self.payment_status = PaymentStatus.PENDING

    @property
    def rental_days(self) -> Optional[int]:
        """Days billed, inclusive of both ends. Uses the actual return date once known."""
        end = self.actual_return_date or self.end_date
        if self.start_date is None or end is None:
            return None
        return (end - self.start_date).days + 1

    def overdue_as_of(self, today: Optional[date] = None) -> bool:
        if self.actual_return_date is not None or self.end_date is None:
            return False
        return (today or date.today()) > self.end_date

    @property
    def is_overdue(self) -> bool:
        return self.overdue_as_of()

    @property
    def total_mileage(self) -> Optional[int]:
        # Unknown until both odometer readings are recorded
        if self.start_mileage is None or self.end_mileage is None:
            return None
        return self.end_mileage - self.start_mileage

    def __repr__(self):
        return f"<Rental {self.rental_number} vehicle={self.vehicle_id} status={self.status}>"
