# app/schemas/rental.py
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from app.models.rental import RentalStatus, PaymentStatus
from app.schemas.common import require_text, blank_to_none, reject_cleared

_REQUIRED_TEXT = ("rental_number", "pickup_location", "return_location")
_REQUIRED_FIELDS = _REQUIRED_TEXT + (
    "customer_id", "vehicle_id", "start_date", "end_date",
    "total_amount", "status", "payment_status",
)


def check_date_order(start_date, end_date, actual_return_date=None):
    """Raise if end_date or actual_return_date falls before start_date."""
    if start_date is None:
        return
    if end_date is not None and end_date < start_date:
        raise PydanticCustomError(
            "date_order", "end_date must be on or after start_date", {"field": "end_date"}
        )
    if actual_return_date is not None and actual_return_date < start_date:
        raise PydanticCustomError(
            "date_order", "actual_return_date must be on or after start_date",
            {"field": "actual_return_date"},
        )


class RentalCreate(BaseModel):
    rental_number: str = Field(..., max_length=50)
    customer_id: int
    vehicle_id: int
    start_date: date
    end_date: date
    actual_return_date: Optional[date] = None
    pickup_location: str = Field(..., max_length=200)
    return_location: str = Field(..., max_length=200)
    total_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    security_deposit: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    additional_charges: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    status: Optional[RentalStatus] = None            # RESERVED when left out
    payment_status: Optional[PaymentStatus] = None   # PENDING when left out
    start_mileage: Optional[int] = None
    end_mileage: Optional[int] = None
    notes: Optional[str] = Field(None, max_length=1000)

    check_required_text = field_validator(*_REQUIRED_TEXT)(require_text)
    clean_notes = field_validator("notes")(blank_to_none)

    @model_validator(mode="after")
    def dates_in_order(self):
        check_date_order(self.start_date, self.end_date, self.actual_return_date)
        return self


class RentalUpdate(BaseModel):
    """Partial update. Only the fields sent are changed. Set actual_return_date on return."""
    rental_number: Optional[str] = Field(None, max_length=50)
    customer_id: Optional[int] = None
    vehicle_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    actual_return_date: Optional[date] = None
    pickup_location: Optional[str] = Field(None, max_length=200)
    return_location: Optional[str] = Field(None, max_length=200)
    total_amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    security_deposit: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    additional_charges: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    status: Optional[RentalStatus] = None
    payment_status: Optional[PaymentStatus] = None
    start_mileage: Optional[int] = None
    end_mileage: Optional[int] = None
    notes: Optional[str] = Field(None, max_length=1000)

    check_required_text = field_validator(*_REQUIRED_TEXT)(require_text)
    clean_notes = field_validator("notes")(blank_to_none)

    @model_validator(mode="after")
    def no_cleared_required_fields(self):
        return reject_cleared(self, _REQUIRED_FIELDS)


class RentalOut(BaseModel):
    id: int
    rental_number: str
    customer_id: int
    vehicle_id: int
    start_date: date
    end_date: date
    actual_return_date: Optional[date]
    pickup_location: str
    return_location: str
    total_amount: Decimal
    security_deposit: Optional[Decimal]
    additional_charges: Optional[Decimal]
    status: RentalStatus
    payment_status: PaymentStatus
    start_mileage: Optional[int]
    end_mileage: Optional[int]
    notes: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    # Derived on read
    rental_days: int
    is_overdue: bool
    total_mileage: Optional[int]   # None until both mileage readings exist

    class Config:
        from_attributes = True
