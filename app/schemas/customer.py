# app/schemas/customer.py
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional
from app.schemas.common import require_text, blank_to_none


class CustomerCreate(BaseModel):
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=200)
    phone: Optional[str] = Field(None, max_length=30)
    driver_license_number: str = Field(..., max_length=50)

    check_required_text = field_validator(
        "first_name", "last_name", "email", "driver_license_number"
    )(require_text)
    clean_phone = field_validator("phone")(blank_to_none)


class CustomerOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: Optional[str]
    driver_license_number: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
