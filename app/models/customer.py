# app/models/customer.py
"""
Customers table.
Only what rentals need to point at: identity, contact details and licence number.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.lifecycle import TimestampMixin


class Customer(TimestampMixin, Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), unique=True, nullable=False, index=True)
    phone = Column(String(30))
    driver_license_number = Column(String(50), unique=True, nullable=False)

    rentals = relationship("Rental", back_populates="customer")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Customer {self.id} {self.full_name} email={self.email}>"
