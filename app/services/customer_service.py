# app/services/customer_service.py
"""Customer records. Rentals reference customers, so a customer with rentals cannot be removed."""

from sqlalchemy.orm import Session
from app.config import settings
from app.models.customer import Customer
from app.schemas.customer import CustomerCreate
from app.services.persistence import commit_or_reject
from app.utils.errors import RecordNotFound, RecordRejected, ErrorCategory
from app.utils.logger import get_logger

logger = get_logger(__name__)

UNIQUE_FIELDS = ("email", "driver_license_number")


def create_customer(db: Session, body: CustomerCreate) -> Customer:
    customer = Customer(**body.model_dump())
    db.add(customer)
    commit_or_reject(db, "Customer", UNIQUE_FIELDS, customer)
    logger.info(f"[Customer] created {customer.id} ({customer.full_name})")
    return customer


def get_customer(db: Session, customer_id: int) -> Customer:
    customer = db.get(Customer, customer_id)
    if not customer:
        raise RecordNotFound("Customer", customer_id)
    return customer


def list_customers(db: Session, limit: int = None) -> list[Customer]:
    return db.query(Customer).order_by(Customer.id).limit(limit or settings.DEFAULT_PAGE_LIMIT).all()


def delete_customer(db: Session, customer_id: int):
    customer = get_customer(db, customer_id)
    if customer.rentals:
        logger.warning(f"[Customer] refused delete of {customer_id}: {len(customer.rentals)} rental(s)")
        raise RecordRejected(
            "customer_id", ErrorCategory.REFERENCE_CONFLICT,
            f"Customer {customer_id} still has {len(customer.rentals)} rental(s)",
        )
    db.delete(customer)
    db.commit()
    logger.info(f"[Customer] deleted {customer_id}")
