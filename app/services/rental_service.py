# app/services/rental_service.py
"""
Rental bookings: create, read, partial update, delete.

Rentals hold the foreign keys to their vehicle and customer; both must exist
before a rental is written. Status values are stored as given: no automatic
RESERVED → ACTIVE → COMPLETED transitions happen here.
"""

from datetime import date
from typing import Optional
from sqlalchemy.orm import Session
from app.config import settings
from app.models.customer import Customer
from app.models.rental import Rental, RentalStatus
from app.models.vehicle import Vehicle
from app.schemas.rental import RentalCreate, RentalUpdate
from app.services.persistence import commit_or_reject, apply_changes
from app.utils.errors import RecordNotFound, RecordRejected, ErrorCategory
from app.utils.logger import get_logger

logger = get_logger(__name__)

UNIQUE_FIELDS = ("rental_number",)


def _check_references(db: Session, vehicle_id: Optional[int], customer_id: Optional[int]):
    if vehicle_id is not None and db.get(Vehicle, vehicle_id) is None:
        raise RecordRejected("vehicle_id", ErrorCategory.UNKNOWN_REFERENCE,
                             f"vehicle_id: Vehicle {vehicle_id} does not exist")
    if customer_id is not None and db.get(Customer, customer_id) is None:
        raise RecordRejected("customer_id", ErrorCategory.UNKNOWN_REFERENCE,
                             f"customer_id: Customer {customer_id} does not exist")


def create_rental(db: Session, body: RentalCreate) -> Rental:
    _check_references(db, body.vehicle_id, body.customer_id)
    rental = Rental(**body.model_dump())
    db.add(rental)
    commit_or_reject(db, "Rental", UNIQUE_FIELDS, rental)
    logger.info(
        f"[Rental] created {rental.rental_number} vehicle={rental.vehicle_id} "
        f"customer={rental.customer_id} {rental.start_date}→{rental.end_date}"
    )
    return rental


def get_rental(db: Session, rental_id: int) -> Rental:
    rental = db.get(Rental, rental_id)
    if not rental:
        raise RecordNotFound("Rental", rental_id)
    return rental


def list_rentals(
    db: Session,
    status: Optional[RentalStatus] = None,
    vehicle_id: Optional[int] = None,
    customer_id: Optional[int] = None,
    overdue_only: bool = False,
    today: Optional[date] = None,
    limit: Optional[int] = None,
) -> list[Rental]:
    q = db.query(Rental)
    if status:
        q = q.filter(Rental.status == status)
    if vehicle_id is not None:
        q = q.filter(Rental.vehicle_id == vehicle_id)
    if customer_id is not None:
        q = q.filter(Rental.customer_id == customer_id)
    if overdue_only:
        # Same rule as Rental.overdue_as_of, pushed down to SQL
        q = q.filter(Rental.actual_return_date.is_(None), Rental.end_date < (today or date.today()))
    return q.order_by(Rental.start_date.desc(), Rental.id.desc()).limit(limit or settings.DEFAULT_PAGE_LIMIT).all()


def list_overdue_rentals(db: Session, today: Optional[date] = None) -> list[Rental]:
    """Rentals past their end date that have not been returned yet."""
    return list_rentals(db, overdue_only=True, today=today)


def update_rental(db: Session, rental_id: int, body: RentalUpdate) -> Rental:
    rental = get_rental(db, rental_id)
    changes = body.model_dump(exclude_unset=True)
    _check_references(db, changes.get("vehicle_id"), changes.get("customer_id"))

    start = changes.get("start_date", rental.start_date)
    end = changes.get("end_date", rental.end_date)
    returned = changes.get("actual_return_date", rental.actual_return_date)
    if end < start:
        raise RecordRejected("end_date", ErrorCategory.OUT_OF_RANGE,
                             "end_date: end_date must be on or after start_date")
    if returned is not None and returned < start:
        raise RecordRejected("actual_return_date", ErrorCategory.OUT_OF_RANGE,
                             "actual_return_date: actual_return_date must be on or after start_date")

    apply_changes(rental, changes)
    commit_or_reject(db, "Rental", UNIQUE_FIELDS, rental)
    logger.info(f"[Rental] updated {rental.rental_number}: {sorted(changes)}")
    return rental


def delete_rental(db: Session, rental_id: int):
    rental = get_rental(db, rental_id)
    rental_number = rental.rental_number
    db.delete(rental)
    db.commit()
    logger.info(f"[Rental] deleted {rental_number}")
