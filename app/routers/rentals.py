# app/routers/rentals.py
"""Rental bookings: CRUD plus the overdue list."""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.rental import RentalStatus
from app.schemas.rental import RentalCreate, RentalUpdate, RentalOut
from app.services import rental_service

router = APIRouter()


@router.get("/rentals", response_model=list[RentalOut], summary="List rentals")
def list_rentals(
    status: Optional[RentalStatus] = None,
    vehicle_id: Optional[int] = None,
    customer_id: Optional[int] = None,
    overdue_only: bool = False,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return rental_service.list_rentals(
        db, status=status, vehicle_id=vehicle_id, customer_id=customer_id,
        overdue_only=overdue_only, limit=limit,
    )


@router.get("/rentals/overdue", response_model=list[RentalOut], summary="Rentals past their end date")
def list_overdue(db: Session = Depends(get_db)):
    """Not returned and end_date before today."""
    return rental_service.list_overdue_rentals(db)


@router.post("/rentals", response_model=RentalOut, status_code=201, summary="Book a rental")
def create_rental(body: RentalCreate, db: Session = Depends(get_db)):
    return rental_service.create_rental(db, body)


@router.get("/rentals/{rental_id}", response_model=RentalOut, summary="Rental detail")
def get_rental(rental_id: int, db: Session = Depends(get_db)):
    return rental_service.get_rental(db, rental_id)


@router.patch("/rentals/{rental_id}", response_model=RentalOut, summary="Update a rental")
def update_rental(rental_id: int, body: RentalUpdate, db: Session = Depends(get_db)):
    """Partial update. Send actual_return_date and end_mileage when the vehicle comes back."""
    return rental_service.update_rental(db, rental_id, body)


@router.delete("/rentals/{rental_id}", summary="Delete a rental")
def delete_rental(rental_id: int, db: Session = Depends(get_db)):
    rental_service.delete_rental(db, rental_id)
    return {"status": "removed", "rental_id": rental_id}
