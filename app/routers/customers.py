# app/routers/customers.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.schemas.customer import CustomerCreate, CustomerOut
from app.services import customer_service

router = APIRouter()


@router.get("/customers", response_model=list[CustomerOut], summary="List customers")
def list_customers(limit: Optional[int] = None, db: Session = Depends(get_db)):
    return customer_service.list_customers(db, limit)


@router.post("/customers", response_model=CustomerOut, status_code=201, summary="Add a customer")
def create_customer(body: CustomerCreate, db: Session = Depends(get_db)):
    return customer_service.create_customer(db, body)


@router.get("/customers/{customer_id}", response_model=CustomerOut, summary="Customer detail")
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    return customer_service.get_customer(db, customer_id)


@router.delete("/customers/{customer_id}", summary="Remove a customer without rentals")
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    customer_service.delete_customer(db, customer_id)
    return {"status": "removed", "customer_id": customer_id}
