"""
Customer routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from autocare.dependencies import get_customers, get_progress_service
from autocare.repository import CustomerRepository
from autocare.schemas.customer import Appointment, AppointmentCreate, CustomerRecord
from autocare.services.progress import ProgressService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/{customer_id}", response_model=CustomerRecord)
def get_customer(
    customer_id: str,
    customers: CustomerRepository = Depends(get_customers)
):
    """
    Get a customer's full record.
    """
    record = customers.get(customer_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return record


@router.put("/{customer_id}", response_model=CustomerRecord)
def put_customer(
    customer_id: str,
    record: CustomerRecord,
    customers: CustomerRepository = Depends(get_customers)
):
    """
    Create or replace a customer's record.
    """
    if record.id != customer_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Record id does not match customer id"
        )
    customers.put(customer_id, record)
    return record


@router.post("/{customer_id}/appointments", response_model=Appointment, status_code=status.HTTP_201_CREATED)
def book_appointment(
    customer_id: str,
    booking: AppointmentCreate,
    service: ProgressService = Depends(get_progress_service)
):
    """
    Book a service appointment.
    """
    appointment = service.book_appointment(customer_id, booking)
    if appointment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return appointment
