"""
Notification routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from autocare.dependencies import get_customers, get_notifier
from autocare.repository import CustomerRepository
from autocare.schemas.notification import Notification
from autocare.services.notifications import Notifier

router = APIRouter(prefix="/customers/{customer_id}/notifications", tags=["notifications"])


@router.get("/", response_model=List[Notification])
def get_notifications(
    customer_id: str,
    customers: CustomerRepository = Depends(get_customers)
):
    """
    Get a customer's notifications, oldest first.
    """
    record = customers.get(customer_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return record.notifications


@router.get("/unread")
def get_unread_count(
    customer_id: str,
    notifier: Notifier = Depends(get_notifier)
):
    """
    Count unread notifications.
    """
    return {"unread": notifier.unread_count(customer_id)}


@router.post("/read")
def mark_all_read(
    customer_id: str,
    notifier: Notifier = Depends(get_notifier)
):
    """
    Mark every notification as read.
    """
    return {"marked": notifier.mark_all_read(customer_id)}


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_read(
    customer_id: str,
    notification_id: str,
    notifier: Notifier = Depends(get_notifier)
):
    """
    Mark one notification as read.
    """
    if not notifier.mark_read(customer_id, notification_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found"
        )
    return None
