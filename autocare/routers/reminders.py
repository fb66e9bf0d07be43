"""
Service reminder routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from autocare.auth import require_admin
from autocare.dependencies import get_reminder_service, get_reminders
from autocare.repository import ReminderRepository
from autocare.schemas.reminder import Reminder, ReminderCreate
from autocare.services.reminders import ReminderService

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.get("/", response_model=List[Reminder])
def get_reminders_list(
    reminders: ReminderRepository = Depends(get_reminders),
    role: str = Depends(require_admin)
):
    """
    Get all service reminders.
    """
    return reminders.list()


@router.post("/", response_model=Reminder, status_code=status.HTTP_201_CREATED)
def create_reminder(
    reminder: ReminderCreate,
    service: ReminderService = Depends(get_reminder_service),
    role: str = Depends(require_admin)
):
    """
    Create a reminder for a customer's vehicle.
    """
    created = service.create(reminder)
    if created is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer or vehicle not found"
        )
    return created


@router.post("/{reminder_id}/send", response_model=Reminder)
def send_reminder(
    reminder_id: str,
    service: ReminderService = Depends(get_reminder_service),
    role: str = Depends(require_admin)
):
    """
    Send a reminder to its customer.
    """
    reminder = service.send(reminder_id)
    if reminder is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Reminder not found"
        )
    return reminder
