"""
Service progress routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from autocare.auth import require_admin
from autocare.dependencies import get_progress_service
from autocare.schemas.customer import Appointment
from autocare.schemas.progress import (
    AppointmentStatusUpdate, ProgressOverviewEntry, ProgressView, ServiceProgress, TaskStatusUpdate,
)
from autocare.services.progress import ProgressService

router = APIRouter(tags=["progress"])


@router.get("/customers/{customer_id}/progress", response_model=List[ProgressView])
def get_customer_progress(
    customer_id: str,
    service: ProgressService = Depends(get_progress_service)
):
    """
    Get all service progress for a customer, with matched images.
    """
    views = service.customer_view(customer_id)
    if views is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return views


@router.get("/progress", response_model=List[ProgressOverviewEntry])
def get_progress_overview(
    service: ProgressService = Depends(get_progress_service),
    role: str = Depends(require_admin)
):
    """
    Get progress for every appointment across all customers.
    """
    return service.overview()


@router.get("/customers/{customer_id}/appointments/{appointment_id}/progress", response_model=ProgressView)
def get_appointment_progress(
    customer_id: str,
    appointment_id: str,
    service: ProgressService = Depends(get_progress_service),
    role: str = Depends(require_admin)
):
    """
    Get progress for one appointment, generating default tasks on first view.
    """
    view = service.appointment_view(customer_id, appointment_id)
    if view is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Appointment not found"
        )
    return view


@router.put("/progress/{appointment_id}/tasks/{task_id}", response_model=ServiceProgress)
def update_task_status(
    appointment_id: str,
    task_id: str,
    update: TaskStatusUpdate,
    service: ProgressService = Depends(get_progress_service),
    role: str = Depends(require_admin)
):
    """
    Change a task's status.
    """
    entry = service.set_task_status(appointment_id, task_id, update.status, update.technician)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return entry


@router.put("/customers/{customer_id}/appointments/{appointment_id}/status", response_model=Appointment)
def update_appointment_status(
    customer_id: str,
    appointment_id: str,
    update: AppointmentStatusUpdate,
    service: ProgressService = Depends(get_progress_service),
    role: str = Depends(require_admin)
):
    """
    Change an appointment's status.
    """
    appointment = service.update_appointment_status(customer_id, appointment_id, update.status)
    if appointment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Appointment not found"
        )
    return appointment
