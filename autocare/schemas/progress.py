"""
Pydantic schemas for service progress.
"""
from pydantic import BaseModel, Field
from typing import Optional, Union

from autocare.schemas.image import SharedImage, TaskImage
from autocare.schemas.task import ServiceTask, TaskStatus


class ServiceProgress(BaseModel):
    """
    Progress record for one appointment.

    `progress` is derived from `tasks` and is only ever written by the
    progress service, which recomputes it on every save.
    """
    appointment_id: str
    vehicle_id: Optional[str] = None
    progress: int = 0
    tasks: list[ServiceTask] = Field(default_factory=list)


class TaskStatusUpdate(BaseModel):
    """Schema for changing a task's status."""
    status: TaskStatus
    technician: Optional[str] = None


class AppointmentStatusUpdate(BaseModel):
    """Schema for changing an appointment's status."""
    status: str


class TaskView(ServiceTask):
    """Task together with the images resolved for the viewer."""
    resolved_images: list[Union[TaskImage, SharedImage]] = Field(default_factory=list)


class ProgressView(BaseModel):
    """Progress record as presented to a viewer."""
    appointment_id: str
    vehicle_id: Optional[str] = None
    progress: int
    tasks: list[TaskView]


class ProgressOverviewEntry(BaseModel):
    """Admin overview row: a progress record with its owner context."""
    owner_id: str
    customer_name: str
    appointment_id: str
    service: Optional[str] = None
    appointment_status: Optional[str] = None
    vehicle: Optional[str] = None
    progress: int
    tasks: list[ServiceTask]
