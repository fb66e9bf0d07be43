"""
Pydantic schemas for service tasks.
"""
from pydantic import BaseModel
from typing import Optional
import enum

from autocare.schemas.image import TaskImage


class TaskStatus(str, enum.Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ServiceTask(BaseModel):
    """One step of a service appointment."""
    id: str
    title: str = ""
    status: TaskStatus = TaskStatus.PENDING
    description: Optional[str] = None
    completed_date: Optional[str] = None
    technician: Optional[str] = None
    images: Optional[list[TaskImage]] = None
