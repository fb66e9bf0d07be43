"""
Pydantic schemas for stored records and request/response validation.
"""
from autocare.schemas.image import ImageCategory, TaskImage, SharedImage, SharedImageCreate
from autocare.schemas.task import TaskStatus, ServiceTask
from autocare.schemas.notification import NotificationDetails, Notification
from autocare.schemas.progress import (
    ServiceProgress, TaskStatusUpdate, AppointmentStatusUpdate,
    TaskView, ProgressView, ProgressOverviewEntry,
)
from autocare.schemas.customer import Vehicle, Appointment, AppointmentCreate, CustomerRecord
from autocare.schemas.reminder import Reminder, ReminderCreate

__all__ = [
    "ImageCategory", "TaskImage", "SharedImage", "SharedImageCreate",
    "TaskStatus", "ServiceTask",
    "NotificationDetails", "Notification",
    "ServiceProgress", "TaskStatusUpdate", "AppointmentStatusUpdate",
    "TaskView", "ProgressView", "ProgressOverviewEntry",
    "Vehicle", "Appointment", "AppointmentCreate", "CustomerRecord",
    "Reminder", "ReminderCreate",
]
