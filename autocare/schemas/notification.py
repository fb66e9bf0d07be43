"""
Pydantic schemas for customer notifications.
"""
from pydantic import BaseModel
from typing import Optional


class NotificationDetails(BaseModel):
    """What a notification refers to."""
    type: str
    appointment_id: Optional[str] = None
    task_id: Optional[str] = None


class Notification(BaseModel):
    """Entry in a customer's notification list."""
    id: str
    message: str
    date: str
    read: bool = False
    details: Optional[NotificationDetails] = None
