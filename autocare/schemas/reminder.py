"""
Pydantic schemas for service reminders.
"""
from pydantic import BaseModel
from typing import Optional


class ReminderCreate(BaseModel):
    """Schema for creating a reminder."""
    customer_id: str
    vehicle_id: str
    service: str = "General Service"
    due_date: str


class Reminder(BaseModel):
    """Upcoming service a customer should be reminded about."""
    id: str
    customer_id: str
    customer_name: str
    vehicle_info: str
    service: str
    due_date: str
    last_reminded: Optional[str] = None
