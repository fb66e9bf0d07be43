"""
Pydantic schemas for customer records.
"""
from pydantic import BaseModel, Field
from typing import Optional

from autocare.schemas.notification import Notification
from autocare.schemas.progress import ServiceProgress


class Vehicle(BaseModel):
    """Customer vehicle."""
    id: str
    year: str = ""
    make: str = ""
    model: str = ""
    license_plate: str = ""


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment."""
    services: list[str] = Field(min_length=1)
    date: str
    time: str
    amount: Optional[str] = None
    vehicle_id: Optional[str] = None


class Appointment(BaseModel):
    """Booked service appointment."""
    id: str
    service: str
    date: Optional[str] = None
    time: Optional[str] = None
    amount: Optional[str] = None
    status: str = "Scheduled"
    vehicle_id: Optional[str] = None


class CustomerRecord(BaseModel):
    """Everything stored for one customer, read and written as a whole."""
    id: str
    full_name: str = ""
    email: str = ""
    phone: str = ""
    role: str = "customer"
    vehicles: list[Vehicle] = Field(default_factory=list)
    upcoming_services: list[Appointment] = Field(default_factory=list)
    notifications: list[Notification] = Field(default_factory=list)
    service_progress: list[ServiceProgress] = Field(default_factory=list)

    def find_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return next((a for a in self.upcoming_services if a.id == appointment_id), None)

    def find_progress(self, appointment_id: str) -> Optional[ServiceProgress]:
        return next((p for p in self.service_progress if p.appointment_id == appointment_id), None)

    def find_vehicle(self, vehicle_id: Optional[str]) -> Optional[Vehicle]:
        return next((v for v in self.vehicles if v.id == vehicle_id), None)
