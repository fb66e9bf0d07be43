"""
Shared builders for the test suites.
"""
from datetime import date

from autocare.config import Settings
from autocare.events import EventBus
from autocare.repository import CustomerRepository, ImageRepository, MemoryRecordStore
from autocare.schemas.customer import Appointment, CustomerRecord, Vehicle
from autocare.schemas.task import ServiceTask, TaskStatus
from autocare.services.notifications import Notifier
from autocare.services.progress import ProgressService

TODAY = date(2024, 3, 15)


def make_task(title="Oil Change", status=TaskStatus.PENDING, task_id=None, **kwargs):
    return ServiceTask(id=task_id or f"t-{title.lower().replace(' ', '-')}", title=title, status=status, **kwargs)


def tasks_with(*statuses):
    return [make_task(f"Task {i}", status, task_id=f"t{i}") for i, status in enumerate(statuses)]


def make_customer(customer_id="cust_42", service="Oil Change, AC Service", appointment_id="appt-1"):
    return CustomerRecord(
        id=customer_id,
        full_name="Jane Smith",
        email="jane@example.com",
        phone="555-0100",
        vehicles=[Vehicle(id="v-1", year="2020", make="Honda", model="Civic", license_plate="ABC-123")],
        upcoming_services=[Appointment(
            id=appointment_id, service=service, date="2024-03-15", time="10:00", vehicle_id="v-1",
        )],
    )


def build_service(settings=None, bus=None):
    """Memory-backed ProgressService with a fixed date."""
    store = MemoryRecordStore(bus=bus or EventBus())
    customers = CustomerRepository(store)
    images = ImageRepository(store)
    notifier = Notifier(customers)
    service = ProgressService(
        customers, images, notifier, settings or Settings(), today=lambda: TODAY,
    )
    return store, service
