"""
Service progress tracking.

Each appointment owns an ordered task list. Task status changes go through
`apply_task_status`. Customer records are saved through
`CustomerRepository.put`, which recomputes every `progress` field from its
tasks, so the stored percentage never drifts from the task list.
"""
import logging
import time
import uuid
from datetime import date
from typing import Callable, Optional

from autocare.config import Settings
from autocare.repository import CustomerRepository, ImageRepository
from autocare.schemas.customer import Appointment, AppointmentCreate, CustomerRecord
from autocare.schemas.notification import NotificationDetails
from autocare.schemas.progress import ProgressOverviewEntry, ProgressView, ServiceProgress, TaskView
from autocare.schemas.task import ServiceTask, TaskStatus
from autocare.services.calculator import compute_progress
from autocare.services.images import relevant_images
from autocare.services.notifications import Notifier

logger = logging.getLogger(__name__)

IN_PROGRESS_APPOINTMENT = "in progress"

STATUS_LABELS = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}


def new_task_id() -> str:
    return f"task_{uuid.uuid4().hex[:12]}"


def generate_tasks_for_service(service_names: str) -> list[ServiceTask]:
    """Default task list for a comma-joined service string."""
    services = [name.strip() for name in (service_names or "").split(",")]
    tasks = [ServiceTask(
        id=new_task_id(),
        title="Vehicle Inspection",
        description="Initial check of the vehicle condition",
    )]
    tasks.extend(ServiceTask(id=new_task_id(), title=name) for name in services if name)
    tasks.append(ServiceTask(
        id=new_task_id(),
        title="Final Inspection",
        description="Quality check and road test",
    ))
    return tasks


def apply_task_status(
    task: ServiceTask,
    new_status: TaskStatus,
    technician: Optional[str] = None,
    *,
    today: date,
    default_technician: str,
    stamp_date_on_in_progress: bool = False,
) -> ServiceTask:
    """
    Move `task` to `new_status` in place.

    Any transition is accepted. Going to completed stamps the date and the
    technician; going to in-progress stamps the technician only, unless
    `stamp_date_on_in_progress` is set.
    """
    task.status = new_status
    if new_status == TaskStatus.COMPLETED:
        task.completed_date = today.isoformat()
        task.technician = technician or default_technician
    elif new_status == TaskStatus.IN_PROGRESS:
        task.technician = technician or default_technician
        if stamp_date_on_in_progress:
            task.completed_date = today.isoformat()
    return task


class ProgressService:
    """Reads and mutates service progress held in customer records."""

    def __init__(
        self,
        customers: CustomerRepository,
        images: ImageRepository,
        notifier: Notifier,
        settings: Settings,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.customers = customers
        self.images = images
        self.notifier = notifier
        self.settings = settings
        self._today = today

    def get_progress(self, owner_id: str, appointment_id: str) -> Optional[ServiceProgress]:
        record = self.customers.get(owner_id)
        if record is None:
            return None
        return record.find_progress(appointment_id)

    def _provision(self, record: CustomerRecord, appointment: Appointment) -> ServiceProgress:
        entry = ServiceProgress(
            appointment_id=appointment.id,
            vehicle_id=appointment.vehicle_id,
            tasks=generate_tasks_for_service(appointment.service),
        )
        entry.progress = compute_progress(entry.tasks)
        record.service_progress.append(entry)
        logger.info("Provisioned %d tasks for appointment %s", len(entry.tasks), appointment.id)
        return entry

    def ensure_progress(self, owner_id: str, appointment_id: str) -> Optional[ServiceProgress]:
        """Existing progress for the appointment, created and saved if missing."""
        record = self.customers.get(owner_id)
        if record is None:
            logger.warning("No customer record %s for appointment %s", owner_id, appointment_id)
            return None
        entry = record.find_progress(appointment_id)
        if entry is not None:
            return entry
        appointment = record.find_appointment(appointment_id)
        if appointment is None:
            logger.warning("Appointment %s not found for %s", appointment_id, owner_id)
            return None
        entry = self._provision(record, appointment)
        self.customers.put(owner_id, record)
        return entry

    def set_task_status(
        self,
        appointment_id: str,
        task_id: str,
        new_status: TaskStatus,
        technician: Optional[str] = None,
    ) -> Optional[ServiceProgress]:
        """
        Change one task's status, recompute progress, save, and notify the owner.

        Returns the updated progress record, or None when the appointment has
        no progress record or the task is unknown. Nothing is raised for those.
        """
        new_status = TaskStatus(new_status)
        found = self.customers.find_progress_owner(appointment_id)
        if found is None:
            logger.warning("No progress record for appointment %s; status update skipped", appointment_id)
            return None
        owner_id, record = found
        entry = record.find_progress(appointment_id)
        task = next((t for t in entry.tasks if t.id == task_id), None)
        if task is None:
            logger.warning("Task %s not in appointment %s; status update skipped", task_id, appointment_id)
            return None

        apply_task_status(
            task,
            new_status,
            technician,
            today=self._today(),
            default_technician=self.settings.default_technician,
            stamp_date_on_in_progress=self.settings.stamp_date_on_in_progress,
        )
        self.notifier.attach(
            record,
            f"Service update: {task.title} is now {STATUS_LABELS[new_status]}",
            NotificationDetails(type="service_progress", appointment_id=appointment_id, task_id=task_id),
        )
        self.customers.put(owner_id, record)
        logger.info("Task %s of appointment %s set to %s (progress %d%%)",
                    task_id, appointment_id, new_status.value, entry.progress)
        return entry

    def book_appointment(self, owner_id: str, booking: AppointmentCreate) -> Optional[Appointment]:
        record = self.customers.get(owner_id)
        if record is None:
            logger.warning("Cannot book for %s: no customer record", owner_id)
            return None
        appointment = Appointment(
            id=f"appt-{time.time_ns() // 1_000}",
            service=", ".join(s.strip() for s in booking.services if s.strip()),
            date=booking.date,
            time=booking.time,
            amount=booking.amount,
            vehicle_id=booking.vehicle_id,
        )
        record.upcoming_services.append(appointment)
        self.customers.put(owner_id, record)
        logger.info("Booked appointment %s for %s", appointment.id, owner_id)
        return appointment

    def update_appointment_status(self, owner_id: str, appointment_id: str, status: str) -> Optional[Appointment]:
        """
        Set an appointment's status and notify the customer. Moving it to
        In Progress provisions its progress record if there is none yet.
        """
        record = self.customers.get(owner_id)
        if record is None:
            logger.warning("No customer record %s; appointment update skipped", owner_id)
            return None
        appointment = record.find_appointment(appointment_id)
        if appointment is None:
            logger.warning("Appointment %s not found for %s", appointment_id, owner_id)
            return None

        appointment.status = status
        if status.strip().lower() == IN_PROGRESS_APPOINTMENT and record.find_progress(appointment_id) is None:
            self._provision(record, appointment)
        self.notifier.attach(
            record,
            f"Your appointment for {appointment.service} is now {status}",
            NotificationDetails(type="appointment_status", appointment_id=appointment_id),
        )
        self.customers.put(owner_id, record)
        return appointment

    def _view(self, entry: ServiceProgress, viewer_id: Optional[str]) -> ProgressView:
        pool = self.images.list()
        return ProgressView(
            appointment_id=entry.appointment_id,
            vehicle_id=entry.vehicle_id,
            progress=entry.progress,
            tasks=[
                TaskView(**task.model_dump(), resolved_images=relevant_images(task, pool, viewer_id))
                for task in entry.tasks
            ],
        )

    def customer_view(self, owner_id: str) -> Optional[list[ProgressView]]:
        """All progress for a customer, with images resolved for that customer."""
        record = self.customers.get(owner_id)
        if record is None:
            return None
        return [self._view(entry, owner_id) for entry in record.service_progress]

    def appointment_view(self, owner_id: str, appointment_id: str) -> Optional[ProgressView]:
        """Staff view of one appointment, provisioning tasks on first look."""
        entry = self.ensure_progress(owner_id, appointment_id)
        if entry is None:
            return None
        return self._view(entry, owner_id)

    def overview(self) -> list[ProgressOverviewEntry]:
        rows = []
        for owner_id, record in self.customers.iter_customers():
            for entry in record.service_progress:
                appointment = record.find_appointment(entry.appointment_id)
                vehicle = record.find_vehicle(entry.vehicle_id)
                rows.append(ProgressOverviewEntry(
                    owner_id=owner_id,
                    customer_name=record.full_name or "Unknown Customer",
                    appointment_id=entry.appointment_id,
                    service=appointment.service if appointment else None,
                    appointment_status=appointment.status if appointment else None,
                    vehicle=f"{vehicle.make} {vehicle.model} ({vehicle.license_plate})" if vehicle else None,
                    progress=entry.progress,
                    tasks=entry.tasks,
                ))
        return rows
